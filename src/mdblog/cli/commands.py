"""CLI command implementations"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, Mapping, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.catalog import get_post, list_posts
from mdblog.core.content import load_documents


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ContentDirOpt = Annotated[Optional[str], typer.Option("--content-dir", help="Markdown root to read instead of bundled posts")]
WpmOpt = Annotated[Optional[int], typer.Option("--wpm", help="Words per minute for read-time estimates")]
BuiltinOpt = Annotated[bool, typer.Option("--builtin", help="Skip python-frontmatter and use the built-in parser")]
JsonOpt = Annotated[bool, typer.Option("--json", help="Print JSON instead of text")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    return settings


def _options(content_dir: Optional[str], wpm: Optional[int], builtin: bool) -> Settings:
    return _settings(overrides={
        "content_dir": content_dir,
        "words_per_minute": wpm,
        "external_parser": False if builtin else None,
    })


def _documents(settings: Settings) -> Optional[Mapping[str, str]]:
    """Documents under settings.content_dir, or None for the bundled posts."""
    if settings.content_dir is None:
        return None
    try:
        return load_documents(Path(settings.content_dir))
    except OSError as e:
        _fail("Could not read content", e)


def list_cmd(
    content_dir: ContentDirOpt = None,
    wpm: WpmOpt = None,
    builtin: BuiltinOpt = False,
    as_json: JsonOpt = False,
    ):
    """List posts, newest first."""
    settings = _options(content_dir, wpm, builtin)
    posts = asyncio.run(list_posts(
        _documents(settings),
        words_per_minute=settings.words_per_minute,
        prefer_external=settings.external_parser,
    ))
    if as_json:
        typer.echo(json.dumps([p.to_dict() for p in posts], indent=2, ensure_ascii=False))
        return
    if not posts:
        typer.echo("No posts found.")
        raise typer.Exit(1)
    for p in posts:
        typer.echo(f"{p.date or '-':<16} {p.read_time:<12} {p.slug}  {p.title or ''}")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Slug of the post to show")],
    content_dir: ContentDirOpt = None,
    wpm: WpmOpt = None,
    builtin: BuiltinOpt = False,
    as_json: JsonOpt = False,
    ):
    """Show a single post by slug."""
    settings = _options(content_dir, wpm, builtin)
    post = asyncio.run(get_post(
        slug,
        _documents(settings),
        words_per_minute=settings.words_per_minute,
        prefer_external=settings.external_parser,
    ))
    if post is None:
        _fail(f"No post with slug '{slug}'")
    if as_json:
        typer.echo(json.dumps(post.to_dict(), indent=2, ensure_ascii=False))
        return
    typer.echo(post.title or post.slug)
    typer.echo(f"{post.date or '-'} | {post.read_time}")
    typer.echo("")
    typer.echo(post.content)
