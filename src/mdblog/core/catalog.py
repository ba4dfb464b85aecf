"""Post catalog: parse every document and answer list/lookup queries"""

import logging
from typing import Mapping, Optional

from mdblog.core.content import bundled_documents
from mdblog.core.frontmatter import FrontmatterParser, load_parser
from mdblog.core.models import ParseResult, Post
from mdblog.core.utils.dates import date_sort_key
from mdblog.core.utils.readtime import WORDS_PER_MINUTE, estimate_read_time
from mdblog.core.utils.slug import slug_from_identifier


logger = logging.getLogger(__name__)


def parse_document(parser: FrontmatterParser, identifier: str, raw: str) -> ParseResult:
    """Parse one document; a parser failure yields empty metadata and the raw text."""
    try:
        metadata, content = parser.parse(raw)
    except Exception as e:
        logger.error(f"Error parsing markdown file {identifier}: {e}")
        return ParseResult(metadata={}, content=raw, error=str(e))
    return ParseResult(metadata=metadata, content=content)


def build_post(identifier: str, result: ParseResult, words_per_minute: int = WORDS_PER_MINUTE) -> Post:
    """Merge frontmatter fields with the derived slug, content, and read time."""
    slug = result.metadata.get('slug') or slug_from_identifier(identifier)
    return Post.model_validate({
        **result.metadata,
        'slug': slug,
        'content': result.content,
        'readTime': estimate_read_time(result.content, words_per_minute),
    })


async def list_posts(
    documents: Optional[Mapping[str, str]] = None,
    *,
    words_per_minute: int = WORDS_PER_MINUTE,
    prefer_external: bool = True,
    ) -> list[Post]:
    """All posts, newest first; undated posts last. Returns [] if the catalog cannot be built."""
    try:
        parser = await load_parser(prefer_external)
        if documents is None:
            documents = bundled_documents()
        posts = [
            build_post(identifier, parse_document(parser, identifier, raw), words_per_minute)
            for identifier, raw in documents.items()
        ]
        # list.sort is stable under reverse=True, so equal dates keep document order
        posts.sort(key=lambda p: date_sort_key(p.date), reverse=True)
        logger.debug(f"Built {len(posts)} post(s) with {parser.name} parser")
        return posts
    except Exception:
        logger.exception("Error loading blog posts")
        return []


async def get_post(
    slug: str,
    documents: Optional[Mapping[str, str]] = None,
    *,
    words_per_minute: int = WORDS_PER_MINUTE,
    prefer_external: bool = True,
    ) -> Optional[Post]:
    """The post whose slug matches exactly, or None."""
    try:
        posts = await list_posts(documents, words_per_minute=words_per_minute, prefer_external=prefer_external)
        return next((p for p in posts if p.slug == slug), None)
    except Exception:
        logger.exception(f"Error loading blog post {slug}")
        return None
