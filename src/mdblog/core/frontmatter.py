"""Frontmatter extraction: built-in line scanner and python-frontmatter strategy"""

import asyncio
import importlib
import logging
import re
from types import ModuleType
from typing import Any, Protocol


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n(.*)$', re.DOTALL)
_QUOTED_RE = re.compile(r'^(["\'])(.*)\1$', re.DOTALL)

EXTERNAL_MODULE = "frontmatter"


def _unquote(value: str) -> str:
    """Remove one matching pair of surrounding single or double quotes."""
    m = _QUOTED_RE.match(value)
    return m.group(2) if m else value


def scan_metadata_lines(block: str) -> dict[str, str]:
    """Read `key: value` lines from a frontmatter block.

    Lines without a colon (or starting with one) are skipped; the rest of the
    block is still read.
    """
    metadata: dict[str, str] = {}
    for line in block.strip().split('\n'):
        idx = line.find(':')
        if idx <= 0:
            continue
        key = line[:idx].strip().replace('"', '')
        metadata[key] = _unquote(line[idx + 1:].strip())
    return metadata


def parse_frontmatter(raw: str) -> tuple[dict[str, str], str]:
    """Return (metadata, content); text without a frontmatter block comes back unchanged."""
    m = FRONTMATTER_RE.match(raw)
    if not m:
        return {}, raw
    return scan_metadata_lines(m.group(1)), m.group(2).strip()


class FrontmatterParser(Protocol):
    name: str

    def parse(self, raw: str) -> tuple[dict[str, Any], str]:
        ...


class BuiltinParser:
    name = "builtin"

    def parse(self, raw: str) -> tuple[dict[str, Any], str]:
        return parse_frontmatter(raw)


def _line_scan_handler(module: ModuleType):
    """Build a python-frontmatter handler whose YAML engine is the line scanner."""

    class LineScanHandler(module.YAMLHandler):
        def split(self, text):
            # python-frontmatter strips the text and skips detection when a handler is given
            if not self.FM_BOUNDARY.match(text):
                raise ValueError("no frontmatter block")
            return super().split(text)

        def load(self, fm, **kwargs):
            return scan_metadata_lines(fm)

    return LineScanHandler()


class ExternalParser:
    """Parses with a loaded python-frontmatter module."""
    name = "python-frontmatter"

    def __init__(self, module: ModuleType):
        self.module = module
        self.handler = _line_scan_handler(module)

    def parse(self, raw: str) -> tuple[dict[str, Any], str]:
        post = self.module.loads(raw, handler=self.handler)
        return dict(post.metadata), post.content


async def load_parser(prefer_external: bool = True, module_name: str = EXTERNAL_MODULE) -> FrontmatterParser:
    """Import the external parser if possible, else fall back to the built-in one."""
    if not prefer_external:
        return BuiltinParser()
    try:
        module = await asyncio.to_thread(importlib.import_module, module_name)
        return ExternalParser(module)
    except Exception as e:
        logger.warning(f"Failed to load {module_name}, using fallback parser: {e}")
        return BuiltinParser()
