"""Bundled blog documents, read once from package data"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping


logger = logging.getLogger(__name__)

CONTENT_DIR = Path(__file__).resolve().parent.parent / "content"
MD_EXTENSIONS = {'.md', '.mdx'}


def _read_text(path: Path) -> str:
    """Decode path as UTF-8; undecodable bytes become U+FFFD so one bad file never drops the rest."""
    data = path.read_bytes()
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        logger.warning(f"Invalid UTF-8 in {path}, replacing undecodable bytes: {e}")
        return data.decode('utf-8', errors='replace')


def load_documents(root: Path = CONTENT_DIR) -> Mapping[str, str]:
    """Read every .md/.mdx file under root into a read-only {relative path: text} mapping."""
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Content directory not found: {root}")
    files = sorted(p for p in root.rglob('*') if p.suffix in MD_EXTENSIONS and p.is_file())
    return MappingProxyType({p.relative_to(root).as_posix(): _read_text(p) for p in files})


@lru_cache(maxsize=1)
def bundled_documents() -> Mapping[str, str]:
    """The posts shipped with the package; loaded on first use."""
    return load_documents()
