"""Slug derivation for document identifiers"""

import re


_EXTENSION_RE = re.compile(r'\.mdx?$')


def slug_from_identifier(identifier: str) -> str:
    """Final path segment of identifier with a trailing .md/.mdx removed."""
    name = identifier.replace('\\', '/').rsplit('/', 1)[-1]
    return _EXTENSION_RE.sub('', name)
