"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_FM_MD = """\
---
title: "Test Doc"
date: 'April 30, 2025'
excerpt: A short summary: with a colon
slug: test-doc
---

# Title

Body content.
"""

PLAIN_MD = """\
# No frontmatter

Just a body.

---

With a horizontal rule.
"""


@pytest.fixture(name="documents")
def documents_fixture():
    """Three documents: an older post, a newer post with an explicit slug, and an undated note."""
    return {
        "blog/older_post.md": '---\ntitle: Older\ndate: "April 25, 2025"\n---\nFirst body.\n',
        "blog/newer_post.md": "---\ntitle: Newer\ndate: April 30, 2025\nslug: newest\n---\nSecond body.\n",
        "notes/undated.md": "Plain text without frontmatter.\n",
    }


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD


@pytest.fixture(name="plain_md")
def plain_md_fixture():
    return PLAIN_MD
