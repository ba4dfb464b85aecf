"""Root test configuration: isolate each test from local config and MDBLOG_* env vars"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test from an empty directory with no MDBLOG_* overrides set."""
    for name in list(os.environ):
        if name.startswith("MDBLOG_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
