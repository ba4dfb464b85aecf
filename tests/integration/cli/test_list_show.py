"""Integration tests for the list and show commands"""

import json

from typer.testing import CliRunner

from mdblog.cli.cli import app


runner = CliRunner()


def test_list_cmd_bundled():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 4
    assert "design-patterns-builder" in lines[0]
    assert "design-patterns-introduction" in lines[-1]


def test_list_cmd_json_builtin():
    result = runner.invoke(app, ["list", "--json", "--builtin"])
    assert result.exit_code == 0, result.output
    posts = json.loads(result.output)
    assert [p["slug"] for p in posts][-1] == "design-patterns-introduction"
    assert all("readTime" in p for p in posts)


def test_list_cmd_content_dir(tmp_path):
    (tmp_path / "hello.md").write_text("---\ntitle: Hello\ndate: 2025-01-02\n---\nHi there\n")
    result = runner.invoke(app, ["list", "--content-dir", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "hello" in result.output
    assert "Hello" in result.output


def test_list_cmd_empty_content_dir(tmp_path):
    result = runner.invoke(app, ["list", "--content-dir", str(tmp_path)])
    assert result.exit_code == 1
    assert "No posts found" in result.output


def test_list_cmd_missing_content_dir(tmp_path):
    result = runner.invoke(app, ["list", "--content-dir", str(tmp_path / "missing")])
    assert result.exit_code == 1


def test_show_cmd_text():
    result = runner.invoke(app, ["show", "design-patterns-singleton"])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("Singleton Design Pattern")
    assert "min read" in result.output


def test_show_cmd_json_with_wpm():
    result = runner.invoke(app, ["show", "design-patterns-introduction", "--json", "--wpm", "1"])
    assert result.exit_code == 0, result.output
    post = json.loads(result.output)
    assert post["date"] == "April 25, 2025"
    assert int(post["readTime"].split()[0]) > 100


def test_show_cmd_unknown_slug():
    result = runner.invoke(app, ["show", "nonexistent"])
    assert result.exit_code == 1


def test_invalid_config_reported(monkeypatch):
    monkeypatch.setenv("MDBLOG_WORDS_PER_MINUTE", "0")
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 1


def test_list_cmd_content_dir_with_invalid_utf8(tmp_path):
    """An undecodable post is still listed and the valid posts are not lost."""
    (tmp_path / "good.md").write_text("---\ntitle: Good\ndate: April 30, 2025\n---\nBody\n", encoding="utf-8")
    (tmp_path / "bad.md").write_bytes(b"---\ntitle: caf\xe9\ndate: April 25, 2025\n---\nBody\n")

    result = runner.invoke(app, ["list", "--json", "--content-dir", str(tmp_path)])

    assert result.exit_code == 0, result.output
    posts = json.loads(result.stdout)
    assert [p["slug"] for p in posts] == ["good", "bad"]
    assert posts[1]["title"] == "caf\ufffd"
