"""Shared fixtures: build small dump directories on disk."""

from xml.sax.saxutils import quoteattr

import pytest

from stackdump_rdf import config

ROOT_TAGS = {
    "Badges": "badges",
    "Comments": "comments",
    "Posts": "posts",
    "PostHistory": "posthistory",
    "PostLinks": "postlinks",
    "Tags": "tags",
    "Users": "users",
}


def render_rows(root: str, rows) -> str:
    lines = ['<?xml version="1.0" encoding="utf-8"?>', f"<{root}>"]
    for row in rows:
        attrs = " ".join(f"{name}={quoteattr(value)}" for name, value in row.items())
        lines.append(f"  <row {attrs} />")
    lines.append(f"</{root}>")
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_dump(tmp_path):
    """Factory: make_dump(Users=[{...}], ...) -> directory with all seven files."""

    def _make(**rows_by_kind):
        unknown = set(rows_by_kind) - set(ROOT_TAGS)
        if unknown:
            raise KeyError(f"unknown kinds: {sorted(unknown)}")
        dump_dir = tmp_path / "dump"
        dump_dir.mkdir(exist_ok=True)
        for label, fname in config.INPUT_FILES:
            content = render_rows(ROOT_TAGS[label], rows_by_kind.get(label, []))
            (dump_dir / fname).write_text(content, encoding="utf-8")
        return dump_dir

    return _make


@pytest.fixture(autouse=True)
def no_progress_bar(monkeypatch):
    monkeypatch.setenv(config.PROGRESS_ENV, "0")
