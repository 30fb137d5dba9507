"""Tests for front-matter parsing and composition."""

from datetime import date
from pathlib import Path

import pytest

from blogstore.content.errors import FrontMatterError
from blogstore.content.frontmatter import compose_document, parse_document, split_front_matter
from blogstore.schemas.article import FrontMatter


VALID = """---
title: Getting started with Expo
date: 2020-05-01
slug: getting-started-expo
thumbnail: '../thumbnails/expo.png'
template: post
tags:
  - expo
  - react-native
---

# Hello

Body text.
"""


def test_split_returns_header_and_body():
    data, body = split_front_matter(VALID)
    assert data["title"] == "Getting started with Expo"
    assert data["date"] == date(2020, 5, 1)
    assert body.startswith("# Hello")


def test_parse_document_fields():
    document = parse_document(VALID, source="posts/expo.md")
    fm = document.front_matter
    assert fm.slug == "getting-started-expo"
    assert fm.thumbnail == "../thumbnails/expo.png"
    assert fm.template == "post"
    assert fm.tags == ["expo", "react-native"]
    assert document.source == Path("posts/expo.md")
    assert "Body text." in document.body


def test_accepts_bom_and_crlf():
    text = "\ufeff" + VALID.replace("\n", "\r\n")
    document = parse_document(text)
    assert document.slug == "getting-started-expo"
    assert "\r" not in document.body


@pytest.mark.parametrize("text, reason", [
    ("title: no header\n", "opening"),
    ("---\ntitle: unterminated\n", "closing"),
    ("---\ntitle: [broken\n---\n", "invalid YAML"),
    ("---\n- a\n- b\n---\n", "mapping"),
])
def test_malformed_headers(text, reason):
    with pytest.raises(FrontMatterError) as excinfo:
        split_front_matter(text, source="bad.md")
    assert reason in str(excinfo.value)
    assert excinfo.value.source == "bad.md"


def test_missing_keys_are_named():
    text = "---\ntitle: Only a title\n---\nbody\n"
    with pytest.raises(FrontMatterError) as excinfo:
        parse_document(text)
    problems = " ".join(excinfo.value.problems)
    for key in ("date", "slug", "thumbnail", "template", "tags"):
        assert f"missing key '{key}'" in problems
    assert "title" not in problems


def test_rejects_invalid_slug():
    text = VALID.replace("slug: getting-started-expo", "slug: Getting Started")
    with pytest.raises(FrontMatterError) as excinfo:
        parse_document(text)
    assert any(problem.startswith("slug") for problem in excinfo.value.problems)


def test_normalises_slug_date_and_tags():
    fm = FrontMatter(
        title="T",
        date="2019-12-31",
        slug="/some-post/",
        thumbnail="t.png",
        template="post",
        tags="python",
    )
    assert fm.slug == "some-post"
    assert fm.date == date(2019, 12, 31)
    assert fm.tags == ["python"]


def test_datetime_is_reduced_to_date():
    text = VALID.replace("date: 2020-05-01", "date: 2020-05-01 18:45:00")
    assert parse_document(text).date == date(2020, 5, 1)


def test_duplicate_tags_are_dropped_in_order():
    text = VALID.replace("  - react-native", "  - react-native\n  - expo")
    assert parse_document(text).tags == ["expo", "react-native"]


def test_extra_keys_are_ignored():
    text = VALID.replace("template: post", "template: post\ndraft: false")
    assert parse_document(text).front_matter.template == "post"


def test_compose_writes_canonical_key_order():
    document = parse_document(VALID)
    text = compose_document(document.front_matter, document.body)
    header = text.split("---")[1].strip().splitlines()
    keys = [line.split(":")[0] for line in header if not line.startswith(" ") and not line.startswith("-")]
    assert keys == ["title", "date", "slug", "thumbnail", "template", "tags"]
    assert parse_document(text) == parse_document(VALID)


def test_rejects_reserved_slug():
    text = VALID.replace("slug: getting-started-expo", "slug: tags")
    with pytest.raises(FrontMatterError) as excinfo:
        parse_document(text)
    assert any("reserved slug" in problem for problem in excinfo.value.problems)


def test_compose_keeps_body_indentation_and_trailing_lines():
    fm = parse_document(VALID).front_matter
    for body in ("    indented code\n", "text\n\n\n", "no final newline"):
        expected = body if body.endswith("\n") else body + "\n"
        assert parse_document(compose_document(fm, body)).body == expected
