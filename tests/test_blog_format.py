from datetime import datetime
from pathlib import Path

import pytest

from portfolio.models import PostStatus
from portfolio.services.blog_format import (
    format_blog_post,
    generate_slug,
    parse_blog_post,
    parse_tags,
    year_from_path,
)

SAMPLE = """My Title
A short description
[[cover.png]]
#python #web-dev

--
First paragraph.

Second paragraph.
"""


def test_parse_full_header():
    post = parse_blog_post(SAMPLE, "my-title", Path("/b/live/2023/my-title.md"), PostStatus.LIVE)
    assert post.title == "My Title"
    assert post.description == "A short description"
    assert post.header_image == "cover.png"
    assert post.tags == ["python", "web-dev"]
    assert post.content == "First paragraph.\n\nSecond paragraph."
    assert post.year == 2023
    assert post.status is PostStatus.LIVE


def test_parse_missing_lines_default_to_empty():
    post = parse_blog_post(
        "Only a title",
        "only",
        Path("/b/live/2024/only.md"),
        PostStatus.LIVE,
    )
    assert post.title == "Only a title"
    assert post.description == ""
    assert post.header_image is None
    assert post.tags == []
    assert post.content == ""


def test_parse_year_defaults_to_current_year():
    now = datetime(2031, 6, 1)
    post = parse_blog_post(SAMPLE, "x", Path("x.md"), PostStatus.ARCHIVED, now=now)
    assert post.year == 2031


def test_parse_tags_ignores_invalid_tokens_and_duplicates():
    assert parse_tags("#ok #-bad plain ## #ok #also_ok #a-b") == ["ok", "also_ok", "a-b"]


def test_year_from_path_handles_both_separators():
    assert year_from_path("blog\\archive\\2019\\post.md", default=1) == 2019
    assert year_from_path("blog/live/post.md", default=7) == 7


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Hello World", "hello-world"),
        ("  C++ & Rust: a comparison!  ", "c-rust-a-comparison"),
        ("Already-sluggy", "already-sluggy"),
        ("!!!", ""),
    ],
)
def test_generate_slug(title: str, expected: str):
    assert generate_slug(title) == expected


def test_format_layout():
    text = format_blog_post(
        title="T",
        description="D",
        content="Body",
        header_image="img.jpg",
        tags=["a", "b-c"],
    )
    assert text.split("\n") == ["T", "D", "[[img.jpg]]", "#a #b-c", "", "--", "Body"]


def test_format_blank_optional_lines():
    text = format_blog_post(title="T", description="D", content="Body")
    assert text.split("\n") == ["T", "D", "", "", "", "--", "Body"]


def test_round_trip_reproduces_header_and_body():
    fields = dict(
        title="Round Trip",
        description="Does it survive?",
        header_image="header image.png",
        tags=["one", "two-2", "three_3"],
        content="# Heading\n\nSome *markdown* here.\n\n--\n\nA rule-like line inside the body.",
    )
    text = format_blog_post(**fields)
    post = parse_blog_post(text, "round-trip", Path("/b/live/2024/round-trip.md"), PostStatus.LIVE)

    assert post.title == fields["title"]
    assert post.description == fields["description"]
    assert post.header_image == fields["header_image"]
    assert post.tags == fields["tags"]
    assert post.content == fields["content"]
    assert format_blog_post(
        title=post.title,
        description=post.description,
        header_image=post.header_image,
        tags=post.tags,
        content=post.content,
    ).split("\n")[:4] == text.split("\n")[:4]


def test_year_from_path_uses_parent_directory_only():
    assert year_from_path("/srv/2019/blog/live/2025/post.md", default=1) == 2025
    assert year_from_path("/srv/2019/blog/live/drafts/post.md", default=3) == 3


@pytest.mark.parametrize("image", ["[odd.png", "a]b.png", "cover (1).jpg"])
def test_round_trip_header_image_with_brackets(image: str):
    text = format_blog_post(title="T", description="D", content="c", header_image=image)
    post = parse_blog_post(text, "t", Path("/b/live/2024/t.md"), PostStatus.LIVE)
    assert post.header_image == image
