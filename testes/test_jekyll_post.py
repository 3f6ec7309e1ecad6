import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import yaml

from spip_to_jekyll.models.jekyll_post import (
    JekyllAuthor,
    JekyllComment,
    JekyllFrontMatter,
    published_flag,
)


def test_published_flag():
    assert published_flag("draft") is None
    assert published_flag("publish") is True
    assert published_flag("private") is False
    assert published_flag("revision") is False
    assert published_flag("") is False


def test_empty_values_are_removed_and_order_kept():
    fm = JekyllFrontMatter(
        layout="post",
        status="publish",
        published=True,
        title="Hello",
        author=JekyllAuthor(display_name="Ana", login="ana"),
        author_login="ana",
        wordpress_id=7,
        date="2021-06-05 00:00:00",
        categories=[],
        tags=["t"],
    )
    data = fm.to_front_matter()
    assert list(data) == [
        "layout",
        "status",
        "published",
        "title",
        "author",
        "author_login",
        "wordpress_id",
        "date",
        "categories",
        "tags",
    ]
    assert data["author"] == {"display_name": "Ana", "login": "ana"}
    assert data["categories"] == []


def test_draft_has_no_published_key_and_empty_author_is_dropped():
    fm = JekyllFrontMatter(
        layout="post", status="draft", published=published_flag("draft"), author=JekyllAuthor()
    )
    data = fm.to_front_matter()
    assert "published" not in data
    assert "author" not in data
    assert "title" not in data


def test_false_published_is_kept():
    data = JekyllFrontMatter(status="private", published=False).to_front_matter()
    assert data["published"] is False


def test_render_writes_header_separator_and_body():
    fm = JekyllFrontMatter(
        layout="post",
        title="Hëllo Wörld!",
        published=True,
        comments=[JekyllComment(author="Bob", date="2020-01-05 10:00:00", content="Hi")],
    )
    text = fm.render("<p>Body</p>")
    assert text.startswith("---\n")
    header, body = text[len("---\n"):].split("\n---\n", 1)
    assert body == "<p>Body</p>\n"
    loaded = yaml.safe_load(header)
    assert loaded["title"] == "Hëllo Wörld!"
    assert "Hëllo Wörld!" in header
    assert loaded["published"] is True
    assert loaded["comments"][0]["author"] == "Bob"


def test_render_keeps_trailing_newline_once():
    text = JekyllFrontMatter(title="x").render("body\n")
    assert text.endswith("---\nbody\n")
