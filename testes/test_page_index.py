import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from spip_to_jekyll.extractors.page_index import (
    MAX_PAGE_DEPTH,
    PageIndex,
    PageIndexEntry,
    PageIndexError,
)


def test_listing_rows_are_slugged_and_parentless():
    index = PageIndex.from_rows(
        [
            {"id": 3, "title": "About", "category_id": 1},
            {"id": 4, "title": "Équipe & contact", "category_id": 1},
        ]
    )
    assert len(index) == 2
    assert index.get(3) == PageIndexEntry(slug="about", parent=None)
    assert index.slug(4) == "equipe-contact"
    assert index.page_path(3) == "about/"


def test_unknown_page_has_empty_path_and_slug():
    index = PageIndex.from_rows([])
    assert index.page_path(99) == ""
    assert index.slug(99) == ""
    assert 99 not in index


def test_nested_page_path_walks_parents():
    index = PageIndex(
        {
            1: PageIndexEntry("company"),
            2: PageIndexEntry("about", parent=1),
            3: PageIndexEntry("team", parent=2),
            4: PageIndexEntry("orphan", parent=42),
        }
    )
    assert index.page_path(3) == "company/about/team/"
    # a parent outside the index ends the chain
    assert index.page_path(4) == "orphan/"


def test_index_is_read_only():
    index = PageIndex({1: PageIndexEntry("a")})
    with pytest.raises(TypeError):
        index._entries[2] = PageIndexEntry("b")


def test_cycle_raises():
    index = PageIndex({1: PageIndexEntry("a", parent=2), 2: PageIndexEntry("b", parent=1)})
    with pytest.raises(PageIndexError):
        index.page_path(1)


def test_self_parent_raises():
    index = PageIndex({5: PageIndexEntry("loop", parent=5)})
    with pytest.raises(PageIndexError):
        index.page_path(5)


def test_too_deep_chain_raises():
    entries = {i: PageIndexEntry(f"p{i}", parent=i - 1) for i in range(1, MAX_PAGE_DEPTH + 5)}
    index = PageIndex(entries)
    assert index.page_path(MAX_PAGE_DEPTH).count("/") == MAX_PAGE_DEPTH
    with pytest.raises(PageIndexError):
        index.page_path(MAX_PAGE_DEPTH + 4)


def test_untitled_page_falls_back_to_its_id():
    index = PageIndex.from_rows([{"id": 5, "title": "!!!"}, {"id": 6, "title": None}])
    assert index.slug(5) == "5"
    assert index.page_path(5) == "5/"
    assert index.page_path(6) == "6/"
