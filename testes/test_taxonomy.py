import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from spip_to_jekyll.parsers.entities import clean_entities
from spip_to_jekyll.utils.taxonomy import OrderedSet, partition_terms

TAG_TYPES = ["tag", "tags"]


def test_ordered_set_first_seen_wins():
    s = OrderedSet(["b", "a", "b", "c", "a"])
    assert s.to_list() == ["b", "a", "c"]
    assert "c" in s and "z" not in s
    assert len(s) == 3
    assert s.add("a") is False
    assert s.add("d") is True
    assert list(s) == ["b", "a", "c", "d"]


def test_duplicate_categories_are_dropped_in_order():
    terms = [
        {"name": "A", "type": "cat"},
        {"name": "B", "type": "cat"},
        {"name": "A", "type": "cat"},
    ]
    categories, tags = partition_terms(terms, tag_types=TAG_TYPES)
    assert categories == ["A", "B"]
    assert tags == []


def test_terms_are_routed_by_group_case_insensitively():
    terms = [
        {"name": "Politique", "type": "Thèmes"},
        {"name": "python", "type": "Tags"},
        {"name": "jekyll", "type": " tag "},
        {"name": "python", "type": "tags"},
    ]
    categories, tags = partition_terms(terms, tag_types=TAG_TYPES)
    assert categories == ["Politique"]
    assert tags == ["python", "jekyll"]


def test_disabled_lists_stay_empty():
    terms = [{"name": "A", "type": "cat"}, {"name": "t", "type": "tag"}]
    assert partition_terms(terms, tag_types=TAG_TYPES, include_categories=False) == ([], ["t"])
    assert partition_terms(terms, tag_types=TAG_TYPES, include_tags=False) == (["A"], [])


def test_clean_is_applied_before_dedup_and_empty_names_skipped():
    terms = [
        {"name": "Été", "type": "cat"},
        {"name": "&Eacute;t&eacute;", "type": "cat"},
        {"name": "", "type": "cat"},
        {"name": None, "type": "tag"},
    ]
    categories, tags = partition_terms(terms, tag_types=TAG_TYPES, clean=clean_entities)
    assert categories == ["&Eacute;t&eacute;"]
    assert tags == []
