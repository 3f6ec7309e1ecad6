from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Mapping, Optional, Set, Tuple


class OrderedSet:
    """
    Insertion-ordered collection without duplicates.

    Keeps a list for order and a set for membership; the first occurrence
    of a value wins and later duplicates are ignored.
    """

    def __init__(self, values: Iterable[str] = ()) -> None:
        self._items: List[str] = []
        self._seen: Set[str] = set()
        for value in values:
            self.add(value)

    def add(self, value: str) -> bool:
        """Add ``value``; return ``False`` if it was already present."""
        if value in self._seen:
            return False
        self._seen.add(value)
        self._items.append(value)
        return True

    def __contains__(self, value: object) -> bool:
        return value in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> List[str]:
        return list(self._items)


def _normalize_type(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def partition_terms(
    terms: Iterable[Mapping[str, Optional[str]]],
    *,
    tag_types: Iterable[str],
    include_categories: bool = True,
    include_tags: bool = True,
    clean: Optional[Callable[[str], str]] = None,
) -> Tuple[List[str], List[str]]:
    """
    Split SPIP keywords (``mots``) into Jekyll categories and tags.

    - A term whose ``type`` (its keyword group) is listed in ``tag_types``
      becomes a tag, every other term a category
    - ``clean`` is applied to each name before deduplication
    - Deduplicates while preserving first-seen order

    Returns ``(categories, tags)``.
    """
    tag_group = {_normalize_type(t) for t in tag_types}
    categories = OrderedSet()
    tags = OrderedSet()
    for term in terms:
        name = term.get("name")
        if not name:
            continue
        if clean is not None:
            name = clean(name)
        if _normalize_type(term.get("type")) in tag_group:
            if include_tags:
                tags.add(name)
        elif include_categories:
            categories.add(name)
    return categories.to_list(), tags.to_list()
