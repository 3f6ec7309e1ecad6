"""
Index of article slugs used to build page paths.

The index is built once from the article listing, before any document is
written, and is read-only afterwards.  ``page_path`` rebuilds the nested
directory of a page by walking its parent links.

SPIP articles have no parent article, so rows coming from the listing
query carry no ``parent`` and every page sits at the site root.  Rows
that do provide a ``parent`` key keep it.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from spip_to_jekyll.parsers.slugs import slugify

MAX_PAGE_DEPTH = 32


class PageIndexError(Exception):
    """Raised when a parent chain loops or is deeper than ``MAX_PAGE_DEPTH``."""


@dataclass(frozen=True)
class PageIndexEntry:
    slug: str
    parent: Optional[Any] = None


class PageIndex:
    def __init__(self, entries: Mapping[Any, PageIndexEntry]) -> None:
        self._entries: Mapping[Any, PageIndexEntry] = MappingProxyType(dict(entries))

    @classmethod
    def from_rows(cls, rows: Iterable[Dict[str, Any]]) -> "PageIndex":
        entries: Dict[Any, PageIndexEntry] = {}
        for row in rows:
            # an untitled page would otherwise resolve to the site root
            entries[row["id"]] = PageIndexEntry(
                slug=slugify(row.get("title")) or str(row["id"]),
                parent=row.get("parent"),
            )
        return cls(entries)

    def __contains__(self, page_id: object) -> bool:
        return page_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, page_id: Any) -> Optional[PageIndexEntry]:
        return self._entries.get(page_id)

    def slug(self, page_id: Any) -> str:
        entry = self._entries.get(page_id)
        return entry.slug if entry else ""

    def page_path(self, page_id: Any) -> str:
        """
        Slugs of the ancestors then of the page itself, each followed by
        ``/``, e.g. ``"about/team/"``.  Returns ``""`` for an id that is
        not in the index.
        """
        chain = []
        seen = set()
        current = page_id
        while current in self._entries:
            if current in seen:
                raise PageIndexError(f"Parent chain of page {page_id!r} loops back to {current!r}")
            if len(chain) >= MAX_PAGE_DEPTH:
                raise PageIndexError(f"Parent chain of page {page_id!r} is deeper than {MAX_PAGE_DEPTH}")
            seen.add(current)
            entry = self._entries[current]
            chain.append(entry.slug)
            current = entry.parent
        return "".join(f"{slug}/" for slug in reversed(chain))
