"""
Handling of the ``<!-- more -->`` separator in article bodies.

Two options of the importer rely on it:

``more_excerpt``
    When an article has no description or lead, the content before the
    separator is used as the excerpt.

``more_anchor``
    The separator is replaced with two anchors, ``more`` and
    ``more-<id>``, so that "read more" links keep working.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

MORE_PATTERN = re.compile(r"<!--\s*more\s*-->", re.IGNORECASE)


def split_more(content: str) -> Tuple[str, Optional[str]]:
    """Return ``(before, after)``; ``after`` is ``None`` when there is no separator."""
    match = MORE_PATTERN.search(content or "")
    if not match:
        return content or "", None
    return content[: match.start()], content[match.end():]


def excerpt_before_more(content: str) -> str:
    before, after = split_more(content)
    if after is None:
        return ""
    return before.strip()


def anchor_more(content: str, post_id) -> str:
    """Replace the first separator with the ``more`` / ``more-<id>`` anchors."""
    if not content:
        return content or ""
    anchors = f'<a id="more"></a><a id="more-{post_id}"></a>'
    return MORE_PATTERN.sub(anchors, content, count=1)
