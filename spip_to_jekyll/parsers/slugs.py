from __future__ import annotations

from typing import Optional

from slugify import slugify as _python_slugify


def slugify(title: Optional[str]) -> str:
    """
    Turn an article title into a lowercase, ASCII, hyphen-separated slug
    usable both as a file name and as a URL segment.

    ``"Hëllo Wörld!"`` becomes ``"hello-world"``.  A missing title gives
    an empty slug; callers decide on the fallback.
    """
    if not title:
        return ""
    return _python_slugify(str(title), lowercase=True, separator="-")
