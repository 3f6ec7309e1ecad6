"""
Jekyll helper functions for SPIP → Jekyll import.

This module implements the target side of the import: deciding where an
article lands in the Jekyll tree, normalizing the values that go into its
front matter, and writing the final document.

Destinations, relative to the output directory:

* pages – ``<page path>/index.<ext>``
* drafts – ``_drafts/<slug>.md``
* everything else – ``_posts/<YYYY>-<MM>-<DD>-<slug>.<ext>``

Documents are written to a temporary file next to their destination and
renamed over it, so an interrupted run never leaves a truncated file that
Jekyll would pick up.
"""

from __future__ import annotations

import os
import tempfile
from datetime import date as date_type, datetime
from typing import Any, Callable, Dict, Iterable, List, Optional

from spip_to_jekyll.models.jekyll_post import JekyllComment

POSTS_DIR = "_posts"
DRAFTS_DIR = "_drafts"
DRAFT_EXTENSION = "md"

_DATE_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d")


def as_text(value: Any) -> str:
    """``None`` → ``""``; ``bytes`` are read as UTF-8."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def resolve_date(value: Any, *, now: Callable[[], datetime] = datetime.now) -> datetime:
    """
    The article date, or the current time when it is missing or malformed.

    SPIP stores unset dates as ``0000-00-00 00:00:00``, which the driver
    hands back as a string that does not parse.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date_type):
        return datetime(value.year, value.month, value.day)
    text = as_text(value).strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return now()


def post_filename(date: datetime, slug: str, extension: str) -> str:
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}-{slug}.{extension}"


def destination_path(
    *,
    layout: str,
    status: str,
    slug: str,
    date: datetime,
    extension: str,
    page_path: str = "",
) -> str:
    """Relative destination of an article inside the Jekyll site."""
    if layout == "page":
        return f"{page_path or slug + '/'}index.{extension}"
    if status == "draft":
        return f"{DRAFTS_DIR}/{slug}.{DRAFT_EXTENSION}"
    return f"{POSTS_DIR}/{post_filename(date, slug, extension)}"


def build_comments(
    rows: Iterable[Dict[str, Any]], *, clean: Optional[Callable[[str], str]] = None
) -> List[JekyllComment]:
    """
    Turn forum rows into comments sorted by date.

    The sort compares the date strings, not calendar values, which keeps
    the order the legacy importer produced.
    """
    comments = []
    for row in rows:
        author = as_text(row.get("author"))
        title = as_text(row.get("title"))
        content = as_text(row.get("content"))
        if clean is not None:
            author, title, content = clean(author), clean(title), clean(content)
        comments.append(
            JekyllComment(
                author=author,
                author_email=as_text(row.get("author_email")),
                date=as_text(row.get("date")),
                title=title,
                content=content,
            )
        )
    comments.sort(key=lambda c: c.date)
    return comments


def _document_mode() -> int:
    """Mode a plain ``open(path, "w")`` would give under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_document(output_dir: str, relative_path: str, text: str) -> str:
    """Atomically write ``text`` to ``output_dir/relative_path``.

    Parent directories are created.  An existing file is replaced.  On
    failure the temporary file is removed and the error propagates.

    :return: The absolute-or-relative path that was written.
    """
    path = os.path.join(output_dir, *relative_path.split("/"))
    directory = os.path.dirname(path) or "."
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.chmod(tmp_path, _document_mode())
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    return path
