"""
JSON Lines reports of an import run.

Every article the importer touches leaves one line in
``reports/import/success.jsonl`` (document written, with its path) or in
``reports/import/errors.jsonl`` (query or write failure, with the
exception text).  Run-level events such as the connection failure or the
asset script use an empty article mapping, so their ``id`` is ``null``.

Event codes are listed in :data:`ERRORS`; an unknown code is reported
with the code itself as the message.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

ERRORS: Dict[str, str] = {
    "DB_CONNECT": "Could not connect to the SPIP database",
    "QUERY_FAILED": "Query against the SPIP database failed",
    "PAGE_PATH": "Could not resolve the page path",
    "WRITE_FAILED": "Failed to write the Jekyll document",
    "ASSET_SCRIPT_FAILED": "Failed to write the asset download script",
    "POST_WRITTEN": "Jekyll document written",
    "ASSET_SCRIPT_WRITTEN": "Asset download script written",
}

_REPORT_DIR = os.path.join("reports", "import")
_ERROR_LOG = os.path.join(_REPORT_DIR, "errors.jsonl")
_OK_LOG = os.path.join(_REPORT_DIR, "success.jsonl")


def _event(code: str, post: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "code": code,
        "message": ERRORS.get(code, code),
        "id": post.get("id"),
        "title": post.get("title"),
    }


def _append(path: str, entry: Dict[str, Any]) -> None:
    os.makedirs(_REPORT_DIR, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        # dates and other driver values are written as their str()
        json.dump(entry, f, ensure_ascii=False, default=str)
        f.write("\n")


def report_error(code: str, post: Mapping[str, Any], exc: Optional[Exception] = None) -> None:
    """Record a failed step for the article row ``post``; ``exc`` text is kept under ``error``."""
    entry = _event(code, post)
    if exc is not None:
        entry["error"] = str(exc)
    print(f"[ERROR] {entry['message']} - {post.get('id', '')}")
    _append(_ERROR_LOG, entry)


def report_ok(code: str, post: Mapping[str, Any], extra: Optional[Dict[str, Any]] = None) -> None:
    """Record a completed step; ``extra`` (e.g. the written path) is merged into the line."""
    entry = _event(code, post)
    entry.update(extra or {})
    print(f"[OK] {entry['message']} - {post.get('id', '')}")
    _append(_OK_LOG, entry)
