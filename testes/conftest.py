import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest


class FakeSpipDatabase:
    """In-memory stand-in for SpipDatabase, keyed the same way as the real queries."""

    def __init__(self, options=None, *, listing=None, articles=None, terms=None, comments=None, assets=None):
        self.options = options
        self.listing = listing or []
        self.rows = articles or []
        self.terms = terms or {}
        self.comments = comments or {}
        self.asset_rows = assets or []
        self.opened = False
        self.closed = False
        self.term_queries = []
        self.comment_queries = []

    def open(self):
        self.opened = True
        return self

    def close(self):
        self.closed = True

    def article_listing(self):
        return iter(self.listing)

    def articles(self):
        return iter(self.rows)

    def article_terms(self, post_id):
        self.term_queries.append(post_id)
        return list(self.terms.get(post_id, []))

    def article_comments(self, post_id):
        self.comment_queries.append(post_id)
        return list(self.comments.get(post_id, []))

    def assets(self):
        return iter(self.asset_rows)


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    """Run inside an empty directory so reports/ and outputs stay isolated."""
    monkeypatch.chdir(tmp_path)
    for name in ("SPIP_DB_USER", "SPIP_DB_PASSWORD", "SPIP_DB_HOST", "SPIP_DB_NAME"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
