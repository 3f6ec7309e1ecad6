"""
High-level orchestration of the SPIP → Jekyll import.

This module defines a :class:`SpipImportTool` class that ties together
the extractors, parsers, migrators and utilities into a complete
pipeline: open the database, build the page index, write one Jekyll
document per qualifying article and finish with the asset download
script.

Configuration is supplied via a JSON file path or directly as a
dictionary.  Import options live under the ``spip`` key; see
:class:`spip_to_jekyll.models.import_options.ImportOptions` for the
recognized keys and their defaults.  Database credentials can also come
from the ``SPIP_DB_*`` environment variables.
"""

from __future__ import annotations

import json
import os
import sys
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from spip_to_jekyll.extractors.page_index import PageIndex, PageIndexError
from spip_to_jekyll.extractors.spip_extractor import SpipDatabase, from_spip_status
from spip_to_jekyll.migrators.jekyll_migrator import (
    as_text,
    build_comments,
    destination_path,
    resolve_date,
    write_document,
)
from spip_to_jekyll.models.import_options import ImportOptions, resolve_options
from spip_to_jekyll.models.jekyll_post import JekyllAuthor, JekyllFrontMatter, published_flag
from spip_to_jekyll.parsers.entities import clean_entities
from spip_to_jekyll.parsers.more_tag import anchor_more, excerpt_before_more
from spip_to_jekyll.parsers.slugs import slugify
from spip_to_jekyll.utils.assets import write_asset_script
from spip_to_jekyll.utils.errors import report_error, report_ok
from spip_to_jekyll.utils.taxonomy import partition_terms

_ENV_DEFAULTS = {
    "user": "SPIP_DB_USER",
    "password": "SPIP_DB_PASSWORD",
    "host": "SPIP_DB_HOST",
    "dbname": "SPIP_DB_NAME",
}

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SpipImportTool:
    """
    Encapsulates all state and behavior required to import a SPIP site
    into a Jekyll source tree.  This class is responsible for reading
    configuration, querying the database, transforming articles and
    writing documents.  Detailed success and failure information is
    recorded using the :mod:`spip_to_jekyll.utils.errors` module.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        *,
        config_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
        database_factory: Callable[[ImportOptions], Any] = SpipDatabase,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        if config_file and os.path.exists(config_file):
            with open(config_file, "r", encoding="utf-8") as f:
                config = json.load(f)
        elif config is None:
            config = {}

        # Copy so overrides never leak back into the caller's mapping
        config = {**config, "spip": dict(config.get("spip") or {})}
        # Command line flags win over the config file and the environment
        config["spip"].update(overrides or {})
        for key, env_name in _ENV_DEFAULTS.items():
            if os.getenv(env_name):
                config["spip"].setdefault(key, os.getenv(env_name))

        self.config = config
        self.options = resolve_options(config["spip"])
        self._database_factory = database_factory
        self._now = now
        self.page_index = PageIndex({})
        self.written: Dict[Any, str] = {}

    def log_message(self, message: str, level: str = "INFO") -> None:
        stream = sys.stderr if level in ("WARNING", "ERROR") else sys.stdout
        print(f"[{level}] {message}", file=stream)
        # Append to log file
        os.makedirs("reports/import", exist_ok=True)
        with open("reports/import/import.log", "a", encoding="utf-8") as f:
            f.write(f"{level}: {message}\n")

    def _clean(self, text: Any) -> str:
        text = as_text(text)
        return clean_entities(text) if self.options.clean_entities else text

    def run(self) -> None:
        """Open the database and run every import step in order."""
        opts = self.options
        self.log_message(
            f"Connecting to database '{opts.dbname}' on {opts.socket or f'{opts.host}:{opts.port}'}"
        )
        try:
            db = self._database_factory(opts).open()
        except Exception as e:
            report_error("DB_CONNECT", {}, e)
            self.log_message(f"Could not connect to the database: {e}", "ERROR")
            raise

        try:
            self.build_page_index(db)
            self.migrate_posts(db)
            self.write_assets(db)
        finally:
            db.close()
        self.log_message("Import process finished.")

    def build_page_index(self, db) -> PageIndex:
        try:
            self.page_index = PageIndex.from_rows(db.article_listing())
        except Exception as e:
            report_error("QUERY_FAILED", {}, e)
            self.log_message(f"Failed to load the article listing: {e}", "ERROR")
            raise
        self.log_message(f"Indexed {len(self.page_index)} articles", level="DEBUG")
        return self.page_index

    def migrate_posts(self, db) -> int:
        """
        Write one Jekyll document per article returned by the detail
        query.  Any failure is reported and aborts the run; files already
        written are kept.

        :return: The number of documents written.
        """
        count = 0
        if self.options.status:
            self.log_message(f"Importing articles with status {', '.join(self.options.status)}")
        else:
            self.log_message("Importing articles regardless of status")
        for post in db.articles():
            try:
                path = self.process_post(post, db)
            except Exception as e:
                code = "PAGE_PATH" if isinstance(e, PageIndexError) else "WRITE_FAILED"
                report_error(code, post, e)
                self.log_message(f"Failed to import article {post.get('id')}: {e}", "ERROR")
                raise
            self.written[post.get("id")] = path
            report_ok("POST_WRITTEN", post, {"path": path})
            count += 1
        self.log_message(f"Wrote {count} documents")
        return count

    def process_post(self, post: Dict[str, Any], db) -> str:
        opts = self.options
        post_id = post.get("id")

        title = self._clean(post.get("title"))

        slug = self.page_index.slug(post_id) or slugify(as_text(post.get("title")))
        if not slug:
            slug = str(post_id)

        date = resolve_date(post.get("date"), now=self._now)
        status = from_spip_status(post.get("status"))
        layout = "page" if post.get("category_id") in opts.page_categories else "post"

        filename = destination_path(
            layout=layout,
            status=status,
            slug=slug,
            date=date,
            extension=opts.extension,
            page_path=self.page_index.page_path(post_id) if layout == "page" else "",
        )

        content = as_text(post.get("content"))
        excerpt = as_text(post.get("description")) or as_text(post.get("lead"))
        if not excerpt and opts.more_excerpt:
            excerpt = excerpt_before_more(content)
        if opts.more_anchor:
            content = anchor_more(content, post_id)

        categories = tags = None
        if opts.categories or opts.tags:
            categories, tags = partition_terms(
                db.article_terms(post_id),
                tag_types=opts.tag_types,
                include_categories=opts.categories,
                include_tags=opts.tags,
                clean=self._clean if opts.clean_entities else None,
            )

        comments = None
        if opts.comments:
            comments = build_comments(
                db.article_comments(post_id),
                clean=self._clean if opts.clean_entities else None,
            )

        front_matter = JekyllFrontMatter(
            layout=layout,
            status=status,
            published=published_flag(status),
            title=title,
            author=JekyllAuthor(
                display_name=as_text(post.get("author")),
                login=as_text(post.get("author_login")),
                email=as_text(post.get("author_email")),
                url=as_text(post.get("author_url")),
            ),
            author_login=as_text(post.get("author_login")),
            author_email=as_text(post.get("author_email")),
            author_url=as_text(post.get("author_url")),
            excerpt=excerpt,
            wordpress_id=post_id,
            wordpress_url=as_text(post.get("guid")),
            date=date.strftime(DATE_FORMAT),
            date_gmt=as_text(post.get("date_gmt")),
            categories=categories if opts.categories else None,
            tags=tags if opts.tags else None,
            comments=comments,
        )

        return write_document(opts.output_dir, filename, front_matter.render(content))

    def write_assets(self, db) -> str:
        out_path = os.path.join(self.options.output_dir, self.options.asset_script)
        try:
            path, count = write_asset_script(db.assets(), out_path=out_path)
        except Exception as e:
            report_error("ASSET_SCRIPT_FAILED", {}, e)
            self.log_message(f"Failed to write the asset script: {e}", "ERROR")
            raise
        report_ok("ASSET_SCRIPT_WRITTEN", {}, {"path": path, "assets": count})
        self.log_message(f"Asset download script written to {path} with {count} entries")
        return path
