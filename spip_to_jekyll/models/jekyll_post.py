from __future__ import annotations

from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

FRONT_MATTER_SEPARATOR = "---"


def published_flag(status: str) -> Optional[bool]:
    """``None`` for drafts, ``True`` for published articles, ``False`` otherwise."""
    if status == "draft":
        return None
    return status == "publish"


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


class JekyllAuthor(BaseModel):
    display_name: str = ""
    login: str = ""
    email: str = ""
    url: str = ""


class JekyllComment(BaseModel):
    author: str = ""
    author_email: str = ""
    date: str = ""
    title: str = ""
    content: str = ""


class JekyllFrontMatter(BaseModel):
    """
    Front matter of one imported article.

    Field order is the key order of the emitted YAML.  The ``wordpress_*``
    keys keep the names Jekyll themes and plugins already expect from
    imported sites.
    """

    model_config = ConfigDict(extra="forbid")

    layout: str = ""
    status: str = ""
    published: Optional[bool] = None
    title: str = ""
    author: Optional[JekyllAuthor] = None
    author_login: str = ""
    author_email: str = ""
    author_url: str = ""
    excerpt: str = ""
    wordpress_id: Optional[int] = None
    wordpress_url: str = ""
    date: str = ""
    date_gmt: str = ""
    categories: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    comments: Optional[list[JekyllComment]] = Field(default=None)

    def to_front_matter(self) -> dict[str, Any]:
        """Ordered mapping with every ``None`` or empty-string value removed."""
        data = self.model_dump()
        author = data.get("author")
        if author is not None:
            author = {k: v for k, v in author.items() if not _is_empty(v)}
            data["author"] = author or None
        return {k: v for k, v in data.items() if not _is_empty(v)}

    def to_yaml(self) -> str:
        return yaml.safe_dump(
            self.to_front_matter(),
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
            explicit_start=True,
        )

    def render(self, body: str) -> str:
        """Front matter, the ``---`` separator line, then ``body``."""
        text = self.to_yaml() + FRONT_MATTER_SEPARATOR + "\n" + (body or "")
        if not text.endswith("\n"):
            text += "\n"
        return text
