from __future__ import annotations

import importlib
import sys
from typing import Any, Dict, List, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_STATUS = ["publish"]
DEFAULT_TAG_TYPES = ["tag", "tags", "mots-cles", "keywords"]


def _split_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(item).strip() for item in value if str(item).strip()]


def _entity_cleaner_available() -> bool:
    try:
        importlib.import_module("html.entities")
    except ImportError:
        return False
    return True


class ImportOptions(BaseModel):
    """
    Resolved options of an import run.

    Every recognized key has a default, so a partially filled mapping
    (command line flags, a JSON config section) always yields a complete
    configuration.  Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user: str = ""
    password: str = Field("", validation_alias=AliasChoices("password", "pass"))
    host: str = "localhost"
    port: str = "3306"
    socket: Optional[str] = None
    dbname: str = ""
    table_prefix: str = "spip_"
    site_prefix: Optional[str] = None
    clean_entities: bool = True
    comments: bool = True
    categories: bool = True
    tags: bool = True
    more_excerpt: bool = True
    more_anchor: bool = True
    extension: str = "html"
    status: List[str] = Field(default_factory=lambda: list(DEFAULT_STATUS))
    output_dir: str = "."
    tag_types: List[str] = Field(default_factory=lambda: list(DEFAULT_TAG_TYPES))
    page_categories: List[int] = Field(default_factory=list)
    asset_script: str = "asset_download_script.sh"

    @field_validator("port", mode="before")
    @classmethod
    def _port_as_text(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @field_validator("status", mode="before")
    @classmethod
    def _status_tokens(cls, v: Any) -> List[str]:
        # :publish, "Publish" and "publish" are the same token
        return [token.lstrip(":").lower() for token in _split_list(v)]

    @field_validator("tag_types", "page_categories", mode="before")
    @classmethod
    def _comma_lists(cls, v: Any) -> List[str]:
        return _split_list(v)

    @field_validator("extension", mode="before")
    @classmethod
    def _bare_extension(cls, v: Any) -> Any:
        return v.lstrip(".") if isinstance(v, str) else v

    @model_validator(mode="after")
    def _check_entity_cleaner(self) -> "ImportOptions":
        if self.clean_entities and not _entity_cleaner_available():
            print(
                "[WARNING] Could not load the HTML entity table, so the "
                "clean_entities option is now disabled.",
                file=sys.stderr,
            )
            self.clean_entities = False
        return self

    def table(self, name: str) -> str:
        """Full table name: ``table_prefix`` + ``site_prefix`` + ``name``."""
        return f"{self.table_prefix}{self.site_prefix or ''}{name}"


def resolve_options(raw: Optional[Mapping[str, Any]] = None) -> ImportOptions:
    """Apply defaults to ``raw``; keys set to ``None`` count as unset."""
    values: Dict[str, Any] = {k: v for k, v in (raw or {}).items() if v is not None}
    return ImportOptions.model_validate(values)
