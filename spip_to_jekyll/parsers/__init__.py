"""
Text helpers used by the import pipeline.

This subpackage exposes ``clean_entities`` from
:mod:`spip_to_jekyll.parsers.entities`, ``slugify`` from
:mod:`spip_to_jekyll.parsers.slugs` and the ``<!-- more -->`` helpers from
:mod:`spip_to_jekyll.parsers.more_tag`.
"""

from .entities import clean_entities
from .more_tag import anchor_more, excerpt_before_more
from .slugs import slugify

__all__ = ["clean_entities", "slugify", "anchor_more", "excerpt_before_more"]
