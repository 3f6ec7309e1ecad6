"""
Utility helpers used by the import tool.

This subpackage exposes convenience functions for structured logging,
ordered taxonomy sets and asset download script generation.
"""

from .assets import write_asset_script
from .errors import ERRORS, report_error, report_ok
from .taxonomy import OrderedSet, partition_terms

__all__ = [
    "ERRORS",
    "report_error",
    "report_ok",
    "write_asset_script",
    "OrderedSet",
    "partition_terms",
]
