"""
Generation of the asset download script.

SPIP keeps uploaded documents on disk next to the site and only stores
their relative path in the ``documents`` table.  The importer never
fetches them: :func:`write_asset_script` writes a shell script with one
``curl`` command per document, which the operator completes with the
site's base URL and runs by hand.  A failed download is retried by
re-running the matching line.
"""

from __future__ import annotations

import os
import posixpath
from typing import Any, Dict, Iterable, Tuple

ASSET_DIR = "_assets"
BASE_URL_PLACEHOLDER = "TO_COMPLETE"


def asset_local_name(asset: Dict[str, Any]) -> str:
    """``<id>-<basename of path>``, e.g. ``12-report.pdf``."""
    path = str(asset.get("path") or "")
    return f"{asset.get('id')}-{posixpath.basename(path)}"


def asset_command(asset: Dict[str, Any]) -> str:
    remote = str(asset.get("path") or "").lstrip("/")
    return f'curl "$SITE_BASE_URL/{remote}" -o "{ASSET_DIR}/{asset_local_name(asset)}"'


def write_asset_script(
    assets: Iterable[Dict[str, Any]], *, out_path: str = "asset_download_script.sh"
) -> Tuple[str, int]:
    """Write the download script for ``assets``.

    Parameters
    ----------
    assets:
        Iterable of rows with ``id``, ``extension`` and ``path`` keys.
    out_path:
        Location of the script.  The parent directory is created
        automatically and the file is made executable.

    Returns
    -------
    tuple
        The path of the generated script and the number of commands.
    """
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    count = 0
    with open(out_path, "w", encoding="utf-8", newline="\n") as f:
        f.write("#!/usr/bin/env bash -x\n")
        f.write("\n")
        f.write(f"SITE_BASE_URL={BASE_URL_PLACEHOLDER}\n")
        f.write("\n")
        f.write(f"mkdir -p {ASSET_DIR}\n")
        for asset in assets:
            f.write(asset_command(asset) + "\n")
            count += 1
    os.chmod(out_path, 0o755)
    return out_path, count
