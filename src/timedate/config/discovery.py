"""Locate ``timedate.toml``.

``TIMEDATE_CONFIG`` names the file outright. Otherwise the search starts
in a directory (the CWD by default) and climbs toward the filesystem
root, the way git looks for ``.git``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "timedate.toml"
CONFIG_ENV_VAR = "TIMEDATE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start*, or None.

    A ``TIMEDATE_CONFIG`` that points at a missing file disables the
    search instead of falling back to it.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
