"""Locate ``baconctl.toml`` for a project.

The project root is the directory holding the config file, and relative
dataset paths resolve against it.  ``BACONCTL_CONFIG`` names a file
directly; otherwise the search walks up from the working directory, the
way git finds ``.git/``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "baconctl.toml"
CONFIG_ENV_VAR = "BACONCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    An explicit ``BACONCTL_CONFIG`` wins even when the file is missing, in
    which case no config applies.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
