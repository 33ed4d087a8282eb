"""Normalize a configured directory for XDS.

Expands environment variables and the user home directory (~) and returns
an absolute path WITHOUT resolving symlinks, so shared mount points keep
the name they were configured with.
"""

import os
from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """Expand $VARS and ~, then return an absolute path (no symlink resolution)."""
    return Path(os.path.expandvars(str(path))).expanduser().absolute()
