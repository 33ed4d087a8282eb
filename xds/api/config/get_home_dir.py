"""Get XDS home directory path or path under it."""

import os
from pathlib import Path

from ...constants import XDS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get XDS home directory path or path under it.

    Checks XDS_HOME environment variable first, defaults to ~/.xds if not set.

    Examples:
        >>> get_home_dir()
        Path("/home/user/.xds")
        >>> get_home_dir("config.json")
        Path("/home/user/.xds/config.json")
    """
    xds_home_env = os.environ.get("XDS_HOME")
    if xds_home_env:
        xds_home = Path(xds_home_env).expanduser().resolve()
    else:
        home_env = os.environ.get("HOME")
        xds_home = Path(home_env) / XDS_HOME_EXT if home_env else Path.home() / XDS_HOME_EXT

    return xds_home / Path(*parts) if parts else xds_home
