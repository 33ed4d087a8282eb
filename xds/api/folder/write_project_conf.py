"""Provision the per-folder ``xds-project.conf`` settings file."""

import logging
from pathlib import Path

from ...constants import PROJECT_CONF_FILENAME
from ._AbstractBackend import _AbstractBackend

logger = logging.getLogger(__name__)


def write_project_conf(folder: _AbstractBackend, server_url: str, sdk_id: str) -> Path | None:
    """Write ``xds-project.conf`` in the folder root unless it already exists.

    The file holds shell exports a client-side build script can source.

    Returns:
        Path of the written file, None if one was already there.
    """
    conf_path = Path(folder.get_full_path(PROJECT_CONF_FILENAME))
    if conf_path.exists():
        return None

    folder_id = folder.get_config().id
    with conf_path.open("w", encoding="utf-8") as fh:
        fh.write("# XDS project settings\n")
        fh.write(f"export XDS_SERVER_URL={server_url}\n")
        fh.write(f"export XDS_PROJECT_ID={folder_id}\n")
        fh.write(f"export XDS_SDK_ID={sdk_id}\n")
    logger.debug("Wrote %s", conf_path)
    return conf_path
