"""List SDKs installed under the SDK root directory.

Each sub-directory of the SDK root is one SDK; its name is the SDK ID.
"""

from pathlib import Path


def list_sdks(sdk_root_dir: str | Path) -> list[str]:
    """Sorted IDs of the installed SDKs, empty if the root does not exist."""
    root = Path(sdk_root_dir)
    if not root.is_dir():
        return []
    return sorted(entry.name for entry in root.iterdir() if entry.is_dir() and not entry.name.startswith("."))


def get_sdk_path(sdk_root_dir: str | Path, sdk_id: str) -> Path | None:
    """Directory of SDK ``sdk_id``, None if it is not installed."""
    if sdk_id not in list_sdks(sdk_root_dir):
        return None
    return Path(sdk_root_dir) / sdk_id
