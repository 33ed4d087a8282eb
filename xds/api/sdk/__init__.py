"""SDK API module: SDKs installed under the configured SDK root."""

from .list_sdks import get_sdk_path, list_sdks

__all__ = ["get_sdk_path", "list_sdks"]
