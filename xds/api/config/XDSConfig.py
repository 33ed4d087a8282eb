"""Top-level XDS server configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator

from .ConfigError import ConfigError
from .get_config_path import get_config_path
from .LogConfig import LogConfig
from .normalize_path import normalize_path

# Config default values
DEFAULT_PORT = "8000"
DEFAULT_SHARE_DIR = "/mnt/share"
DEFAULT_SDK_ROOT_DIR = "/xdt/sdk"


class XDSConfig(BaseModel):
    """Server-wide settings.

    Every field has a default, so a missing config file yields a usable
    configuration. Directory fields accept ``~`` and ``$VARS``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    share_root_dir: str = Field(DEFAULT_SHARE_DIR, alias="shareRootDir", description="Base of relative folder paths")
    sdk_root_dir: str = Field(DEFAULT_SDK_ROOT_DIR, alias="sdkRootDir", description="Directory holding installed SDKs")
    logs_dir: str = Field("", alias="logsDir", description="Server log directory, empty logs to stderr")
    http_port: str = Field(DEFAULT_PORT, alias="httpPort", description="HTTP listening port")
    folders_file: str = Field("", alias="foldersFile", description="JSON file persisting folders, empty disables")
    log: LogConfig = Field(default_factory=LogConfig)

    _path: Path | None = PrivateAttr(default=None)

    @field_validator("share_root_dir", "sdk_root_dir", "logs_dir", "folders_file")
    @classmethod
    def _normalize_dirs(cls, v: str) -> str:
        if not v:
            return v
        return str(normalize_path(v))

    @field_validator("http_port", mode="before")
    @classmethod
    def _validate_port(cls, v: str | int) -> str:
        port = str(v).strip()
        if not port.isdigit() or not 0 < int(port) < 65536:
            raise ValueError(f"invalid port {v!r}")
        return port

    @property
    def path(self) -> Path:
        """Path of the file this configuration was loaded from (or would be saved to)."""
        return self._path or get_config_path()

    @classmethod
    def load(cls, path: Path | str | None = None) -> "XDSConfig":
        """Load and validate config from file.

        Config file settings overwrite the defaults; a missing file keeps them.

        Raises:
            ConfigError: If the file holds invalid JSON or fails validation
        """
        config_path = Path(path) if path else get_config_path()

        raw: dict[str, Any] = {}
        if config_path.exists():
            try:
                with config_path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in config file {config_path}: {e}") from e
            if not isinstance(raw, dict):
                raise ConfigError(f"Config file {config_path} must hold a JSON object")

        try:
            config = cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

        config._path = config_path
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary using the config file key names."""
        return self.model_dump(mode="json", by_alias=True)

    def save(self, path: Path | str | None = None) -> None:
        """Save the configuration as JSON.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        target = Path(path) if path else self.path
        temp_path = target.with_suffix(target.suffix + ".tmp")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(target)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
        self._path = target
