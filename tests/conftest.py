"""Shared pytest configuration and fixtures for all tests."""

import os
from pathlib import Path

import pytest

from xds.api.config.XDSConfig import XDSConfig
from xds.api.folder.Folders import Folders


def pytest_configure(config):
    for marker in ("unit", "config", "folder", "server", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(tmp_path: Path) -> dict:
    """Minimal valid XDS configuration dict rooted in ``tmp_path``."""
    return {
        "shareRootDir": str(tmp_path / "share"),
        "sdkRootDir": str(tmp_path / "sdk"),
        "logsDir": "",
        "httpPort": "8000",
        "foldersFile": "",
        "log": {"level": "DEBUG"},
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(tmp_path: Path) -> dict:
    return minimal_config_dict(tmp_path)


@pytest.fixture
def xds_home(tmp_path: Path, monkeypatch) -> Path:
    """Point XDS_HOME at an empty temporary directory."""
    home = tmp_path / ".xds"
    home.mkdir()
    monkeypatch.setenv("XDS_HOME", str(home))
    return home


@pytest.fixture
def share_root(tmp_path: Path) -> Path:
    root = tmp_path / "share"
    root.mkdir()
    return root


@pytest.fixture
def sdk_root(tmp_path: Path) -> Path:
    root = tmp_path / "sdk"
    root.mkdir()
    return root


@pytest.fixture
def server_config(minimal_config_dict: dict, share_root: Path, sdk_root: Path) -> XDSConfig:
    return XDSConfig(**minimal_config_dict)


@pytest.fixture
def folders(server_config: XDSConfig) -> Folders:
    return Folders(server_config)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    return cmd_func(*args, **kwargs).run()


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd


class _ShortWriter:
    """File wrapper that drops the last byte of every write."""

    def __init__(self, fh):
        self._fh = fh

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._fh.close()

    def write(self, data: bytes) -> int:
        return self._fh.write(data[:-1])


@pytest.fixture
def short_probe_write(monkeypatch):
    """Make the PathMap write probe report a short write."""
    real_fdopen = os.fdopen
    monkeypatch.setattr(
        "xds.api.folder._pathmap._Backend.os.fdopen",
        lambda fd, mode: _ShortWriter(real_fdopen(fd, mode)),
    )
