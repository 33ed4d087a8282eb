"""Unit tests for xds.api.config.init_config module."""

import json

import pytest

from xds.api.config.ConfigError import ConfigError
from xds.api.config.init_config import init_config

pytestmark = pytest.mark.config


def test_init_config_creates_share_root(tmp_path, minimal_config_dict):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(minimal_config_dict))

    config = init_config(path)
    assert (tmp_path / "share").is_dir()
    assert config.share_root_dir == str(tmp_path / "share")


def test_init_config_creates_logs_dir_when_set(tmp_path, minimal_config_dict):
    minimal_config_dict["logsDir"] = str(tmp_path / "logs" / "server")
    path = tmp_path / "config.json"
    path.write_text(json.dumps(minimal_config_dict))

    init_config(path)
    assert (tmp_path / "logs" / "server").is_dir()


def test_init_config_keeps_existing_share_root(tmp_path, minimal_config_dict):
    share = tmp_path / "share"
    share.mkdir()
    (share / "keep.txt").write_text("data")
    path = tmp_path / "config.json"
    path.write_text(json.dumps(minimal_config_dict))

    init_config(path)
    assert (share / "keep.txt").read_text() == "data"


def test_init_config_uncreatable_share_root_is_fatal(tmp_path, minimal_config_dict):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    minimal_config_dict["shareRootDir"] = str(blocker / "share")
    path = tmp_path / "config.json"
    path.write_text(json.dumps(minimal_config_dict))

    with pytest.raises(ConfigError, match="share root directory"):
        init_config(path)


def test_init_config_invalid_file_is_fatal(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]")
    with pytest.raises(ConfigError):
        init_config(path)
