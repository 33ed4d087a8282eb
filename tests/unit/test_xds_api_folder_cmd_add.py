"""Unit tests for xds.api.folder.cmd_add module."""

from unittest.mock import patch

import pytest

from xds.api.folder import cmd_add
from xds.api.folder.FolderType import FolderType

pytestmark = pytest.mark.folder


def test_cmd_add_sends_wire_config(run_cmd):
    created = {"id": "f1", "rootPath": "/mnt/share/demo", "status": "Enable"}
    with patch("xds.api.folder._client.add_folder", return_value=created) as mock_add:
        result = run_cmd(
            cmd_add.cmd_add,
            "demo",
            client_path="/home/user/demo",
            label="Demo",
            default_sdk="aarch64",
            server_url="http://build:8000",
        )

    server_url, payload = mock_add.call_args.args
    assert server_url == "http://build:8000"
    assert payload["path"] == "/home/user/demo"
    assert payload["label"] == "Demo"
    assert payload["defaultSdkID"] == "aarch64"
    assert payload["type"] == 1
    assert payload["dataPathMap"] == {"serverPath": "demo"}

    assert result.success is True
    assert result.output["folder"] == created
    assert result.result == "Folder f1 added at /mnt/share/demo"


def test_cmd_add_server_rejects(run_cmd):
    with patch("xds.api.folder._client.add_folder", side_effect=RuntimeError("ServerPath must be set")):
        result = run_cmd(cmd_add.cmd_add, "")

    assert result.success is False
    assert result.output["folder"] == {}
    assert result.output["errors"] == ["ServerPath must be set"]


def test_cmd_add_cloudsync_type_is_forwarded(run_cmd):
    with patch("xds.api.folder._client.add_folder", side_effect=RuntimeError("Unsupported folder type")) as mock_add:
        result = run_cmd(cmd_add.cmd_add, "demo", folder_type=FolderType.CLOUDSYNC)

    assert mock_add.call_args.args[1]["type"] == 2
    assert result.success is False
