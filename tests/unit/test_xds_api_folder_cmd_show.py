"""Unit tests for xds.api.folder.cmd_show module."""

from unittest.mock import patch

import pytest

from xds.api.folder import cmd_show

pytestmark = pytest.mark.folder


def test_cmd_show_success(run_cmd):
    folder = {"id": "f1", "status": "Enable"}
    with patch("xds.api.folder._client.get_folder", return_value=folder) as mock_get:
        result = run_cmd(cmd_show.cmd_show, "f1")

    mock_get.assert_called_once_with("http://localhost:8000", "f1")
    assert result.success is True
    assert result.output["folder"] == folder
    assert result.result == "Folder f1: Enable"


def test_cmd_show_unknown_id(run_cmd):
    with patch("xds.api.folder._client.get_folder", side_effect=RuntimeError("Invalid id")):
        result = run_cmd(cmd_show.cmd_show, "missing")

    assert result.success is False
    assert result.output["folder"] == {}
    assert result.output["errors"] == ["Invalid id"]
