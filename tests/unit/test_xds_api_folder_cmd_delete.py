"""Unit tests for xds.api.folder.cmd_delete module."""

from unittest.mock import patch

import pytest

from xds.api.folder import cmd_delete

pytestmark = pytest.mark.folder


def test_cmd_delete_success(run_cmd):
    folder = {"id": "f1", "label": "demo"}
    with patch("xds.api.folder._client.delete_folder", return_value=folder) as mock_delete:
        result = run_cmd(cmd_delete.cmd_delete, "f1")

    mock_delete.assert_called_once_with("http://localhost:8000", "f1")
    assert result.success is True
    assert result.output["folder"] == folder
    assert result.result == "Folder f1 deleted"


def test_cmd_delete_unknown_id(run_cmd):
    with patch("xds.api.folder._client.delete_folder", side_effect=RuntimeError("Invalid id: f1")):
        result = run_cmd(cmd_delete.cmd_delete, "f1")

    assert result.success is False
    assert result.output["folder"] == {}
    assert "Invalid id" in result.output["errors"][0]
