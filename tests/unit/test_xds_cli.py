"""Unit tests for the xdsd command line."""

import json
from unittest.mock import patch

import click
import pytest

from xds.api.config.ConfigError import ConfigError
from xds.api.folder.FolderError import SanityCheckFailedError
from xds.cli import main
from xds.cli._handle_stage_result import _extract_display_format

pytestmark = pytest.mark.cli


def test_version_flag(capsys, monkeypatch):
    monkeypatch.setattr("xds.api.config.cmd_version.get_package_version", lambda: "0.6.0")
    monkeypatch.setattr("xds.api.config.cmd_version.get_git_sha", lambda: "")

    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "xdsd 0.6.0"


def test_no_arguments_shows_help(capsys):
    assert main([]) == 0
    assert "serve" in capsys.readouterr().out


def test_invalid_display_format(capsys):
    assert main(["--display", "xml", "folder", "list"]) == 1
    assert "--display must be 'json' or 'yaml'" in capsys.readouterr().err


def test_config_show_json(xds_home, minimal_config_dict, capsys):
    (xds_home / "config.json").write_text(json.dumps(minimal_config_dict))

    assert main(["-d", "json", "config", "show", "httpPort"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["content"] == {"httpPort": "8000"}


def test_folder_list_yaml(capsys):
    folders = [{"id": "f1", "label": "demo"}]
    with patch("xds.api.folder._client.get_folders", return_value=folders) as mock_get:
        assert main(["folder", "list", "--url", "http://build:8000"]) == 0

    mock_get.assert_called_once_with("http://build:8000")
    out = capsys.readouterr().out
    assert "count: 1" in out
    assert "id: f1" in out


def test_folder_show_failure_exit_code(capsys):
    with patch("xds.api.folder._client.get_folder", side_effect=RuntimeError("Invalid id")):
        assert main(["-d", "json", "folder", "show", "missing"]) == 1

    assert json.loads(capsys.readouterr().out)["errors"] == ["Invalid id"]


def test_folder_add_options(capsys):
    created = {"id": "f1", "rootPath": "/mnt/share/demo"}
    with patch("xds.api.folder._client.add_folder", return_value=created) as mock_add:
        code = main(["-d", "json", "folder", "add", "demo", "-p", "/home/user/demo", "-l", "Demo", "--sdk", "aarch64"])

    assert code == 0
    payload = mock_add.call_args.args[1]
    assert payload["path"] == "/home/user/demo"
    assert payload["label"] == "Demo"
    assert payload["defaultSdkID"] == "aarch64"
    assert json.loads(capsys.readouterr().out)["folder"] == created


def test_folder_add_unknown_type(capsys):
    with patch("xds.api.folder._client.add_folder") as mock_add:
        assert main(["folder", "add", "demo", "--type", "rsync"]) == 1

    mock_add.assert_not_called()
    assert "Unknown folder type" in capsys.readouterr().err


def test_folder_sync_and_delete():
    with (
        patch("xds.api.folder._client.sync_folder", return_value=None) as mock_sync,
        patch("xds.api.folder._client.delete_folder", return_value={"id": "f1"}) as mock_delete,
    ):
        assert main(["folder", "sync", "f1"]) == 0
        assert main(["folder", "delete", "f1"]) == 0

    mock_sync.assert_called_once_with("http://localhost:8000", "f1")
    mock_delete.assert_called_once_with("http://localhost:8000", "f1")


def test_serve_passes_options():
    with patch("xds.api.server.run_server") as mock_run:
        assert main(["serve", "--config", "/etc/xds/config.json", "--port", "8123", "--host", "127.0.0.1"]) == 0

    mock_run.assert_called_once_with("/etc/xds/config.json", "8123", host="127.0.0.1")


@pytest.mark.parametrize("error", [ConfigError("Cannot create share root directory"), SanityCheckFailedError("probe")])
def test_serve_fatal_errors_exit_2(error, capsys):
    with patch("xds.api.server.run_server", side_effect=error):
        assert main(["serve"]) == 2

    assert "Fatal:" in capsys.readouterr().err


class TestDisplayFormatLookup:
    def test_reads_format_from_parent_context(self):
        root = click.Context(click.Group("xdsd"), obj={"display_format": "json"})
        child = click.Context(click.Command("list"), parent=root)
        assert _extract_display_format(child) == "json"

    def test_missing_format_is_an_error(self):
        with pytest.raises(RuntimeError, match="not set"):
            _extract_display_format(click.Context(click.Command("list")))

    def test_invalid_format_is_an_error(self):
        ctx = click.Context(click.Command("list"), obj={"display_format": "xml"})
        with pytest.raises(ValueError, match="xml"):
            _extract_display_format(ctx)

    def test_folder_list_json(self, capsys):
        with patch("xds.api.folder._client.get_folders", return_value=[]):
            assert main(["--display", "json", "folder", "list"]) == 0
        assert json.loads(capsys.readouterr().out)["count"] == 0
