"""Unit tests for xds.api.folder._client module."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from xds.api.folder import _client

pytestmark = pytest.mark.folder


def _response(status_code: int, body) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = body
    return response


def test_get_folders_builds_versioned_url():
    with patch("xds.api.folder._client.requests.request", return_value=_response(200, [])) as mock_request:
        assert _client.get_folders("http://build:8000/") == []

    mock_request.assert_called_once_with(
        "GET", "http://build:8000/api/v1/folders", json=None, timeout=_client.DEFAULT_TIMEOUT_SECS
    )


def test_add_folder_posts_payload():
    created = {"id": "f1"}
    with patch("xds.api.folder._client.requests.request", return_value=_response(200, created)) as mock_request:
        assert _client.add_folder("http://build:8000", {"label": "demo"}) == created

    args, kwargs = mock_request.call_args
    assert args == ("POST", "http://build:8000/api/v1/folder")
    assert kwargs["json"] == {"label": "demo"}


def test_server_error_message_is_raised():
    body = {"status": "error", "error": "Invalid id"}
    with patch("xds.api.folder._client.requests.request", return_value=_response(400, body)):
        with pytest.raises(RuntimeError, match="^Invalid id$"):
            _client.get_folder("http://build:8000", "missing")


def test_error_without_json_body():
    response = _response(500, None)
    response.json.side_effect = ValueError("no json")
    with patch("xds.api.folder._client.requests.request", return_value=response):
        with pytest.raises(RuntimeError, match="HTTP 500"):
            _client.delete_folder("http://build:8000", "f1")


def test_connection_failure():
    error = requests.ConnectionError("refused")
    with patch("xds.api.folder._client.requests.request", side_effect=error):
        with pytest.raises(RuntimeError, match="Cannot reach XDS server"):
            _client.sync_folder("http://build:8000", "f1")
