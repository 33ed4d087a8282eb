"""Minimal REST client for the folder routes of a running server."""

from typing import Any

import requests

from ...constants import API_PREFIX

DEFAULT_SERVER_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_SECS = 30.0


def _request(method: str, server_url: str, route: str, payload: dict[str, Any] | None = None) -> Any:
    """Call ``route`` on the server and return the decoded JSON body.

    Raises:
        RuntimeError: Connection failure, or the server answered with an error.
    """
    url = f"{server_url.rstrip('/')}{API_PREFIX}{route}"
    try:
        response = requests.request(method, url, json=payload, timeout=DEFAULT_TIMEOUT_SECS)
    except requests.RequestException as e:
        raise RuntimeError(f"Cannot reach XDS server at {server_url}: {e}") from e

    try:
        body = response.json()
    except ValueError:
        body = None

    if not response.ok:
        message = body.get("error") if isinstance(body, dict) else None
        raise RuntimeError(message or f"HTTP {response.status_code} from {url}")
    return body


def get_folders(server_url: str) -> list[dict[str, Any]]:
    return _request("GET", server_url, "/folders")


def get_folder(server_url: str, folder_id: str) -> dict[str, Any]:
    return _request("GET", server_url, f"/folder/{folder_id}")


def add_folder(server_url: str, folder: dict[str, Any]) -> dict[str, Any]:
    return _request("POST", server_url, "/folder", folder)


def sync_folder(server_url: str, folder_id: str) -> None:
    _request("POST", server_url, f"/folder/sync/{folder_id}")


def delete_folder(server_url: str, folder_id: str) -> dict[str, Any]:
    return _request("DELETE", server_url, f"/folder/{folder_id}")
