"""REST routes: folders, SDKs, version and public config."""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from ...constants import API_VERSION
from ..config.cmd_version import get_git_sha
from ..config.get_package_version import get_package_version
from ..config.XDSConfig import XDSConfig
from ..folder.FolderConfig import FolderConfig
from ..folder.FolderError import FolderError
from ..folder.Folders import Folders
from ..folder.write_project_conf import write_project_conf
from ..sdk.list_sdks import get_sdk_path, list_sdks

logger = logging.getLogger(__name__)

router = APIRouter()


def api_error(message: str, status_code: int = 400) -> JSONResponse:
    """JSON error body shared by every failing route."""
    return JSONResponse(status_code=status_code, content={"status": "error", "error": message})


def _folders(request: Request) -> Folders:
    return request.app.state.folders


def _server_config(request: Request) -> XDSConfig:
    return request.app.state.server_config


@router.get("/version")
def get_version() -> dict[str, Any]:
    return {"version": get_package_version(), "apiVersion": API_VERSION, "gitTag": get_git_sha()}


@router.get("/config")
def get_config(request: Request) -> dict[str, Any]:
    return {
        **get_version(),
        "folders": [cfg.to_dict() for cfg in _folders(request).get_config_arr()],
    }


@router.get("/sdks")
def get_sdks(request: Request) -> list[str]:
    return list_sdks(_server_config(request).sdk_root_dir)


@router.get("/sdk/{sdk_id}")
def get_sdk(sdk_id: str, request: Request):
    path = get_sdk_path(_server_config(request).sdk_root_dir, sdk_id)
    if path is None:
        return api_error("Invalid id")
    return {"id": sdk_id, "path": str(path)}


@router.get("/folders")
def get_folders(request: Request) -> list[dict[str, Any]]:
    return [cfg.to_dict() for cfg in _folders(request).get_config_arr()]


@router.get("/folder/{folder_id}")
def get_folder(folder_id: str, request: Request):
    folder = _folders(request).get(folder_id)
    if folder is None:
        return api_error("Invalid id")
    return folder.get_config().to_dict()


@router.post("/folder")
async def add_folder(request: Request):
    try:
        body = await request.json()
        cfg = FolderConfig.model_validate(body)
    except (ValueError, ValidationError):
        return api_error("Invalid arguments")

    if not cfg.default_sdk:
        sdks = list_sdks(_server_config(request).sdk_root_dir)
        if sdks:
            cfg.default_sdk = sdks[0]

    logger.debug("Add folder config: %s", cfg)
    folders = _folders(request)
    try:
        new_cfg = await run_in_threadpool(folders.add, cfg)
    except FolderError as e:
        return api_error(str(e))

    folder = folders.get(new_cfg.id)
    if folder is not None:
        server_url = request.headers.get("host") or request.url.netloc
        try:
            write_project_conf(folder, server_url, new_cfg.default_sdk)
        except OSError as e:
            return api_error(str(e))

    return new_cfg.to_dict()


@router.post("/folder/sync/{folder_id}")
async def sync_folder(folder_id: str, request: Request):
    logger.debug("Sync folder id: %s", folder_id)
    try:
        await run_in_threadpool(_folders(request).force_sync, folder_id)
    except FolderError as e:
        return api_error(str(e))
    return ""


@router.delete("/folder/{folder_id}")
def delete_folder(folder_id: str, request: Request):
    logger.debug("Delete folder id: %s", folder_id)
    try:
        deleted = _folders(request).delete(folder_id)
    except FolderError as e:
        return api_error(str(e))
    return deleted.to_dict()
