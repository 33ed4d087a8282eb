"""Build the FastAPI application serving the REST API."""

from fastapi import FastAPI

from ...constants import API_PREFIX
from ..config.get_package_version import get_package_version
from ..config.XDSConfig import XDSConfig
from ..folder.Folders import Folders
from .routes import router


def create_app(server_config: XDSConfig, folders: Folders) -> FastAPI:
    """Create the application bound to one folders registry.

    The registry is shared by every request handler through ``app.state``.
    """
    app = FastAPI(
        title="XDS Server",
        description="Folders mirroring client workspaces on the build server",
        version=get_package_version(),
        docs_url=f"{API_PREFIX}/swagger",
        redoc_url=None,
        openapi_url=f"{API_PREFIX}/openapi.json",
    )
    app.state.server_config = server_config
    app.state.folders = folders

    # e.g. /folders -> /api/v1/folders
    app.include_router(router, prefix=API_PREFIX)
    return app
