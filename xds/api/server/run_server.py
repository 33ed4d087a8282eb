"""Start the XDS server: bootstrap, logging, folders, HTTP."""

import logging
from pathlib import Path

import uvicorn

from ..config.init_config import init_config
from ..folder.Folders import Folders
from ..log.configure_logging import configure_logging
from .create_app import create_app

logger = logging.getLogger(__name__)


def run_server(config_path: str | None = None, port: str | None = None, host: str = "0.0.0.0") -> None:
    """Run the server until interrupted.

    Raises:
        ConfigError: The configuration is invalid or its directories cannot be created.
    """
    server_config = init_config(config_path)
    if port:
        server_config = server_config.model_copy(update={"http_port": str(port)})
    configure_logging(server_config.log, server_config.logs_dir)

    folders = Folders(server_config)
    if folders.folders_file is not None:
        folders.load_config(Path(folders.folders_file))

    app = create_app(server_config, folders)
    logger.info("Serving on %s:%s", host, server_config.http_port)
    uvicorn.run(app, host=host, port=int(server_config.http_port), log_config=None)
