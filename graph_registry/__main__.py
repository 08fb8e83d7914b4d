"""Run the HTTP server: ``python -m graph_registry``."""

from __future__ import annotations

import logging

import uvicorn

from .api import create_app
from .config import get_config
from .container import get_container
from .logging_setup import configure_logging

logger = logging.getLogger("graph_registry")


def main() -> None:
    config = get_config()
    configure_logging(config.observability)

    app = create_app(get_container())
    logger.info(
        "Starting graph registry",
        extra={"host": config.api.host, "port": config.api.port},
    )
    uvicorn.run(app, host=config.api.host, port=config.api.port, log_config=None)


if __name__ == "__main__":
    main()
