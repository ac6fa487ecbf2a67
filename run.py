"""Entry point for the Product Pricing API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (or a ``.env``
file in the working directory); defaults are ``0.0.0.0`` and ``8000``.
Uvicorn's own logging configuration is disabled so its messages go
through the handlers installed by ``create_app`` (``LOG_LEVEL`` and
``LOG_FILE`` apply to both).

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from product_pricing_api.app.core.config import settings
from product_pricing_api.app.main import app


def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on http://%s:%s (docs at /docs)", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
