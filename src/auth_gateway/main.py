"""Main entry point for the Auth Gateway."""

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from auth_gateway.config import get_settings


def setup_logging() -> None:
    """Configure application logging."""
    settings = get_settings()

    log_format = (
        '{"time": "%(asctime)s", "level": "%(levelname)s", '
        '"logger": "%(name)s", "message": "%(message)s"}'
        if settings.log_format == "json"
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main() -> None:
    """Run the Auth Gateway server."""
    # Load environment variables from .env file
    load_dotenv()

    setup_logging()

    settings = get_settings()
    logger = logging.getLogger(__name__)

    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; register and login will fail")

    logger.info(
        "Starting Auth Gateway",
        extra={"host": settings.host, "port": settings.port},
    )

    from auth_gateway.api.app import create_app

    app = create_app(settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
