"""Command line entry point for the task_list_svc service."""

import logging

import uvicorn

from . import config

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and serve the API with uvicorn."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    logger.info(f"Starting task_list_svc on http://{config.SERVICE_HOST}:{config.SERVICE_PORT}")
    uvicorn.run(
        "task_list_svc.api.app:app",
        host=config.SERVICE_HOST,
        port=config.SERVICE_PORT,
        log_level=config.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
