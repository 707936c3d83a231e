"""
Logging setup for webhook events.
"""

import sys

from loguru import logger


def setup_logging(
    log_level: str = "INFO",
    service_name: str = "webhook-events",
    enable_json: bool = False,
):
    """
    Set up standardized logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        service_name: Name shown in every log line
        enable_json: Enable JSON structured logging
    """
    logger.remove()

    if enable_json:
        logger.add(sys.stderr, level=log_level.upper(), serialize=True)
    else:
        log_format = (
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
            f"{service_name}:{{function}}:{{line}} - {{message}}"
        )
        logger.add(
            sys.stderr,
            format=log_format,
            level=log_level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=False,
        )

    logger.info(f"Logging configured for {service_name} at level: {log_level}")
