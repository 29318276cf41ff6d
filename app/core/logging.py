"""Root logger setup shared by the API and the CLI scripts."""

import logging
import sys
import time

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def build_formatter() -> logging.Formatter:
    """Formatter that stamps records in UTC, matching the trailing Z in LOG_DATEFMT."""
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    formatter.converter = time.gmtime
    return formatter


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(build_formatter())
        root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())
    # pymongo logs every heartbeat at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
