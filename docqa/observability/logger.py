"""
Logging configuration.

One stdout handler on the root logger. Every record carries the correlation
ID of the request that produced it.

Dependencies: logging (stdlib), docqa.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys

from docqa.observability.correlation import CorrelationIdFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO
NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "google", "grpc", "faiss", "aiosqlite")


def configure_logging(level: str = "INFO") -> None:
    """
    Install the docqa handler on the root logger.

    Safe to call more than once: existing root handlers are replaced.

    Args:
        level: Root log level name (case-insensitive)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(CorrelationIdFilter())

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
