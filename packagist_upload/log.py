"""Logging helpers with secret redaction."""

import logging
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def redact(text: str, secrets: Optional[Iterable[str]] = None) -> str:
    """Replace every occurrence of the given secrets in text."""
    redacted = text
    for secret in secrets or ():
        if secret:
            redacted = redacted.replace(secret, "[REDACTED]")
    return redacted


def get_logger(name: str = "packagist_upload", level: int = logging.INFO) -> logging.Logger:
    """Return the package logger with a stream handler attached."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
