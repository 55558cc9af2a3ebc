"""Logging setup shared by the pipeline and the CLI."""

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_ROOT = "ugc_voiceover"


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
