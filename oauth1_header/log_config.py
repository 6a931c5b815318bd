"""
Structured logging configuration.

Provides JSON logging for scripts and applications using the signer.
"""
import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger


def setup_json_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure JSON structured logging on the root logger.

    Args:
        level: Log level name; falls back to the LOG_LEVEL environment
            variable, then INFO

    Returns:
        The root logger
    """
    log_handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(message)s',
        timestamp=True
    )
    log_handler.setFormatter(formatter)

    log_level_name = (level or os.environ.get('LOG_LEVEL', 'INFO')).upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    logging.root.handlers = []
    logging.root.addHandler(log_handler)
    logging.root.setLevel(log_level)

    return logging.root
