# NLP_DepNode/utils/logging_config.py
import logging
import sys
from typing import Mapping, Optional

LEVELS = {
    'quiet': logging.WARNING,
    'normal': logging.INFO,
    'debug': logging.DEBUG
}

def setup_logger(name: str, verbosity: Optional[str] = None) -> logging.Logger:
    """
    Set up logger with consistent format and verbosity levels.

    Args:
        name: Logger name
        verbosity: 'quiet', 'normal', or 'debug'. A logger created without
            one starts at 'normal'; passing one for an existing logger
            changes its level.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.propagate = False

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(handler)
        _set_level(logger, verbosity or 'normal')
        logger.debug(f"Created logger '{name}' with level {logging.getLevelName(logger.level)}")
    elif verbosity is not None:
        _set_level(logger, verbosity)

    return logger

def get_logger(name: str, config: Optional[Mapping] = None) -> logging.Logger:
    """Logger for `name` at the verbosity of the config's 'verbose' entry."""
    verbosity = config.get('verbose') if config else None
    return setup_logger(name, verbosity or 'normal')

def _set_level(logger: logging.Logger, verbosity: str):
    level = LEVELS.get(verbosity, logging.INFO)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)

logger = setup_logger('NLP_DepNode')
