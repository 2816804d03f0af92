"""
Logging Configuration
Attaches handlers to the 'meshsampler' logger for command-line runs.
Library modules only create their own `logging.getLogger(__name__)` loggers
and never call this.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the package's log records to stderr and, optionally, a file.

    Calling it again replaces (and closes) the handlers of the previous call.

    Args:
        level: Logging level as a number or a name such as "DEBUG".
        log_file: Optional path of a log file, overwritten on each run.

    Raises:
        ValueError: If `level` is an unknown level name.

    Returns:
        The configured 'meshsampler' logger.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = resolved

    logger = logging.getLogger("meshsampler")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # stderr keeps stdout free for the sampled points
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging to stderr{' and ' + log_file if log_file else ''} at level {logging.getLevelName(level)}.")
    return logger
