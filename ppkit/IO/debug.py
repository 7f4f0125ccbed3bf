from __future__ import annotations

import logging
from typing import Optional, Union


def setup_logging(
    log_level: Union[str, int] = "INFO",
    log_filename: Optional[str] = None,
) -> logging.Logger:
    """
    Configure root logging for scripts and the command line.

    :param log_level: Level name (``"DEBUG"``, ``"INFO"``, ...) or numeric level.
    :type log_level: Union[str, int]
    :param log_filename: Optional file to log into instead of stderr.
    :type log_filename: Optional[str]
    :returns: The root logger.
    :rtype: logging.Logger
    :raises ValueError: If ``log_level`` is not a known level name.
    """
    if isinstance(log_level, str):
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level!r}")
    else:
        level = int(log_level)

    kwargs = {}
    if log_filename is not None:
        kwargs["filename"] = log_filename
        kwargs["filemode"] = "a"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
        **kwargs,
    )
    return logging.getLogger()
