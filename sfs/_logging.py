import logging
import os
import sys

import structlog

_LEVELS = {
    "quiet": logging.CRITICAL + 10,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def set_verbosity(level: str = "info") -> None:
    """Set the verbosity of `sfs.logger`

    Parameters
    ----------
    level : str
        one of "quiet", "warning", "info" or "debug". Log messages are always
        written to stderr, since stdout is reserved for spectra.
    """
    assert level in _LEVELS, f"level should be one of {list(_LEVELS)}"
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS[level]),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


set_verbosity(os.environ.get("SFS_VERBOSITY", "info"))
logger = structlog.get_logger("sfs")
