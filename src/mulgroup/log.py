"""Logger setup for the command-line entry point.

Library modules only call logging.getLogger(__name__); handlers are
installed here and nowhere else.
"""

import logging


def setup_basic_logger(name: str = "mulgroup", level: int = logging.INFO) -> logging.Logger:
    """Return a logger with a StreamHandler and a compact formatter.

    Calling it again for the same name only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    ch = logging.StreamHandler()
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s",
                            datefmt="%Y-%m-%d %H:%M:%S")
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger
