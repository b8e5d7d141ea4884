import logging
import sys

from config import log_level


def get_logger(name: str = "combinatorics") -> logging.Logger:
    logger = logging.getLogger(f"combinatorics.{name}")
    if logger.handlers:
        return logger

    logger.setLevel(log_level())
    handler = logging.StreamHandler(sys.stdout)
    fmt = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
