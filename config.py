import logging
import os
from typing import Optional

TEN_MILLION = 10000000

MAX_RESULTS_ENV = "COMBINATORICS_MAX_RESULTS"
LOG_LEVEL_ENV = "COMBINATORICS_LOG_LEVEL"


def max_results(override: Optional[int] = None) -> Optional[int]:
    """
    Result-row limit for one call. An explicit override wins over the environment.
    Returns None when the guard is disabled (limit <= 0).
    """
    if override is not None:
        limit = int(override)
    else:
        raw = os.environ.get(MAX_RESULTS_ENV, "").strip()
        if not raw:
            limit = TEN_MILLION
        else:
            try:
                limit = int(raw)
            except ValueError:
                raise ValueError(f"{MAX_RESULTS_ENV} must be an integer, got {raw!r}") from None
    if limit <= 0:
        return None
    return limit


def log_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level
