from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_ENV_VAR = "BAYESDICT_LOG_LEVEL"


def resolve_level(level: Optional[str] = None) -> int:
    name = (level or os.environ.get(_ENV_VAR) or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str] = None) -> None:
    """Configure stdlib logging for the command-line tools.

    Respects env var BAYESDICT_LOG_LEVEL if `level` is None. Logs go to stderr
    so that scores printed on stdout stay machine-readable.
    """
    logging.basicConfig(level=resolve_level(level), format=_DEFAULT_FORMAT, stream=sys.stderr)
    logging.getLogger("bayesdict").setLevel(resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
