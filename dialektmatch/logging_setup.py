from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from dialektmatch.paths import get_paths

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_MAX_BYTES = 1_000_000
_BACKUPS = 3


def _resolve_level(level: str | None) -> int:
    name = (level or os.environ.get("DIALEKTMATCH_LOG_LEVEL") or "INFO").strip().upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def _rotating_handler(path: Path) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(str(path), maxBytes=_MAX_BYTES, backupCount=_BACKUPS, encoding="utf-8")


def setup_logging(*, name: str = "dialektmatch", level: str | None = None, log_file: bool = True) -> logging.Logger:
    """Configure the root logger once and return the ``dialektmatch`` logger.

    *level* wins over ``DIALEKTMATCH_LOG_LEVEL``. Handlers already attached
    are left alone, so repeated calls only adjust the level.
    """
    lvl = _resolve_level(level)
    fmt = logging.Formatter(_FORMAT)

    root = logging.getLogger()
    root.setLevel(lvl)

    handlers: list[logging.Handler] = []
    # subclasses (file handlers, pytest capture) do not count as console output
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        handlers.append(logging.StreamHandler())

    if log_file and not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        try:
            handlers.append(_rotating_handler(get_paths().log_path))
        except OSError as e:
            logging.getLogger(name).warning("File logging disabled: %s", e)

    for h in handlers:
        h.setLevel(lvl)
        h.setFormatter(fmt)
        root.addHandler(h)

    return logging.getLogger(name)
