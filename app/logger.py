# app/logger.py
import logging
import sys
from typing import Optional
from app.config import config

_DEFAULT_FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# Server loggers follow the store's level so access/error lines are not lost
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "gunicorn.error", "gunicorn.access")
_configured = False

def _level_value(level_name: str) -> int:
    return getattr(logging, level_name.strip().upper(), logging.INFO)

def configure_logging(level: Optional[str] = None, fmt: str = _DEFAULT_FMT) -> int:
    """
    Set up stdout logging. The first call installs the handler; a later call
    with an explicit level (create_app passes its Config.log_level) re-applies
    it. Returns the effective numeric level.
    """
    global _configured
    root = logging.getLogger()
    if _configured and level is None:
        return root.level

    level_value = _level_value(level or config.log_level)
    root.setLevel(level_value)

    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(fmt))
        root.addHandler(h)
    for h in root.handlers:
        h.setLevel(level_value)
        if not h.formatter:
            h.setFormatter(logging.Formatter(fmt))

    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level_value)

    _configured = True
    return level_value

def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_logging()  # ensures configured on first use
    return logging.getLogger(name or __name__)
