# Rev 0.2.0

# projectdesk – logging setup (Rev 0.2.0)
from __future__ import annotations
import logging, os, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .paths import APP_NAME, logs_dir

try:
    # Optional: pipe Qt messages into Python logging if Qt exists
    from PySide6.QtCore import qInstallMessageHandler, QtMsgType
    def _qt_handler(msg_type, context, message):
        lvl = {
            QtMsgType.QtDebugMsg: logging.DEBUG,
            QtMsgType.QtInfoMsg: logging.INFO,
            QtMsgType.QtWarningMsg: logging.WARNING,
            QtMsgType.QtCriticalMsg: logging.ERROR,
            QtMsgType.QtFatalMsg: logging.CRITICAL,
        }.get(msg_type, logging.INFO)
        logging.getLogger(f"{APP_NAME}.qt").log(lvl, message)
except ImportError:
    qInstallMessageHandler = None  # PySide6 not available at import time

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV = "PROJECTDESK_LOG_LEVEL"

# handlers we installed, so a second setup_logging() call replaces instead of stacking
_installed: list[logging.Handler] = []


def get_logger(name: str) -> logging.Logger:
    if name == APP_NAME or name.startswith(APP_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_NAME}.{name}")


def resolve_level(default: str = "INFO") -> tuple[str, int]:
    # Level via env (DEBUG/INFO/WARNING/ERROR), then caller default
    level_name = os.environ.get(LOG_LEVEL_ENV, default).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level_name, level = "INFO", logging.INFO
    return level_name, level


def setup_logging(app_name: str = APP_NAME, level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    level_name, lvl = resolve_level(level)

    log_dir = log_dir or logs_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logfile = log_dir / f"{app_name}.log"

    root = logging.getLogger()
    root.setLevel(lvl)
    for h in _installed:
        root.removeHandler(h)
        h.close()
    _installed.clear()

    # File: rotate at 5MB, keep 7 backups
    fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=7, encoding="utf-8")
    fh.setFormatter(logging.Formatter(FORMAT, DATEFMT))
    fh.setLevel(lvl)

    # Console: inherit level
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter(FORMAT, DATEFMT))
    ch.setLevel(lvl)

    for h in (fh, ch):
        root.addHandler(h)
        _installed.append(h)

    # Uncaught exceptions → log as ERROR
    def _excepthook(exctype, value, tb):
        logging.getLogger(f"{APP_NAME}.unhandled").error("Uncaught exception", exc_info=(exctype, value, tb))
        # keep default behavior
        sys.__excepthook__(exctype, value, tb)
    sys.excepthook = _excepthook

    if qInstallMessageHandler is not None:
        qInstallMessageHandler(_qt_handler)

    get_logger(__name__).info("Logging initialized at %s; file: %s", level_name, logfile)
    return logfile
