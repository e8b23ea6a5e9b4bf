# panzoom/utils/logging_setup.py
"""
Logging for the panzoom package.

Library modules log through `get_logger(__name__)` and never install
handlers themselves. The demo entry point calls `configure_logging` once;
embedding hosts can skip it and configure the `panzoom` logger their way.
"""
from __future__ import annotations

import logging
import os
from datetime import datetime

LOGGER_ROOT = "panzoom"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Third-party loggers that get chatty once the root is at DEBUG.
_QUIET = ("PIL", "asyncio")


def configure_logging(level: int = logging.INFO, *, log_to_file: bool = False,
                      log_dir: str = "logs") -> logging.Logger:
    """
    Console output via the root logger, `level` applied to the package
    logger only. With `log_to_file`, package records also go to
    `<log_dir>/panzoom-<timestamp>.log`. Returns the package logger.
    """
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    for name in _QUIET:
        logging.getLogger(name).setLevel(logging.WARNING)

    pkg = logging.getLogger(LOGGER_ROOT)
    pkg.setLevel(level)

    if log_to_file:
        os.makedirs(log_dir, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        path = os.path.join(log_dir, f"{LOGGER_ROOT}-{stamp}.log")
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATEFMT))
        pkg.addHandler(handler)
        pkg.info("Logging to %s", path)
    return pkg


def get_logger(name: str) -> logging.Logger:
    """Logger inside the package hierarchy; bare names get the package prefix."""
    if name != LOGGER_ROOT and not name.startswith(LOGGER_ROOT + "."):
        name = f"{LOGGER_ROOT}.{name}"
    return logging.getLogger(name)
