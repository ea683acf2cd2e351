"""
Logging setup for the guide service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Records carry the timestamp, level,
logger name and message.  Repeated calls are no‑ops so that tests and
repeated ``create_app`` calls do not duplicate output.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Chatty third‑party loggers that are only interesting while debugging.
NOISY_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (``"DEBUG"``, ``"INFO"``...).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record.  Empty or ``None``
        disables the file handler.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if numeric_level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
