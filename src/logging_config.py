"""Logging configuration for Team Radar.

Console output follows the configured level. When a log file is set it
also receives DEBUG records from the ``src`` loggers, which is where
profile normalization reports the rows it drops or rewrites.
"""
import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER = "src"

# SQLAlchemy subsystems that echo statements and pool checkouts
LIBRARY_LOG_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "sqlalchemy.orm": logging.WARNING,
}


def _parse_level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
) -> None:
    """Configure application-wide logging.

    Call once at application startup (main.py, scripts).

    Args:
        level: Console log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path for a rotating file handler that keeps
            the application's DEBUG records
    """
    root = logging.getLogger()

    # Avoid duplicate handlers on repeated calls
    if root.handlers:
        return

    console_level = _parse_level(level)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(fmt)
    root.addHandler(console)
    root.setLevel(console_level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=2 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
        logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG)

    for name, library_level in LIBRARY_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(library_level)
