import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

_INITIALIZED = False


def build_file_handler(
    log_file: str,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 5,
) -> RotatingFileHandler:
    """Size-rotated file handler; backups are numbered log_file.1 .. log_file.N."""
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")


def init_logging(
    log_level: str = "INFO",
    log_file: str = "logs/waf_analytics.log",
    max_bytes: int = 1024 * 1024,
    backup_count: int = 5,
) -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return

    level = getattr(logging, log_level.upper(), logging.INFO)
    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    file_handler = build_file_handler(log_file, max_bytes, backup_count)
    stream_handler = logging.StreamHandler()

    logging.basicConfig(level=level, format=fmt, handlers=[file_handler, stream_handler])
    _INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"waf_analytics.{name}")
