import logging
from logging import Logger as T_Logger
from logging.config import dictConfig
from datetime import datetime
from pathlib import Path
from typing import Optional

from pythonjsonlogger.json import JsonFormatter  # type: ignore # noqa F401

from cliphoard.config import LogSettings, get_settings
from cliphoard.constants import APP_NAME, LOG_ARCHIVES_TO_KEEP, LOG_FILE_NAME
from cliphoard.utils import get_time

logger: T_Logger = logging.getLogger(APP_NAME)
system_logger = logger.getChild("SYSTEM")


def build_logging_config(log_file_path: Path, log_level: str) -> dict:
    """Build the dictConfig mapping: JSON lines to the log file, plain text to the console."""
    log_level = log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(process)d %(message)s",
            },
            "standard": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "filename": str(log_file_path),
                "formatter": "json",
                "level": log_level,
                "encoding": "utf-8",
            },
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": log_level,
            },
        },
        "loggers": {
            APP_NAME: {
                "handlers": ["file", "console"],
                "level": log_level,
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Optional[LogSettings] = None) -> T_Logger:
    """
    Configure the cliphoard logger for a long-running process (watcher or CLI).

    The active log file is archived once a day and old archives are pruned
    before the handlers are attached.
    """
    settings = settings or get_settings(LogSettings)
    log_file_path = settings.log_dir / LOG_FILE_NAME
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    _archive_daily_log_file(log_file_path)
    _manage_logfile_archives(log_file_path)

    dictConfig(build_logging_config(log_file_path, settings.log_level))
    system_logger.debug("Logger for %s initialized at %s", APP_NAME, log_file_path)
    return logger


def _archive_daily_log_file(log_file_path: Path) -> Optional[Path]:
    """Archive the log file daily by renaming it with a timestamp."""
    current_time = get_time().replace(tzinfo=None)
    archive_files = sorted(
        log_file_path.parent.glob(f"{log_file_path.stem}_*.jsonl"),
        key=lambda f: f.stat().st_mtime,
        reverse=True,
    )
    if archive_files:
        latest_archive = archive_files[0]
        timestamp_str = latest_archive.stem.replace(f"{log_file_path.stem}_", "")
        try:
            timestamp = datetime.strptime(timestamp_str, "%Y%m%d_%H%M%S")
        except ValueError:
            system_logger.warning(
                "Could not parse timestamp from archive file %s, skipping archiving.",
                latest_archive,
            )
            return None
        if (current_time - timestamp).total_seconds() < 24 * 3600:
            return None

    if not log_file_path.exists() or log_file_path.stat().st_size == 0:
        return None

    archive_path = log_file_path.with_name(
        f"{log_file_path.stem}_{current_time.strftime('%Y%m%d_%H%M%S')}.jsonl"
    )
    try:
        log_file_path.rename(archive_path)
    except OSError:
        # Another process holds the log open (Windows); try again on next start.
        return None
    return archive_path


def _manage_logfile_archives(
    log_file_path: Path, days_to_keep: int = LOG_ARCHIVES_TO_KEEP
) -> list[Path]:
    """Keep only the most recent log archives. Returns the deleted paths."""
    archive_files = sorted(
        log_file_path.parent.glob(f"{log_file_path.stem}_*.jsonl"),
        key=lambda f: f.stat().st_mtime,
        reverse=True,
    )
    deleted: list[Path] = []
    for archive_file in archive_files[days_to_keep:]:
        archive_file.unlink(missing_ok=True)
        deleted.append(archive_file)
    return deleted


__all__ = ["build_logging_config", "logger", "setup_logging"]
