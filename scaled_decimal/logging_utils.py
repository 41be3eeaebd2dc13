import logging
import os
import sys
import uuid
from logging.handlers import TimedRotatingFileHandler

from scaled_decimal.constants import (
    ENV_CONSOLE_LOG_LEVEL,
    ENV_FILE_LOG_LEVEL,
    ENV_LOG_BACKUP_COUNT,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    ENV_LOG_TO_FILE,
    ENV_RUN_ID,
)


def env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_log_level(raw_level: str | None, default: int) -> int:
    if not raw_level:
        return default

    normalized = raw_level.strip().upper()
    if normalized.isdigit():
        return int(normalized)

    parsed = logging.getLevelName(normalized)
    if isinstance(parsed, int):
        return parsed
    return default


class RuntimeLogContextFilter(logging.Filter):
    def __init__(self, run_id: str, mode: str):
        super().__init__()
        self.run_id = run_id
        self.mode = mode

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = self.run_id
        record.mode = self.mode
        return True


def configure_logging(verbose: bool = False, mode: str = "cli") -> str:
    """
    Configure root logging for the command line entry point.

    Console output goes to stderr so stdout carries only results. A daily
    rotating file under SCALED_DECIMAL_LOG_DIR (default "logs") is added
    only when SCALED_DECIMAL_LOG_TO_FILE is truthy.
    Returns the run id.
    """
    run_id = os.getenv(ENV_RUN_ID, uuid.uuid4().hex[:12])

    default_level = logging.DEBUG if verbose else logging.WARNING
    base_level = _parse_log_level(os.getenv(ENV_LOG_LEVEL), default_level)
    console_level = _parse_log_level(os.getenv(ENV_CONSOLE_LOG_LEVEL), base_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt=(
            "%(asctime)s %(levelname)s %(name)s "
            "[run_id=%(run_id)s mode=%(mode)s pid=%(process)d] %(message)s"
        )
    )
    context_filter = RuntimeLogContextFilter(run_id=run_id, mode=mode)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(context_filter)
    root_logger.addHandler(console_handler)

    if env_bool(ENV_LOG_TO_FILE):
        log_dir = os.getenv(ENV_LOG_DIR, "logs")
        os.makedirs(log_dir, exist_ok=True)
        file_level = _parse_log_level(
            os.getenv(ENV_FILE_LOG_LEVEL),
            _parse_log_level(os.getenv(ENV_LOG_LEVEL), logging.DEBUG),
        )
        backup_count = int(os.getenv(ENV_LOG_BACKUP_COUNT, "30"))

        file_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, "scaled-decimal.log"),
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    return run_id
