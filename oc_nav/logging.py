from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FILE_NAME = "oc_nav.log"


def _resolve_log_dir(settings: object) -> Path:
    """Resolve the log directory.

    - `~` is expanded.
    - Relative paths are taken from the current working directory.
    """

    raw = getattr(settings, "OC_NAV_LOG_DIR", Path("~/.oc_nav/logs"))
    p = raw if isinstance(raw, Path) else Path(str(raw))
    return p.expanduser().resolve()


def setup_logging(settings: object) -> Path | None:
    """Configure Python logging to write to a rotating diagnostic log file.

    Returns the resolved log file path, or None when logging is disabled.

    Rotation:
      - Daily rotation at midnight.
      - Keep the last `OC_NAV_LOG_BACKUP_COUNT` rotated files.

    Notes:
      - No console handler: the TUI owns the terminal.
      - This function is safe to call multiple times (it resets handlers).
    """

    root = logging.getLogger()
    root.handlers = []

    if not bool(getattr(settings, "OC_NAV_LOG_ENABLED", True)):
        root.addHandler(logging.NullHandler())
        return None

    log_dir = _resolve_log_dir(settings)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / LOG_FILE_NAME

    level_name = str(getattr(settings, "OC_NAV_LOG_LEVEL", "INFO") or "INFO").upper().strip()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    file_handler = TimedRotatingFileHandler(
        filename=str(log_file),
        when="midnight",
        interval=1,
        backupCount=max(0, int(getattr(settings, "OC_NAV_LOG_BACKUP_COUNT", 7) or 0)),
        encoding="utf-8",
        utc=False,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(fmt))

    root.setLevel(level)
    root.addHandler(file_handler)

    logging.getLogger("oc_nav").info(
        "oc_nav logging enabled (file=%s, level=%s)",
        os.fspath(log_file),
        level_name,
    )

    return log_file
