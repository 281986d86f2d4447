# src/todo_app/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILENAME = "todo.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _AppOnlyFilter(logging.Filter):
    """Lets todo_app records through; everything else only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("todo_app."):
            return True
        return record.levelno >= logging.ERROR


def resolve_level(name: str, default: int = logging.WARNING) -> int:
    """Map "info", "DEBUG", ... to a logging level; unknown names fall back to `default`."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    *,
    log_dir: str | Path,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route all logging to two places and return the log file path.

    stderr shows todo_app records at `console_level` and up, other loggers
    only at ERROR, so the task list stays readable. `<log_dir>/todo.log` gets everything from `file_level`.
    Existing root handlers are replaced, so calling this twice does not
    duplicate output.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_AppOnlyFilter())
    root.addHandler(console)

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(file_level)
    to_file.setFormatter(fmt)
    root.addHandler(to_file)

    logging.captureWarnings(True)
    return log_file
