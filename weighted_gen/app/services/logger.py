from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

LOGGER_NAME = "weighted_gen"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(slots=True)
class LoggerBundle:
    app: logging.Logger
    tool: logging.Logger
    latest_log_path: Path


def tool_logger(tool: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{tool}")


def _rotate_latest_log(logs_dir: Path, keep_archives: int = 5) -> Path:
    logs_dir.mkdir(parents=True, exist_ok=True)
    latest = logs_dir / "latest.log"
    if latest.exists():
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        latest.replace(logs_dir / f"latest_{stamp}.log")

    archives = sorted(
        (path for path in logs_dir.glob("latest_*.log") if path.is_file()),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )
    for stale in archives[keep_archives:]:
        stale.unlink(missing_ok=True)
    return latest


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def configure_logging(logs_dir: Path, level: str = "INFO", tool: str = "simulate") -> LoggerBundle:
    """Route every ``weighted_gen`` logger (core sampler included) to stderr and ``latest.log``.

    The previous ``latest.log`` is archived first; only the newest archives are kept.
    """
    latest = _rotate_latest_log(logs_dir)
    formatter = logging.Formatter(LOG_FORMAT)

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _reset_handlers(app_logger)
    app_logger.propagate = False

    for handler in (logging.StreamHandler(), logging.FileHandler(latest, mode="w", encoding="utf-8")):
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)

    tool_log = tool_logger(tool)
    tool_log.info("Logging %s run at %s to %s.", tool, logging.getLevelName(app_logger.level), latest)
    return LoggerBundle(app=app_logger, tool=tool_log, latest_log_path=latest)
