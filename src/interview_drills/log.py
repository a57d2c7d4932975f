from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog


def _configure_structlog(level: int) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def setup_logging(
    log_level: str, log_dir: Path | None = None, max_size_mb: int = 10
) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "drills.log",
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=5,
        )
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    _configure_structlog(level)


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger routed through stdlib logging.

    Until setup_logging() runs, events below INFO are dropped and the rest go
    to whatever handlers the host application gave the stdlib root logger.
    """
    if not structlog.is_configured():
        _configure_structlog(logging.INFO)
    return structlog.get_logger(name)
