"""
Structured logging for the spell checker, built on structlog.

Log lines carry the service name and environment, the contextvars bound
for the current request (correlation ID, path, method) and the call site.
Output is JSON in production or when LOG_FORMAT=json, and a colored console
rendering otherwise.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import Processor

_DEFAULT_MAX_BYTES = 100 * 1024 * 1024
_DEFAULT_BACKUP_COUNT = 10


def add_service_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add ``service.name`` and ``deployment.environment`` from the environment."""
    event_dict["service.name"] = os.getenv("SERVICE_NAME", "unknown")
    event_dict["deployment.environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("true", "1", "yes")


def _build_processors(use_json: bool) -> list[Processor]:
    callsite = structlog.processors.CallsiteParameterAdder(
        parameters=[
            structlog.processors.CallsiteParameter.FILENAME,
            structlog.processors.CallsiteParameter.FUNC_NAME,
            structlog.processors.CallsiteParameter.LINENO,
        ],
    )
    processors: list[Processor] = [
        merge_contextvars,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        callsite,
    ]
    if use_json:
        return [
            *processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [*processors, structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=True)]


def _rotating_file_handler(path: str) -> RotatingFileHandler:
    log_file = Path(path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=str(log_file),
        maxBytes=int(os.getenv("LOG_MAX_BYTES", str(_DEFAULT_MAX_BYTES))),
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", str(_DEFAULT_BACKUP_COUNT))),
        encoding="utf-8",
    )


def configure_service_logging(
    service_name: str,
    environment: str | None = None,
    log_level: str = "INFO",
    log_to_file: bool | None = None,
    log_file_path: str | None = None,
) -> None:
    """
    Configure structlog and stdlib logging for the service process.

    Args:
        service_name: Service name written to every log line
        environment: Deployment environment; ENVIRONMENT env var when None
        log_level: Minimum stdlib level name
        log_to_file: Also write to a rotating file; LOG_TO_FILE env var when None
        log_file_path: Log file location; LOG_FILE_PATH env var or
            ./logs/{service_name}.log when None

    File rotation honours LOG_MAX_BYTES (100MB) and LOG_BACKUP_COUNT (10).
    """
    environment = environment or os.getenv("ENVIRONMENT", "development")
    os.environ.setdefault("SERVICE_NAME", service_name)
    os.environ.setdefault("ENVIRONMENT", environment)

    log_format = os.getenv("LOG_FORMAT", "").lower()
    use_json = log_format == "json" or (not log_format and environment == "production")

    if log_to_file is None:
        log_to_file = _env_flag("LOG_TO_FILE")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_to_file:
        path = log_file_path or os.getenv("LOG_FILE_PATH", f"./logs/{service_name}.log")
        handlers.append(_rotating_file_handler(path))

    logging.basicConfig(
        format="%(message)s",
        handlers=handlers,
        level=getattr(logging, log_level.upper()),
        force=True,
    )
    structlog.configure(
        processors=_build_processors(use_json),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_service_logger(name: str | None = None) -> Any:
    """Return a structlog logger, bound to ``logger_name`` when a name is given."""
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger


def bind_request_context(correlation_id: str, **context: Any) -> None:
    """Replace the contextvars bound to every log line of the current request."""
    clear_contextvars()
    bind_contextvars(correlation_id=correlation_id, **context)
