import logging
import sys
from typing import Callable, Literal

import structlog
from structlog.types import EventDict

OFF_LOG_LEVEL = logging.CRITICAL + 1

LEVEL_ALIASES = {"WARN": "WARNING"}


def add_static_context(**fields: str) -> Callable:
    def processor(logger: structlog.BoundLogger, method_name: str, event_dict: dict):
        for key, value in fields.items():
            event_dict.setdefault(key, value)

        return event_dict

    return processor


def drop_color_message_key(_, __, event_dict: EventDict) -> EventDict:
    event_dict.pop("color_message", None)
    return event_dict


def _normalize_log_level(level: str | int) -> int:
    if isinstance(level, int):
        return level

    normalized_level = level.strip().upper()
    normalized_level = LEVEL_ALIASES.get(normalized_level, normalized_level)

    if normalized_level == "OFF":
        return OFF_LOG_LEVEL

    level_map = logging.getLevelNamesMapping()

    if normalized_level in level_map:
        return level_map[normalized_level]

    raise ValueError(
        "Invalid log level '%s'. Supported values are DEBUG, INFO, WARN, WARNING, ERROR, CRITICAL, OFF, or an integer."
        % level
    )


def _apply_library_log_levels(library_log_levels: dict[str, str | int]) -> None:
    for logger_name, configured_level in library_log_levels.items():
        if not logger_name or not logger_name.strip():
            raise ValueError("Logger name in library_log_levels cannot be empty.")

        logger = logging.getLogger(logger_name)
        normalized_level = _normalize_log_level(configured_level)

        logger.setLevel(normalized_level)

        if normalized_level == OFF_LOG_LEVEL:
            logger.disabled = True
            logger.propagate = False
            logger.handlers.clear()
            continue

        logger.disabled = False
        logger.propagate = True


def configure_logging(
    log_level: str,
    service_name: str,
    environment: Literal["loc", "dev", "pre", "pro"],
    json_logs: bool,
    library_log_levels: dict[str, str | int] | None = None,
    container: str | None = None,
) -> None:
    static_context = {"service": service_name, "environment": environment}
    if container:
        static_context["container"] = container

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        drop_color_message_key,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        add_static_context(**static_context),
    ]

    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer = structlog.dev.ConsoleRenderer()
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_normalize_log_level(log_level))

    # httpx logs every probe request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if library_log_levels:
        _apply_library_log_levels(library_log_levels)

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        root_logger.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception
