"""Structured logging configuration using structlog.

The SDK only emits events through `structlog.get_logger(__name__)`; it never
configures logging on import. Applications that want the SDK's events
rendered consistently call `configure_logging()` once at startup: JSON output
for production, pretty console output for development.

Applications that already own the structlog configuration pass
`configure_structlog=False`; only a handler for the "chaindoc" stdlib logger
is then installed, and its formatter still masks credentials.
"""

import logging
import sys
from typing import IO, Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger


SDK_LOGGER_NAME = "chaindoc"
SENSITIVE_KEYS = frozenset({"authorization", "secret_key", "share_token"})
NOISY_LOGGERS = ("httpx", "httpcore")


def add_sdk_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every log event with the SDK name."""
    event_dict["sdk"] = "chaindoc"
    return event_dict


def redact_secrets(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask credentials that end up in event fields."""
    for key in list(event_dict):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = "***"
    return event_dict


def _is_production(environment: str) -> bool:
    return environment.lower() == "production"


def build_pre_chain(environment: str) -> list[Processor]:
    """Processors run on every SDK event before rendering."""
    exc_processor: Processor = (
        structlog.processors.format_exc_info
        if _is_production(environment)
        else structlog.processors.ExceptionPrettyPrinter()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_sdk_context,
        redact_secrets,
        exc_processor,
    ]


def build_handler(
    level: int,
    environment: str,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Stream handler rendering SDK records as JSON or console lines.

    Redaction runs inside the formatter, so it applies to SDK events even
    when the application's own structlog chain does not redact.
    """
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if _is_production(environment)
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                redact_secrets,
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=build_pre_chain(environment),
        )
    )
    handler.setLevel(level)
    return handler


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    *,
    configure_structlog: bool = True,
) -> None:
    """Configure structured logging for the SDK.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Environment name (development, production)
        configure_structlog: Also route structlog through the stdlib logging
            module; disable when the application configures structlog itself
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    if configure_structlog:
        structlog.configure(
            processors=build_pre_chain(environment)
            + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.handlers.clear()
    sdk_logger.addHandler(build_handler(level, environment))
    sdk_logger.setLevel(level)
    sdk_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if _is_production(environment) else "console",
    )
