"""Structured logging configuration using structlog."""

import logging
import re
import sys

import structlog

# Card and account numbers: 13 to 19 consecutive digits, last four kept
_CARD_NUMBER_PATTERN = re.compile(r"\b\d{9,15}(\d{4})\b")


def redact_card_numbers(value: str) -> str:
    """Mask every card-like number in a string down to its last four digits."""
    return _CARD_NUMBER_PATTERN.sub(r"****\1", value)


class CardNumberRedactingFilter(logging.Filter):
    """Filter that redacts card numbers from log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact card numbers from log message."""
        if record.msg and isinstance(record.msg, str):
            record.msg = redact_card_numbers(record.msg)
        if record.args:
            record.args = tuple(
                redact_card_numbers(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )
        return True


def _redact_card_numbers(
    logger: logging.Logger, method_name: str, event_dict: dict
) -> dict:
    """Structlog processor to redact card numbers from event dictionaries."""
    for key, value in list(event_dict.items()):
        if isinstance(value, str):
            event_dict[key] = redact_card_numbers(value)
    return event_dict


def setup_logging(log_level: str = "INFO") -> None:
    """Configure structured logging for the application."""
    level = getattr(logging, log_level.upper())
    card_filter = CardNumberRedactingFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.addFilter(card_filter)
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _redact_card_numbers,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
