import logging
import sys
from typing import Any

import structlog

LOGGER_NAME = "gitlab_client"

_CREDENTIAL_KEYS = {"token", "private_token", "authorization", "sudo"}


def _redact_credentials(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    for key in _CREDENTIAL_KEYS & event_dict.keys():
        event_dict[key] = "[REDACTED]"
    return event_dict


def setup_logging(log_level: str = "INFO") -> None:
    """Send client events to the stdlib "gitlab_client" logger as JSON lines.

    Calling it again only changes the level.

    Args:
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    if structlog.is_configured():
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            _redact_credentials,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = LOGGER_NAME, **initial_values: Any) -> Any:
    """Return a structlog logger for name, bound to any initial values."""
    return structlog.get_logger(name, **initial_values)
