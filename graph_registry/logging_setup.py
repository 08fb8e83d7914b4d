"""Process-wide logging setup driven by ObservabilityConfig.

Modules keep using ``logging.getLogger(__name__)`` with ``extra={...}``.
When ``structured`` is set, the root handler renders every record as
one JSON object through structlog's ProcessorFormatter.
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError


def build_json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Formatter emitting one JSON line per stdlib record, ``extra`` included."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ExtraAdder(),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger.

    Args:
        config: Logging settings; defaults to ``get_config().observability``.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="GR_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(build_json_formatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logging.basicConfig(level=level, handlers=[handler], force=True)
