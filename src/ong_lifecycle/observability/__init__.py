"""Observabilidade: logging JSON e correlation_id."""

from ong_lifecycle.observability.context import correlation_scope, get_correlation_id
from ong_lifecycle.observability.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "configure_from_settings",
    "correlation_scope",
    "get_correlation_id",
    "get_logger",
]
