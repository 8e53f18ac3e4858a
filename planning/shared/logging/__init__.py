"""Logging configuration and utilities."""

from planning.shared.logging.config import (
    LOG_FORMAT,
    StructuredFormatter,
    log_pipeline_event,
    setup_logging,
    summarize_pipeline_state,
)

__all__ = [
    "LOG_FORMAT",
    "StructuredFormatter",
    "log_pipeline_event",
    "setup_logging",
    "summarize_pipeline_state",
]
