"""
Logging setup for the planning service.

Two output modes share one handler layout (stdout plus an optional file):
plain text in ``LOG_FORMAT`` or one JSON object per line. Pipeline stage
transitions are logged through ``log_pipeline_event`` so that JSON output
carries a compact summary of the pipeline state.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-35s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Record attribute holding the payload attached by log_pipeline_event.
PIPELINE_ATTR = "pipeline"


class StructuredFormatter(logging.Formatter):
    """
    JSON lines formatter.

    Emits ``timestamp`` (record creation time, UTC), ``level``, ``logger``
    and ``message``, plus ``pipeline`` for pipeline events and
    ``exception`` when the record carries a traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        pipeline = getattr(record, PIPELINE_ATTR, None)
        if pipeline is not None:
            payload[PIPELINE_ATTR] = pipeline
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _build_handlers(log_file: Optional[str], formatter: logging.Formatter) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: str = "planning",
    json_format: bool = True,
) -> logging.Logger:
    """
    Attach stdout (and optionally file) handlers to the package logger.

    Calling it again replaces the handlers instead of stacking them.
    """
    formatter = StructuredFormatter() if json_format else logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in _build_handlers(log_file, formatter):
        logger.addHandler(handler)
    return logger


def summarize_pipeline_state(state: Dict[str, Any]) -> Dict[str, Any]:
    """Key pipeline fields, with stage outputs reduced to presence flags."""
    validation = state.get("validation") or {}
    return {
        "session_id": state.get("session_id"),
        "current_stage": state.get("current_stage"),
        "is_valid": validation.get("is_valid"),
        "completeness_score": state.get("completeness_score"),
        "has_plan": state.get("trip_plan") is not None,
        "has_estimate": state.get("cost_estimate") is not None,
    }


def log_pipeline_event(
    event: str,
    state: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log one pipeline stage transition at INFO.

    Args:
        event: Event name, e.g. "validation_complete"
        state: Pipeline state after the stage
        extra: Additional fields for the event payload
        logger: Defaults to the "planning" logger
    """
    payload: Dict[str, Any] = {"event": event, "state": summarize_pipeline_state(state)}
    if extra:
        payload["extra"] = extra

    (logger or logging.getLogger("planning")).info(
        f"Pipeline event: {event}", extra={PIPELINE_ATTR: payload}
    )
