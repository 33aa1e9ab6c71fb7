"""Observability module: structured logging with trace correlation."""

from little_search_engine.observability.context import get_trace_context, set_trace_context, trace_context
from little_search_engine.observability.logging import JsonFormatter, configure_logging


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_trace_context",
    "set_trace_context",
    "trace_context",
]
