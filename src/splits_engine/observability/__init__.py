"""Observability: structured logging."""

from splits_engine.observability.logging import configure_logging, session_context

__all__ = [
    "configure_logging",
    "session_context",
]
