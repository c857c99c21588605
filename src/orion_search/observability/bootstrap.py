"""Apply settings to logging and tracing in one call."""

from __future__ import annotations

from orion_search.config import Settings, get_settings
from orion_search.observability.logging import configure_logging
from orion_search.observability.tracing import init_tracing


def setup_observability(settings: Settings | None = None, *, tracing: bool = True) -> None:
    """Configure logging from settings and, optionally, install a tracer provider."""
    active = settings or get_settings()
    configure_logging(active.log_level, active.log_json)
    if tracing:
        init_tracing(active.service_name)
