"""Progress event helpers for batch analysis."""

from __future__ import annotations

import logging
from typing import Any, Callable, Coroutine

logger = logging.getLogger(__name__)

# Callback receiving (event_name, payload) while a batch runs.
EventCallback = Callable[[str, dict[str, Any]], Coroutine[Any, Any, None]]


async def emit_event(
    on_event: EventCallback | None,
    event: str,
    data: dict[str, Any] | None = None,
) -> None:
    """Emit a batch progress event if a callback is registered."""
    if on_event:
        logger.debug("batch event emitted", extra={"event": event})
        await on_event(event, data or {})
