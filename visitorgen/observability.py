from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
import json
import logging
from typing import Any, Callable, Mapping

# ==================================================
# Observability Types
# ==================================================

EventObserveHook = Callable[["GenerationEvent"], None]


@dataclass(frozen=True)
class GenerationEvent:
    """
    Structured lifecycle event emitted while a generation run progresses.
    """

    timestamp: str
    event: str
    success: bool
    metadata: Mapping[str, Any] = field(default_factory=dict)
    visitor: str | None = None
    path: str | None = None
    declaration_count: int | None = None
    type_count: int | None = None
    method_count: int | None = None
    duration_ms: float | None = None
    error_type: str | None = None
    error_message: str | None = None


def make_event(event: str, *, success: bool = True, **kwargs: Any) -> GenerationEvent:
    return GenerationEvent(
        timestamp=datetime.now(timezone.utc).isoformat(),
        event=event,
        success=success,
        **kwargs,
    )


def generation_event_to_dict(event: GenerationEvent) -> dict[str, Any]:
    """
    Converts a GenerationEvent into a JSON-safe dictionary.
    """

    payload = {item.name: getattr(event, item.name) for item in fields(event)}
    payload["metadata"] = dict(event.metadata)
    return payload


def make_json_event_logger(
    *,
    logger: logging.Logger,
    level: int = logging.INFO,
) -> EventObserveHook:
    """
    Builds an EventObserveHook that emits one JSON log line per GenerationEvent.
    """

    def _log_event(event: GenerationEvent) -> None:
        payload = generation_event_to_dict(event)
        logger.log(level, json.dumps(payload, separators=(",", ":"), sort_keys=True))

    return _log_event


def compose_event_observers(*observers: EventObserveHook) -> EventObserveHook:
    """
    Composes multiple event observers into a single observer.
    """

    def _composed(event: GenerationEvent) -> None:
        for observer in observers:
            observer(event)

    return _composed
