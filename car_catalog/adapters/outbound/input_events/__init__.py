"""Input event source adapters."""

from car_catalog.adapters.outbound.input_events.in_memory_input_event_source import (
    InMemoryInputEventSource,
)

__all__ = [
    "InMemoryInputEventSource",
]
