"""In-memory input event source adapter."""

from car_catalog.application.ports.input_event_source import InputEventSource, InputListener
from car_catalog.domain.value_objects.input_event import InputEvent


class InMemoryInputEventSource(InputEventSource):
    """Synchronous in-process event source; the host pushes events with dispatch()."""

    def __init__(self) -> None:
        """Initialize with no listeners."""
        self._listeners: list[InputListener] = []

    @property
    def listener_count(self) -> int:
        """Get the number of registered listeners."""
        return len(self._listeners)

    def add_listener(self, listener: InputListener) -> None:
        """
        Register a listener.

        Args:
            listener: Callable invoked with each event
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: InputListener) -> None:
        """
        Deregister a listener if present.

        Args:
            listener: Previously registered callable
        """
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, event: InputEvent) -> None:
        """
        Deliver an event to every listener registered when dispatch starts.

        Listeners may deregister themselves (or others) while handling it.

        Args:
            event: Event to deliver
        """
        for listener in list(self._listeners):
            if listener in self._listeners:
                listener(event)
