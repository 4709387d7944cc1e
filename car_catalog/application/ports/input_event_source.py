"""Global input event source port."""

from abc import ABC, abstractmethod
from typing import Callable

from car_catalog.domain.value_objects.input_event import InputEvent

InputListener = Callable[[InputEvent], None]


class InputEventSource(ABC):
    """Port interface for registering global key and pointer listeners."""

    @abstractmethod
    def add_listener(self, listener: InputListener) -> None:
        """
        Register a listener for every subsequent input event.

        Args:
            listener: Callable invoked with each event
        """
        pass

    @abstractmethod
    def remove_listener(self, listener: InputListener) -> None:
        """
        Deregister a listener. Removing an unknown listener is a no-op.

        Args:
            listener: Previously registered callable
        """
        pass
