"""Scoped escape-key / outside-pointer dismissal listener."""

from types import TracebackType
from typing import Any, Callable, Optional

from car_catalog.application.ports.input_event_source import InputEventSource
from car_catalog.domain.value_objects.input_event import InputEvent, InputEventKind


class DismissalScope:
    """Registers a global input listener while a popup is open.

    The listener is registered by acquire() and removed by release(). Both are
    idempotent, and release() runs before on_dismiss so a dismissal can never
    leave a handler behind.
    """

    def __init__(
        self,
        event_source: InputEventSource,
        owner: str,
        on_dismiss: Callable[[str], None],
        dismiss_on_escape: bool = True,
        dismiss_on_outside_pointer: bool = True,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize dismissal scope.

        Args:
            event_source: Port delivering global key and pointer events
            owner: Region path of the popup; pointer targets under it count as inside
            on_dismiss: Callback receiving the reason ('escape' or 'outside_pointer')
            dismiss_on_escape: Dismiss when Escape is pressed
            dismiss_on_outside_pointer: Dismiss on pointer-down outside the owner region
            logger: Optional logger function (component, **kwargs)
        """
        self._event_source = event_source
        self._owner = owner
        self._on_dismiss = on_dismiss
        self._dismiss_on_escape = dismiss_on_escape
        self._dismiss_on_outside_pointer = dismiss_on_outside_pointer
        self._logger = logger
        self._active = False

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def active(self) -> bool:
        """Whether the listener is currently registered."""
        return self._active

    def acquire(self) -> "DismissalScope":
        """Register the listener if not already registered."""
        if not self._active:
            self._event_source.add_listener(self._handle_event)
            self._active = True
        return self

    def release(self) -> None:
        """Deregister the listener if registered."""
        if self._active:
            self._event_source.remove_listener(self._handle_event)
            self._active = False

    def __enter__(self) -> "DismissalScope":
        return self.acquire()

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()

    def _log(self, **kwargs: Any) -> None:
        if self._logger:
            self._logger("dismissal", owner=self._owner, **kwargs)

    def _reason_for(self, event: InputEvent) -> Optional[str]:
        if self._dismiss_on_escape and event.is_escape:
            return "escape"
        if (
            self._dismiss_on_outside_pointer
            and event.kind is InputEventKind.POINTER_DOWN
            and not event.is_inside(self._owner)
        ):
            return "outside_pointer"
        return None

    def _handle_event(self, event: InputEvent) -> None:
        if not self._active:
            return
        reason = self._reason_for(event)
        if reason is None:
            return
        self.release()
        self._log(reason=reason)
        self._on_dismiss(reason)
