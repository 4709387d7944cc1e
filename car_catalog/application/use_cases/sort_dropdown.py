"""Sort dropdown use case."""

from typing import Any, Callable, Optional

from car_catalog.application.ports.input_event_source import InputEventSource
from car_catalog.application.use_cases.dismissal_scope import DismissalScope
from car_catalog.application.use_cases.sort_selection_engine import SortSelectionEngine
from car_catalog.domain.value_objects.sort_option import SortDescriptor, SortOption

SORT_DROPDOWN_REGION = "sort-dropdown"


class SortDropdownUseCase:
    """Use case for the sort dropdown: open/close state around a SortSelectionEngine.

    The active option outlives the open/closed state; only the dismissal
    listener is tied to the dropdown being open.
    """

    def __init__(
        self,
        on_sort: Callable[[SortDescriptor], None],
        event_source: Optional[InputEventSource] = None,
        initial: Optional[SortOption] = None,
        logger: Optional[Callable[..., None]] = None,
        dismissal_logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize sort dropdown use case.

        Args:
            on_sort: Host callback receiving the selected descriptor
            event_source: Optional input event source for escape / outside-click dismissal
            initial: Optional starting option
            logger: Optional logger function (component, **kwargs)
            dismissal_logger: Optional logger for dismissal events
        """
        self._on_sort = on_sort
        self._logger = logger
        self._engine = SortSelectionEngine(on_sort=self._handle_sort, initial=initial)
        self._is_open = False
        self._dismissal: Optional[DismissalScope] = None
        if event_source is not None:
            self._dismissal = DismissalScope(
                event_source,
                SORT_DROPDOWN_REGION,
                on_dismiss=lambda _reason: self.close(),
                logger=dismissal_logger,
            )

    def _log(self, **kwargs: Any) -> None:
        if self._logger:
            self._logger("sort_dropdown", **kwargs)

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def label(self) -> str:
        """Get the label shown on the closed dropdown button."""
        return self._engine.label

    def current(self) -> SortOption:
        return self._engine.current()

    def options(self) -> list[tuple[SortOption, bool]]:
        """Get the option rows with their active flags."""
        return self._engine.options()

    def open(self) -> None:
        if self._is_open:
            return
        self._is_open = True
        if self._dismissal is not None:
            self._dismissal.acquire()

    def close(self) -> None:
        if self._dismissal is not None:
            self._dismissal.release()
        self._is_open = False

    def toggle(self) -> bool:
        """
        Open the dropdown if closed, close it if open.

        Returns:
            New open state
        """
        if self._is_open:
            self.close()
        else:
            self.open()
        return self._is_open

    def select(self, option: SortOption) -> SortDescriptor:
        """
        Select an option and close the dropdown.

        Args:
            option: One of the fixed sort options

        Returns:
            The newly active descriptor
        """
        try:
            return self._engine.select(option)
        finally:
            self.close()

    def dispose(self) -> None:
        """Tear down the dropdown, releasing any listener it holds."""
        self.close()

    def _handle_sort(self, descriptor: SortDescriptor) -> None:
        self._log(action="select", sort_by=descriptor.field, sort_order=descriptor.direction)
        self._on_sort(descriptor)
