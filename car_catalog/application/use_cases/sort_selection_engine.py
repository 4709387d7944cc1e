"""Sort selection engine."""

from typing import Callable, Optional

from car_catalog.domain.value_objects.sort_option import SortDescriptor, SortOption


class SortSelectionEngine:
    """Holds exactly one active sort option out of the fixed SortOption set."""

    def __init__(
        self,
        on_sort: Optional[Callable[[SortDescriptor], None]] = None,
        initial: Optional[SortOption] = None,
    ) -> None:
        """
        Initialize sort selection engine.

        Args:
            on_sort: Optional callback invoked on every select with the new descriptor
            initial: Optional starting option (defaults to the first option)
        """
        self._on_sort = on_sort
        self._active = initial or SortOption.default()

    def current(self) -> SortOption:
        """Get the active option (descriptor and display label)."""
        return self._active

    @property
    def descriptor(self) -> SortDescriptor:
        """Get the active sort descriptor."""
        return self._active.descriptor

    @property
    def label(self) -> str:
        return self._active.label

    def select(self, option: SortOption) -> SortDescriptor:
        """
        Make an option active and notify the consumer.

        Reselecting the active option still notifies.

        Args:
            option: One of the fixed sort options

        Returns:
            The newly active descriptor
        """
        self._active = option
        if self._on_sort:
            self._on_sort(option.descriptor)
        return option.descriptor

    def options(self) -> list[tuple[SortOption, bool]]:
        """Get all options in display order, each with its active flag."""
        return [(option, option is self._active) for option in SortOption]
