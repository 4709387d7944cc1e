"""Browse catalog use case: the host that owns the applied filters and sort."""

from typing import Any, Callable, Iterable, Mapping, Optional

from car_catalog.application.dtos.car import CarListItem, CatalogQuery
from car_catalog.application.dtos.filters import FilterSection, SelectionState, copy_selection
from car_catalog.application.ports.car_catalog_repository import CarCatalogRepository
from car_catalog.application.ports.input_event_source import InputEventSource
from car_catalog.application.use_cases.filter_dialog import FilterDialogUseCase
from car_catalog.application.use_cases.sort_dropdown import SortDropdownUseCase
from car_catalog.domain.value_objects.sort_option import SortDescriptor


class BrowseCatalogUseCase:
    """Use case for the catalog list page.

    The filter dialog and the sort dropdown report back through callbacks;
    this class turns those into the CatalogQuery used to list cars.
    """

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        sections: Iterable[FilterSection] = (),
        multi_select: bool = True,
        initial_filters: Optional[Mapping[str, Iterable[str]]] = None,
        event_source: Optional[InputEventSource] = None,
        logger: Optional[Callable[..., None]] = None,
        dismissal_logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize browse catalog use case.

        Args:
            car_catalog_repository: Repository for car catalog
            sections: Filter sections offered in the dialog
            multi_select: Allow several values per filter section
            initial_filters: Filters applied when the page loads
            event_source: Optional input event source for popup dismissal
            logger: Optional logger function (component, **kwargs)
            dismissal_logger: Optional logger for dismissal events
        """
        self._car_catalog_repository = car_catalog_repository
        self._logger = logger
        self._filters: SelectionState = copy_selection(initial_filters or {})
        self.filter_dialog = FilterDialogUseCase(
            on_apply=self._apply_filters,
            sections=sections,
            multi_select=multi_select,
            initial_filters=self._filters,
            event_source=event_source,
            logger=logger,
            dismissal_logger=dismissal_logger,
        )
        self.sort_dropdown = SortDropdownUseCase(
            on_sort=self._apply_sort,
            event_source=event_source,
            logger=logger,
            dismissal_logger=dismissal_logger,
        )
        self._sort: SortDescriptor = self.sort_dropdown.current().descriptor

    def _log(self, **kwargs: Any) -> None:
        if self._logger:
            self._logger("catalog", **kwargs)

    @property
    def query(self) -> CatalogQuery:
        """Get the query built from the applied filters and the active sort."""
        return CatalogQuery(filters=dict(self._filters), sort=self._sort)

    @property
    def active_filter_count(self) -> int:
        """Get the number of selected filter values across all sections."""
        return sum(len(values) for values in self._filters.values())

    def _apply_filters(self, selection: SelectionState) -> None:
        self._filters = copy_selection(selection)

    def _apply_sort(self, descriptor: SortDescriptor) -> None:
        self._sort = descriptor

    async def list_cars(self) -> list[CarListItem]:
        """
        List cars for the current query.

        Returns:
            Cars matching the applied filters, in sort order
        """
        query = self.query
        cars = await self._car_catalog_repository.search(query)
        self._log(
            action="search",
            filters=query.filters,
            sort_by=query.sort.field,
            sort_order=query.sort.direction,
            results_count=len(cars),
        )
        return cars

    async def get_car(self, car_id: int) -> Optional[CarListItem]:
        """
        Get a car for the detail view.

        Args:
            car_id: Car identifier

        Returns:
            Car, or None if not found
        """
        return await self._car_catalog_repository.get(car_id)

    async def delete_car(self, car_id: int) -> bool:
        """
        Delete a car from the list.

        Args:
            car_id: Car identifier

        Returns:
            True if the car was removed
        """
        deleted = await self._car_catalog_repository.delete(car_id)
        self._log(action="delete", car_id=car_id, deleted=deleted)
        return deleted

    def dispose(self) -> None:
        """Tear down the page, releasing listeners held by open popups."""
        self.filter_dialog.dispose()
        self.sort_dropdown.dispose()
