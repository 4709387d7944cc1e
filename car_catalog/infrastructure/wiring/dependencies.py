"""Dependency injection factory functions."""

from typing import Any, Iterable, Optional

from car_catalog.adapters.outbound.catalog import InMemoryCarCatalogRepository
from car_catalog.adapters.outbound.input_events import InMemoryInputEventSource
from car_catalog.application.dtos.car import CarListItem
from car_catalog.application.dtos.filters import FilterSection
from car_catalog.application.ports.car_catalog_repository import CarCatalogRepository
from car_catalog.application.ports.input_event_source import InputEventSource
from car_catalog.application.use_cases.add_car_form import AddCarFormUseCase
from car_catalog.application.use_cases.browse_catalog import BrowseCatalogUseCase
from car_catalog.infrastructure.config.settings import settings
from car_catalog.infrastructure.logging.logger import (
    log_catalog_search,
    log_dismissal,
    log_event,
    log_filter_applied,
    log_sort_selected,
)


def log_use_case_event(component: str, **kwargs: Any) -> None:
    """
    Logger function handed to use cases; routes known events to their log helper.

    Args:
        component: Component name reported by the use case
        **kwargs: Structured fields reported by the use case
    """
    action = kwargs.pop("action", None)
    if component == "filter_dialog" and action == "apply":
        log_filter_applied(**kwargs)
    elif component == "sort_dropdown" and action == "select":
        log_sort_selected(**kwargs)
    elif component == "catalog" and action == "search":
        log_catalog_search(**kwargs)
    elif component == "dismissal":
        log_dismissal(**kwargs)
    elif action is None:
        log_event(component, **kwargs)
    else:
        log_event(component, action=action, **kwargs)


def create_car_catalog_repository(
    cars: Optional[Iterable[CarListItem]] = None,
) -> CarCatalogRepository:
    """
    Factory function to create car catalog repository.

    Args:
        cars: Optional initial cars

    Returns:
        CarCatalogRepository instance
    """
    return InMemoryCarCatalogRepository(cars)


def create_input_event_source() -> InputEventSource:
    """
    Factory function to create the global input event source.

    Returns:
        InputEventSource instance
    """
    return InMemoryInputEventSource()


def create_browse_catalog_use_case(
    car_catalog_repository: Optional[CarCatalogRepository] = None,
    event_source: Optional[InputEventSource] = None,
    sections: Iterable[FilterSection] = (),
) -> BrowseCatalogUseCase:
    """
    Factory function to create BrowseCatalogUseCase with dependencies.

    Args:
        car_catalog_repository: Optional repository (in-memory by default)
        event_source: Optional input event source (in-memory by default)
        sections: Filter sections (default catalog sections when empty)

    Returns:
        BrowseCatalogUseCase instance
    """
    return BrowseCatalogUseCase(
        car_catalog_repository or create_car_catalog_repository(),
        sections=sections,
        multi_select=settings.filter_multi_select,
        event_source=event_source or create_input_event_source(),
        logger=log_use_case_event,
        dismissal_logger=log_use_case_event,
    )


def create_add_car_form_use_case(
    car_catalog_repository: Optional[CarCatalogRepository] = None,
) -> AddCarFormUseCase:
    """
    Factory function to create AddCarFormUseCase with dependencies.

    Args:
        car_catalog_repository: Optional repository (in-memory by default)

    Returns:
        AddCarFormUseCase instance
    """
    return AddCarFormUseCase(
        car_catalog_repository or create_car_catalog_repository(),
        description_max_length=settings.description_max_length,
        logger=log_use_case_event,
    )
