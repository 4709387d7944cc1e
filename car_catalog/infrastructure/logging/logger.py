"""Structured logger for catalog interaction events."""

import logging
from enum import Enum
from typing import Any, Mapping

from car_catalog.infrastructure.config.settings import settings

# Configure package logger with pipe-separated structured format
_logger = logging.getLogger("car_catalog")
_logger.setLevel(settings.effective_log_level)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def _plain(value: Any) -> Any:
    """Convert sets, enums and nested mappings into stable, readable values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(_plain(item) for item in value)
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def format_fields(fields: dict[str, Any]) -> str:
    """
    Format structured fields as key=value pairs.

    Args:
        fields: Field name -> value

    Returns:
        Pipe-separated key=value string
    """
    return " | ".join(f"{k}={_plain(v)!r}" for k, v in fields.items())


def log_event(component: str, level: int = logging.INFO, **kwargs: Any) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'filter_dialog', 'sort_dropdown', 'catalog')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {"component": component}
    fields.update(kwargs)
    _logger.log(level, format_fields(fields))


def log_filter_applied(
    filters: Mapping[str, Any],
    **kwargs: Any,
) -> None:
    """
    Log filter dialog apply event.

    Args:
        filters: Committed selection (section id -> selected values)
        **kwargs: Additional fields
    """
    log_event(
        "filter_dialog",
        action="apply",
        filters=filters,
        active_filters_count=sum(len(values) for values in filters.values()),
        **kwargs,
    )


def log_sort_selected(
    sort_by: str,
    sort_order: str,
    **kwargs: Any,
) -> None:
    """
    Log sort selection event.

    Args:
        sort_by: Sort field (e.g., 'name', 'createdAt')
        sort_order: Sort direction ('ASC' or 'DESC')
        **kwargs: Additional fields
    """
    log_event("sort_dropdown", action="select", sort_by=sort_by, sort_order=sort_order, **kwargs)


def log_dismissal(owner: str, reason: str, **kwargs: Any) -> None:
    """
    Log popup dismissal at DEBUG level.

    Args:
        owner: Region of the dismissed popup (e.g., 'sort-dropdown')
        reason: 'escape' or 'outside_pointer'
        **kwargs: Additional fields
    """
    log_event("dismissal", level=logging.DEBUG, owner=owner, reason=reason, **kwargs)


def log_catalog_search(
    filters: Mapping[str, Any],
    results_count: int,
    **kwargs: Any,
) -> None:
    """
    Log catalog search event.

    Args:
        filters: Applied filters
        results_count: Number of results
        **kwargs: Additional fields
    """
    log_event(
        "catalog",
        action="search",
        catalog_filters=filters,
        catalog_results_count=results_count,
        **kwargs,
    )



# Export logger instance for direct use
logger = _logger
