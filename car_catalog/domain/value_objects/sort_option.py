"""Sort option value objects."""

from dataclasses import dataclass
from enum import Enum


class SortField(str, Enum):
    """Field a car list can be sorted by."""

    NAME = "name"
    CREATED_AT = "createdAt"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class SortDescriptor:
    """Sort descriptor value object (field + direction)."""

    field: SortField
    direction: SortDirection

    @property
    def descending(self) -> bool:
        """Check whether the direction is descending."""
        return self.direction is SortDirection.DESC


class SortOption(Enum):
    """Closed set of sort choices offered by the sort control, in display order."""

    NAME_ASC = (SortField.NAME, SortDirection.ASC, "Name (A-Z)")
    NAME_DESC = (SortField.NAME, SortDirection.DESC, "Name (Z-A)")
    NEWEST_FIRST = (SortField.CREATED_AT, SortDirection.DESC, "Newest First")
    OLDEST_FIRST = (SortField.CREATED_AT, SortDirection.ASC, "Oldest First")

    def __init__(self, sort_field: SortField, direction: SortDirection, label: str) -> None:
        self.descriptor = SortDescriptor(field=sort_field, direction=direction)
        self.label = label

    @classmethod
    def default(cls) -> "SortOption":
        """Get the option that is active before any selection."""
        return next(iter(cls))

