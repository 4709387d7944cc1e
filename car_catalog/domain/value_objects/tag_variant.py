"""Tag variant value object."""

from enum import Enum
from typing import Optional


class TagVariant(str, Enum):
    """Visual variant of a tag pill."""

    SPECIFICATION = "specification"
    SAFETY = "safety"
    FILTER = "filter"
    FILTER_SELECTED = "filter-selected"
    MANUAL = "manual"
    AUTOMATIC = "automatic"
    OUTLINE = "outline"

    @classmethod
    def for_filter_option(cls, selected: bool) -> "TagVariant":
        """Get the variant for a filter option pill."""
        return cls.FILTER_SELECTED if selected else cls.FILTER

    @classmethod
    def for_car_type(cls, car_type: Optional[str]) -> "TagVariant":
        """
        Get the transmission variant for a car type.

        Anything other than "manual" (case-insensitive) is shown as automatic.

        Args:
            car_type: Car type label, may be None

        Returns:
            MANUAL or AUTOMATIC
        """
        if car_type is not None and car_type.strip().lower() == "manual":
            return cls.MANUAL
        return cls.AUTOMATIC
