"""Car DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from car_catalog.application.dtos.base import DTO
from car_catalog.application.dtos.filters import SelectionState
from car_catalog.domain.value_objects.sort_option import SortDescriptor, SortOption
from car_catalog.domain.value_objects.tag_variant import TagVariant

DESCRIPTION_MAX_LENGTH = 280


class CarListItem(DTO):
    """Car record as shown in the catalog list and detail views."""

    id: int
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    car_type: Optional[str] = None
    tags: tuple[str, ...] = ()
    specifications: tuple[str, ...] = ()
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Ford Mustang GT",
                "description": "Iconic V8 coupe",
                "image_url": "https://example.com/mustang.jpg",
                "car_type": "Manual",
                "tags": ["Sport"],
                "specifications": ["Engine: 5.0L Ti-VCT V8", "Fuel Type: Petrol"],
                "created_at": "2024-01-15T10:30:00Z",
            }
        },
    )

    @property
    def transmission_variant(self) -> TagVariant:
        """Get the tag variant for this car's transmission badge."""
        return TagVariant.for_car_type(self.car_type)

    def facet_values(self, section_id: str) -> Optional[frozenset[str]]:
        """
        Get the values this car offers for a filter section.

        Args:
            section_id: Filter section identifier

        Returns:
            Set of values, or None if the section is not a known facet
        """
        if section_id == "carType":
            return frozenset([self.car_type.lower()]) if self.car_type else frozenset()
        if section_id == "specifications":
            return frozenset(self.specifications)
        if section_id == "tags":
            return frozenset(self.tags)
        return None


class NewCar(DTO):
    """Payload for creating a car."""

    name: str = Field(min_length=1)
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)
    image_url: str = ""
    car_type: str = Field(min_length=1)
    tags: tuple[str, ...] = ()
    specifications: tuple[str, ...] = ()

    @field_validator("name", "car_type")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        """Reject whitespace-only required fields."""
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()


class CatalogQuery(DTO):
    """Committed filter selection plus active sort, applied to the car list."""

    filters: SelectionState = Field(default_factory=dict)
    sort: SortDescriptor = SortOption.default().descriptor

    @property
    def active_sections(self) -> list[str]:
        """Get section ids that actually narrow the list."""
        return [section_id for section_id, values in self.filters.items() if values]
