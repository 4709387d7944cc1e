"""Filter section DTOs."""

from typing import Iterable, Mapping

from pydantic import model_validator

from car_catalog.application.dtos.base import DTO

# Section id -> selected option values. Empty set and missing key are equivalent.
SelectionState = dict[str, frozenset[str]]


class FilterOption(DTO):
    """Selectable option inside a filter section."""

    id: str
    label: str
    value: str


class FilterSection(DTO):
    """Named group of filter options."""

    id: str
    title: str
    options: tuple[FilterOption, ...] = ()

    @model_validator(mode="after")
    def _check_unique_option_ids(self) -> "FilterSection":
        """Reject sections that declare the same option id twice."""
        seen: set[str] = set()
        for option in self.options:
            if option.id in seen:
                raise ValueError(f"Duplicate option id {option.id!r} in section {self.id!r}")
            seen.add(option.id)
        return self


def copy_selection(selection: Mapping[str, Iterable[str]]) -> SelectionState:
    """
    Build a detached SelectionState from any mapping of section id to values.

    Args:
        selection: Mapping of section id to an iterable of selected values

    Returns:
        New dict with frozenset values
    """
    return {section_id: frozenset(values) for section_id, values in selection.items()}


def selections_equal(left: Mapping[str, frozenset[str]], right: Mapping[str, frozenset[str]]) -> bool:
    """Compare two selections, treating an empty set the same as a missing key."""
    keys = set(left) | set(right)
    return all(left.get(key, frozenset()) == right.get(key, frozenset()) for key in keys)


DEFAULT_FILTER_SECTIONS: tuple[FilterSection, ...] = (
    FilterSection(
        id="carType",
        title="CAR TYPE",
        options=(
            FilterOption(id="manual", label="Manual", value="manual"),
            FilterOption(id="automatic", label="Automatic", value="automatic"),
        ),
    ),
    FilterSection(
        id="specifications",
        title="SPECIFICATIONS",
        options=(
            FilterOption(id="engine", label="Engine: 5.0L Ti-VCT V8", value="Engine: 5.0L Ti-VCT V8"),
            FilterOption(
                id="displacement", label="Displacement: 4951 cc", value="Displacement: 4951 cc"
            ),
            FilterOption(id="fuelType", label="Fuel Type: Petrol", value="Fuel Type: Petrol"),
            FilterOption(
                id="mileage", label="Mileage (ARAI): 7.9 km/l", value="Mileage (ARAI): 7.9 km/l"
            ),
            FilterOption(id="topSpeed", label="Top Speed: 250 km/h", value="Top Speed: 250 km/h"),
            FilterOption(
                id="maxPower",
                label="Max Power: 401 PS @ 6500 rpm",
                value="Max Power: 401 PS @ 6500 rpm",
            ),
            FilterOption(
                id="emissionStandard",
                label="Emission Standard: BS4",
                value="Emission Standard: BS4",
            ),
        ),
    ),
)
