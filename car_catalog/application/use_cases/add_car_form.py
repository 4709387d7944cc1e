"""Add car form use case."""

from typing import Any, Callable, Iterable, Optional

from car_catalog.application.dtos.car import DESCRIPTION_MAX_LENGTH, CarListItem, NewCar
from car_catalog.application.dtos.filters import FilterOption, FilterSection
from car_catalog.application.ports.car_catalog_repository import CarCatalogRepository
from car_catalog.application.use_cases.filter_selection_engine import FilterSelectionEngine

DEFAULT_CAR_TYPES = ("Manual", "Automatic")
DEFAULT_SPECIFICATIONS = (
    "Engine type",
    "Displacement",
    "Fuel Type",
    "Mileage",
    "Seats",
    "Horsepower",
)

DEFAULT_TAGS = ("Sport", "Luxury", "Family", "Electric", "Off-road")

SPECIFICATIONS_SECTION = "specifications"
TAGS_SECTION = "tags"



def _choice_section(section_id: str, title: str, values: Iterable[str]) -> FilterSection:
    return FilterSection(
        id=section_id,
        title=title,
        options=tuple(FilterOption(id=value, label=value, value=value) for value in values),
    )


class AddCarFormUseCase:
    """Use case holding the add-car form state.

    Specifications and tags use the same toggle rules as the filter dialog in
    multi-select mode, and are kept in the order they were picked; the car
    type is a single choice.
    """

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        car_types: Iterable[str] = DEFAULT_CAR_TYPES,
        available_specifications: Iterable[str] = DEFAULT_SPECIFICATIONS,
        available_tags: Iterable[str] = DEFAULT_TAGS,
        description_max_length: int = DESCRIPTION_MAX_LENGTH,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize add car form use case.

        Args:
            car_catalog_repository: Repository the car is created in
            car_types: Car types offered in the type dropdown
            available_specifications: Specifications offered for toggling
            available_tags: Tags offered for toggling
            description_max_length: Maximum description length
            logger: Optional logger function (component, **kwargs)

        Raises:
            ValueError: If description_max_length is outside 1..DESCRIPTION_MAX_LENGTH
        """
        if not 1 <= description_max_length <= DESCRIPTION_MAX_LENGTH:
            raise ValueError(
                f"description_max_length must be between 1 and {DESCRIPTION_MAX_LENGTH}, "
                f"got {description_max_length}"
            )
        self._car_catalog_repository = car_catalog_repository
        self._car_types = tuple(car_types)
        self._description_max_length = description_max_length
        self._logger = logger
        self._choices = FilterSelectionEngine(
            [
                _choice_section(SPECIFICATIONS_SECTION, "SPECIFICATIONS", available_specifications),
                _choice_section(TAGS_SECTION, "TAGS", available_tags),
            ],
            multi_select=True,
        )
        # Pick order per section; the engine only knows membership
        self._picked: dict[str, list[str]] = {SPECIFICATIONS_SECTION: [], TAGS_SECTION: []}

        self.name = ""
        self.description = ""
        self.image_url = ""
        self.car_type = ""
        self.car_type_dropdown_open = False
        self.errors: dict[str, str] = {}

    def _log(self, **kwargs: Any) -> None:
        if self._logger:
            self._logger("add_car_form", **kwargs)

    def _offered(self, section_id: str) -> tuple[str, ...]:
        section = next(s for s in self._choices.sections if s.id == section_id)
        return tuple(option.value for option in section.options)

    def _toggle(self, section_id: str, value: str) -> tuple[str, ...]:
        picked = self._picked[section_id]
        if value in self._choices.toggle_option(section_id, value)[section_id]:
            picked.append(value)
        else:
            picked.remove(value)
        return tuple(picked)

    @property
    def car_types(self) -> tuple[str, ...]:
        return self._car_types

    @property
    def description_max_length(self) -> int:
        return self._description_max_length

    @property
    def available_specifications(self) -> tuple[str, ...]:
        return self._offered(SPECIFICATIONS_SECTION)

    @property
    def available_tags(self) -> tuple[str, ...]:
        return self._offered(TAGS_SECTION)

    @property
    def specifications(self) -> tuple[str, ...]:
        """Get selected specifications, in the order they were picked."""
        return tuple(self._picked[SPECIFICATIONS_SECTION])

    @property
    def tags(self) -> tuple[str, ...]:
        """Get selected tags, in the order they were picked."""
        return tuple(self._picked[TAGS_SECTION])

    @property
    def tags_summary(self) -> str:
        """Get the selected tag count shown under the tag list (empty when none)."""
        count = len(self.tags)
        if not count:
            return ""
        return f"{count} tag{'' if count == 1 else 's'} selected"

    def set_name(self, name: str) -> None:
        """Set the name, clearing the name error once it is filled."""
        self.name = name
        if name.strip():
            self.errors.pop("name", None)

    def set_description(self, description: str) -> None:
        self.description = description

    def toggle_car_type_dropdown(self) -> bool:
        self.car_type_dropdown_open = not self.car_type_dropdown_open
        return self.car_type_dropdown_open

    def select_car_type(self, car_type: str) -> None:
        """Choose the car type and close the type dropdown."""
        self.car_type = car_type
        self.car_type_dropdown_open = False
        if car_type.strip():
            self.errors.pop("carType", None)

    def toggle_specification(self, specification: str) -> tuple[str, ...]:
        """Add or remove a specification."""
        return self._toggle(SPECIFICATIONS_SECTION, specification)

    def remove_specification(self, specification: str) -> tuple[str, ...]:
        """Remove a specification chip; removing an unselected one is a no-op."""
        if self._choices.is_selected(SPECIFICATIONS_SECTION, specification):
            return self._toggle(SPECIFICATIONS_SECTION, specification)
        return self.specifications

    def toggle_tag(self, tag: str) -> tuple[str, ...]:
        """Add or remove a tag."""
        return self._toggle(TAGS_SECTION, tag)

    def validate(self) -> dict[str, str]:
        """
        Validate required fields.

        Returns:
            Field name -> error message (empty when valid)
        """
        errors: dict[str, str] = {}
        if not self.name.strip():
            errors["name"] = "Car name is required"
        if not self.car_type.strip():
            errors["carType"] = "Car type is required"
        if len(self.description) > self._description_max_length:
            errors["description"] = (
                f"Description must be at most {self._description_max_length} characters"
            )
        self.errors = errors
        return dict(errors)

    async def submit(self) -> Optional[CarListItem]:
        """
        Validate and create the car.

        Returns:
            Created car, or None if validation failed (see errors)
        """
        if self.validate():
            self._log(action="submit", valid=False, errors=sorted(self.errors))
            return None

        new_car = NewCar(
            name=self.name,
            description=self.description,
            image_url=self.image_url,
            car_type=self.car_type,
            tags=self.tags,
            specifications=self.specifications,
        )
        created = await self._car_catalog_repository.create(new_car)
        self._log(action="submit", valid=True, car_id=created.id)
        return created
