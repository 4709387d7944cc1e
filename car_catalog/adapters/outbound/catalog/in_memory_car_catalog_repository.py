"""In-memory car catalog repository adapter."""

from datetime import datetime, timezone
from typing import Iterable, Optional

from car_catalog.application.dtos.car import CarListItem, CatalogQuery, NewCar
from car_catalog.application.ports.car_catalog_repository import CarCatalogRepository
from car_catalog.domain.value_objects.sort_option import SortDescriptor, SortField


class InMemoryCarCatalogRepository(CarCatalogRepository):
    """In-memory implementation of car catalog repository for testing/development."""

    def __init__(self, cars: Optional[Iterable[CarListItem]] = None) -> None:
        """
        Initialize in-memory repository.

        Args:
            cars: Optional initial cars
        """
        self._cars: dict[int, CarListItem] = {car.id: car for car in cars or []}
        self._next_id = max(self._cars, default=0) + 1

    def _matches(self, car: CarListItem, query: CatalogQuery) -> bool:
        """
        Check if a car satisfies every non-empty filter section.

        Values inside a section are alternatives; sections narrow each other.
        Sections that are not car facets are ignored.

        Args:
            car: Car to check
            query: Catalog query

        Returns:
            True if car matches filters
        """
        for section_id in query.active_sections:
            facet = car.facet_values(section_id)
            if facet is None:
                continue
            wanted = query.filters[section_id]
            if section_id == "carType":
                # Car types are stored as display labels ("Manual")
                wanted = frozenset(value.lower() for value in wanted)
            if not facet & wanted:
                return False
        return True

    def _sorted(self, cars: list[CarListItem], sort: SortDescriptor) -> list[CarListItem]:
        """
        Order cars by the sort descriptor.

        Name ordering is case-insensitive. Cars without a creation date go
        last in either direction.

        Args:
            cars: Cars to order
            sort: Sort descriptor

        Returns:
            New ordered list
        """
        if sort.field is SortField.NAME:
            return sorted(cars, key=lambda car: (car.name.casefold(), car.id), reverse=sort.descending)

        dated = [car for car in cars if car.created_at is not None]
        undated = [car for car in cars if car.created_at is None]
        dated.sort(key=lambda car: (car.created_at, car.id), reverse=sort.descending)
        return dated + undated

    async def search(self, query: CatalogQuery) -> list[CarListItem]:
        """
        List cars matching the query.

        Args:
            query: Filter selection and sort descriptor

        Returns:
            List of cars matching the filters, in sort order
        """
        results = [car for car in self._cars.values() if self._matches(car, query)]
        return self._sorted(results, query.sort)

    async def get(self, car_id: int) -> Optional[CarListItem]:
        """
        Get a car by id.

        Args:
            car_id: Car identifier

        Returns:
            Car, or None if not found
        """
        return self._cars.get(car_id)

    async def create(self, car: NewCar) -> CarListItem:
        """
        Store a new car with the next id and the current UTC time.

        Args:
            car: Creation payload

        Returns:
            Stored car
        """
        stored = CarListItem(
            id=self._next_id,
            name=car.name,
            description=car.description or None,
            image_url=car.image_url or None,
            car_type=car.car_type,
            tags=car.tags,
            specifications=car.specifications,
            created_at=datetime.now(timezone.utc),
        )
        self._cars[stored.id] = stored
        self._next_id += 1
        return stored

    async def delete(self, car_id: int) -> bool:
        """
        Delete a car.

        Args:
            car_id: Car identifier

        Returns:
            True if removed, False if it did not exist
        """
        return self._cars.pop(car_id, None) is not None
