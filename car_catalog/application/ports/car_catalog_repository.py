"""Car catalog repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from car_catalog.application.dtos.car import CarListItem, CatalogQuery, NewCar


class CarCatalogRepository(ABC):
    """Port interface for car catalog repository."""

    @abstractmethod
    async def search(self, query: CatalogQuery) -> list[CarListItem]:
        """
        List cars matching the committed filters, ordered by the active sort.

        Args:
            query: Filter selection and sort descriptor

        Returns:
            List of cars matching the query
        """
        pass

    @abstractmethod
    async def get(self, car_id: int) -> Optional[CarListItem]:
        """
        Get a single car for the detail view.

        Args:
            car_id: Car identifier

        Returns:
            Car, or None if not found
        """
        pass

    @abstractmethod
    async def create(self, car: NewCar) -> CarListItem:
        """
        Create a car.

        Args:
            car: Validated creation payload

        Returns:
            The stored car with its assigned id and creation time
        """
        pass

    @abstractmethod
    async def delete(self, car_id: int) -> bool:
        """
        Delete a car.

        Args:
            car_id: Car identifier

        Returns:
            True if a car was removed, False if it did not exist
        """
        pass
