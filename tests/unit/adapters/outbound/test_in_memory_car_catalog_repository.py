"""Unit tests for InMemoryCarCatalogRepository."""

from datetime import datetime, timezone

import pytest

from car_catalog.adapters.outbound.catalog import InMemoryCarCatalogRepository
from car_catalog.application.dtos.car import CarListItem, CatalogQuery, NewCar
from car_catalog.domain.value_objects.sort_option import SortOption


@pytest.fixture
def cars() -> list[CarListItem]:
    """Sample catalog."""
    return [
        CarListItem(
            id=1,
            name="mustang GT",
            car_type="Manual",
            specifications=("Engine: 5.0L Ti-VCT V8", "Fuel Type: Petrol"),
            created_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
        ),
        CarListItem(
            id=2,
            name="Civic",
            car_type="Automatic",
            specifications=("Fuel Type: Petrol",),
            tags=("City",),
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ),
        CarListItem(
            id=3,
            name="Accord",
            car_type="Automatic",
            specifications=("Displacement: 4951 cc",),
            created_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
        ),
        CarListItem(id=4, name="Beetle", car_type="Manual"),
    ]


@pytest.fixture
def repository(cars) -> InMemoryCarCatalogRepository:
    """Create repository seeded with the sample catalog."""
    return InMemoryCarCatalogRepository(cars)


def _ids(cars: list[CarListItem]) -> list[int]:
    return [car.id for car in cars]


@pytest.mark.asyncio
async def test_empty_query_lists_all_by_name(repository):
    """Test default query returns every car sorted by name ascending."""
    result = await repository.search(CatalogQuery())

    assert _ids(result) == [3, 4, 2, 1]


@pytest.mark.asyncio
async def test_name_descending(repository):
    """Test name ordering is case-insensitive and reversible."""
    result = await repository.search(CatalogQuery(sort=SortOption.NAME_DESC.descriptor))

    assert _ids(result) == [1, 2, 4, 3]


@pytest.mark.asyncio
async def test_newest_first_puts_undated_last(repository):
    """Test creation-date ordering keeps undated cars at the end."""
    newest = await repository.search(CatalogQuery(sort=SortOption.NEWEST_FIRST.descriptor))
    oldest = await repository.search(CatalogQuery(sort=SortOption.OLDEST_FIRST.descriptor))

    assert _ids(newest) == [1, 3, 2, 4]
    assert _ids(oldest) == [2, 3, 1, 4]


@pytest.mark.asyncio
async def test_car_type_filter_is_case_insensitive(repository):
    """Test car type filter values match display labels."""
    result = await repository.search(CatalogQuery(filters={"carType": frozenset({"manual"})}))

    assert _ids(result) == [4, 1]


@pytest.mark.asyncio
async def test_values_within_section_are_alternatives(repository):
    """Test OR semantics inside a section."""
    query = CatalogQuery(
        filters={"specifications": frozenset({"Displacement: 4951 cc", "Engine: 5.0L Ti-VCT V8"})}
    )

    result = await repository.search(query)

    assert _ids(result) == [3, 1]


@pytest.mark.asyncio
async def test_sections_narrow_each_other(repository):
    """Test AND semantics across sections."""
    query = CatalogQuery(
        filters={
            "carType": frozenset({"automatic"}),
            "specifications": frozenset({"Fuel Type: Petrol"}),
        }
    )

    result = await repository.search(query)

    assert _ids(result) == [2]


@pytest.mark.asyncio
async def test_empty_and_unknown_sections_ignored(repository):
    """Test empty sections and sections without a facet do not narrow."""
    query = CatalogQuery(filters={"carType": frozenset(), "color": frozenset({"red"})})

    result = await repository.search(query)

    assert len(result) == 4


@pytest.mark.asyncio
async def test_tags_facet(repository):
    """Test tag filtering."""
    result = await repository.search(CatalogQuery(filters={"tags": frozenset({"City"})}))

    assert _ids(result) == [2]


@pytest.mark.asyncio
async def test_create_assigns_next_id(repository):
    """Test created cars get the next id and a creation time."""
    created = await repository.create(
        NewCar(name="Golf", car_type="Manual", specifications=("Seats",))
    )

    assert created.id == 5
    assert created.created_at is not None
    assert created.description is None
    assert await repository.get(5) == created


@pytest.mark.asyncio
async def test_get_missing_returns_none(repository):
    """Test missing cars return None."""
    assert await repository.get(99) is None


@pytest.mark.asyncio
async def test_delete(repository):
    """Test delete reports whether a car was removed."""
    assert await repository.delete(1) is True
    assert await repository.delete(1) is False
    assert await repository.get(1) is None


@pytest.mark.asyncio
async def test_empty_repository():
    """Test an empty repository starts ids at 1."""
    repository = InMemoryCarCatalogRepository()

    created = await repository.create(NewCar(name="Golf", car_type="Manual"))

    assert created.id == 1
    assert await repository.search(CatalogQuery()) == [created]
