import pytest

from tuzla_guide_api.app.services.attraction_service import AttractionService, calculate_distance


@pytest.mark.asyncio
async def test_list_attractions_returns_seed_catalog(seeded_store) -> None:
    attractions = await AttractionService.list_attractions()

    assert {a.id for a in attractions} == {0, 1, 2, 3, 4}


@pytest.mark.asyncio
async def test_get_attraction_returns_none_for_unknown_id(seeded_store) -> None:
    assert await AttractionService.get_attraction(99) is None
    assert (await AttractionService.get_attraction(2)).name == "Freedom Square"


@pytest.mark.asyncio
async def test_returned_records_are_copies(seeded_store) -> None:
    attraction = await AttractionService.get_attraction(0)
    attraction.rating = 1.0
    attraction.tags.append("mutated")

    stored = await AttractionService.get_attraction(0)
    assert stored.rating == 4.7
    assert "mutated" not in stored.tags


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["lake", "Lake", "LAKE"])
async def test_search_lake_is_case_insensitive(seeded_store, query: str) -> None:
    results = await AttractionService.search(query)

    assert [a.name for a in results] == ["Pannonian Salt Lakes"]


@pytest.mark.asyncio
async def test_search_empty_query_with_category(seeded_store) -> None:
    results = await AttractionService.search("", category="museum", language=None)

    assert {a.id for a in results} == {1, 4}
    assert all(a.category == "museum" for a in results)


@pytest.mark.asyncio
async def test_search_empty_query_matches_everything(seeded_store) -> None:
    assert len(await AttractionService.search("")) == 5


@pytest.mark.asyncio
async def test_search_matches_description_and_tags(seeded_store) -> None:
    by_description = await AttractionService.search("neolithic")
    by_tag = await AttractionService.search("OTTOMAN")

    assert [a.id for a in by_description] == [1]
    assert [a.id for a in by_tag] == [3]


@pytest.mark.asyncio
async def test_search_all_filters_must_hold(seeded_store) -> None:
    salt_in_german = await AttractionService.search("salt", language="de")
    salt_museums = await AttractionService.search("salt", category="museum")
    nothing = await AttractionService.search("salt", category="restaurant")

    assert {a.id for a in salt_in_german} == {0, 4}
    assert [a.id for a in salt_museums] == [4]
    assert nothing == []


@pytest.mark.asyncio
async def test_search_category_is_exact(seeded_store) -> None:
    assert await AttractionService.search("", category="Museum") == []


@pytest.mark.asyncio
async def test_search_price_and_rating_bounds(seeded_store) -> None:
    free = await AttractionService.search("", max_price=0)
    top_rated = await AttractionService.search("", min_rating=4.6)

    assert {a.id for a in free} == {2, 3}
    assert {a.id for a in top_rated} == {0, 2}


@pytest.mark.asyncio
async def test_nearby_sorts_by_distance_and_applies_radius(seeded_store) -> None:
    square = await AttractionService.get_attraction(2)
    lat, lon = square.location.latitude, square.location.longitude

    results = await AttractionService.nearby(lat, lon)
    close = await AttractionService.nearby(lat, lon, radius_km=0.3)

    assert results[0].id == 2
    assert results[0].distance_km == pytest.approx(0.0)
    distances = [r.distance_km for r in results]
    assert distances == sorted(distances)
    assert all(r.distance_km <= 0.3 for r in close)
    assert 4 not in {r.id for r in close}


def test_calculate_distance_one_degree_latitude() -> None:
    assert calculate_distance(44.0, 18.0, 45.0, 18.0) == pytest.approx(111.19, abs=0.01)
