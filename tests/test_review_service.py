import pytest

from tuzla_guide_api.app.core.errors import NotFoundError, ValidationError
from tuzla_guide_api.app.schemas.review import ReviewCreate
from tuzla_guide_api.app.services.attraction_service import AttractionService
from tuzla_guide_api.app.services.review_service import ReviewService


def _review(attraction_id: int, rating: int, comment: str = "") -> ReviewCreate:
    return ReviewCreate(attraction_id=attraction_id, rating=rating, comment=comment)


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [1, 2, 3, 4, 5])
async def test_first_review_sets_rating_exactly(seeded_store, rating: int) -> None:
    await ReviewService.add_review(_review(3, rating), "alice")

    attraction = await AttractionService.get_attraction(3)
    assert attraction.rating == rating


@pytest.mark.asyncio
async def test_rating_is_mean_after_every_add(seeded_store) -> None:
    ratings = [5, 3, 4, 1, 2, 2]
    for i, rating in enumerate(ratings, start=1):
        await ReviewService.add_review(_review(1, rating), "bob")
        attraction = await AttractionService.get_attraction(1)
        expected = ratings[:i]
        assert attraction.rating == sum(expected) / len(expected)


@pytest.mark.asyncio
async def test_reviews_of_other_attractions_do_not_affect_rating(seeded_store) -> None:
    await ReviewService.add_review(_review(0, 1), "alice")
    await ReviewService.add_review(_review(1, 5), "alice")

    assert (await AttractionService.get_attraction(0)).rating == 1.0
    assert (await AttractionService.get_attraction(1)).rating == 5.0
    assert (await AttractionService.get_attraction(2)).rating == 4.6


@pytest.mark.asyncio
async def test_add_review_assigns_monotonic_ids_and_records_caller(seeded_store) -> None:
    first = await ReviewService.add_review(_review(0, 4, "  lovely water  "), "alice")
    second = await ReviewService.add_review(_review(2, 5), "bob")

    assert (first, second) == (0, 1)
    reviews = await ReviewService.list_reviews(0)
    assert len(reviews) == 1
    assert reviews[0].user_id == "alice"
    assert reviews[0].comment == "lovely water"


@pytest.mark.asyncio
async def test_add_review_refreshes_updated_at(seeded_store) -> None:
    before = await AttractionService.get_attraction(4)

    await ReviewService.add_review(_review(4, 3), "alice")

    after = await AttractionService.get_attraction(4)
    assert after.updated_at >= before.updated_at
    assert after.created_at == before.created_at
    untouched = await AttractionService.get_attraction(3)
    assert untouched.updated_at == untouched.created_at


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [0, 6, -1])
async def test_out_of_range_rating_is_rejected_without_changes(seeded_store, rating: int) -> None:
    before = seeded_store.snapshot()

    with pytest.raises(ValidationError):
        await ReviewService.add_review(_review(0, rating), "alice")

    assert seeded_store.snapshot() == before
    assert await ReviewService.list_reviews(0) == []


@pytest.mark.asyncio
async def test_unknown_attraction_is_rejected_without_changes(seeded_store) -> None:
    before = seeded_store.snapshot()

    with pytest.raises(NotFoundError):
        await ReviewService.add_review(_review(42, 5), "alice")

    assert seeded_store.snapshot() == before
    assert seeded_store.next_review_id == 0


@pytest.mark.asyncio
async def test_list_reviews_for_unknown_attraction_is_empty(seeded_store) -> None:
    assert await ReviewService.list_reviews(42) == []
