import pytest

from tuzla_guide_api.app.schemas.user import UserProfileUpdate
from tuzla_guide_api.app.services.user_service import UserService


@pytest.mark.asyncio
async def test_get_profile_absent_before_first_update(store) -> None:
    assert await UserService.get_profile("alice") is None


@pytest.mark.asyncio
async def test_first_update_creates_empty_profile(store) -> None:
    await UserService.update_profile(
        UserProfileUpdate(username="amra", email="amra@example.com", preferred_language="bs"),
        "alice",
    )

    profile = await UserService.get_profile("alice")
    assert profile.id == "alice"
    assert profile.username == "amra"
    assert profile.preferred_language == "bs"
    assert profile.visited_attractions == []
    assert profile.favorite_attractions == []
    assert profile.total_spent == 0


@pytest.mark.asyncio
async def test_second_update_wins_and_keeps_created_at(store) -> None:
    await UserService.update_profile(
        UserProfileUpdate(username="first", email="a@example.com", preferred_language="en"), "alice"
    )
    created = (await UserService.get_profile("alice")).created_at

    await UserService.update_profile(
        UserProfileUpdate(username="second", email="b@example.com", preferred_language="de"), "alice"
    )

    profile = await UserService.get_profile("alice")
    assert store.counts()["user_profiles"] == 1
    assert profile.username == "second"
    assert profile.email == "b@example.com"
    assert profile.preferred_language == "de"
    assert profile.created_at == created


@pytest.mark.asyncio
async def test_update_preserves_non_editable_fields(store) -> None:
    profile = await UserService.update_profile(
        UserProfileUpdate(username="amra", email="amra@example.com"), "alice"
    )
    profile.visited_attractions = [0, 2]
    profile.total_spent = 1100
    store.put_profile(profile)

    await UserService.update_profile(
        UserProfileUpdate(username="amra2", email="amra@example.com"), "alice"
    )

    updated = await UserService.get_profile("alice")
    assert updated.visited_attractions == [0, 2]
    assert updated.total_spent == 1100


@pytest.mark.asyncio
async def test_profiles_are_keyed_by_caller(store) -> None:
    await UserService.update_profile(UserProfileUpdate(username="a", email="a@x"), "alice")
    await UserService.update_profile(UserProfileUpdate(username="b", email="b@x"), "bob")

    assert (await UserService.get_profile("alice")).username == "a"
    assert (await UserService.get_profile("bob")).username == "b"
    assert store.counts()["user_profiles"] == 2


@pytest.mark.asyncio
async def test_no_format_validation_on_profile_fields(store) -> None:
    profile = await UserService.update_profile(
        UserProfileUpdate(username="", email="not-an-email", preferred_language="xx"), "alice"
    )

    assert profile.email == "not-an-email"
