from datetime import timezone
from uuid import uuid4

import pytest

from nexus_kernel.domain import Filter
from nexus_kernel.domain.value_objects import Email, Phone
from nexus_kernel.exceptions import ConflictError, InvalidValueError
from nexus_kernel.users import User


async def test_save_and_load_round_trip(users, ctx, user_factory):
    user = user_factory(name="Maria Silva")
    await users.save(ctx, user)

    loaded = await users.find_by_id(ctx, user.id)

    assert loaded == user
    assert loaded.name == "Maria Silva"
    assert loaded.email == user.email
    assert loaded.cpf == user.cpf
    assert loaded.tenant_id == user.tenant_id
    assert loaded.version == user.version == 1
    assert loaded.created_at.tzinfo is not None
    assert loaded.created_at.astimezone(timezone.utc) == user.created_at
    assert not loaded.has_domain_events


async def test_missing_aggregate_is_none(users, ctx):
    assert await users.find_by_id(ctx, uuid4()) is None
    assert not await users.exists(ctx, uuid4())


async def test_update_persists_changes(users, ctx, user_factory):
    user = user_factory()
    await users.save(ctx, user)

    loaded = await users.find_by_id(ctx, user.id)
    loaded.activate()
    await users.save(ctx, loaded)

    reloaded = await users.find_by_id(ctx, user.id)
    assert reloaded.is_active
    assert reloaded.version == 2


async def test_optional_phone_round_trip(users, ctx, user_factory):
    user = user_factory()
    await users.save(ctx, user)
    assert (await users.find_by_id(ctx, user.id)).phone is None

    with_phone = User(
        user.tenant_id, "Phone Owner", Email("phone@example.com"), user_factory().cpf, phone=Phone("11987654321")
    )
    await users.save(ctx, with_phone)
    assert (await users.find_by_id(ctx, with_phone.id)).phone == Phone("11987654321")


async def test_delete(users, ctx, user_factory):
    user = user_factory()
    await users.save(ctx, user)

    assert await users.delete(ctx, user.id) is True
    assert await users.delete(ctx, user.id) is False
    assert await users.find_by_id(ctx, user.id) is None


async def test_find_by_email(users, ctx, user_factory):
    user = user_factory(email="find.me@example.com")
    await users.save(ctx, user)

    assert (await users.find_by_email(ctx, Email("Find.Me@example.com"))).id == user.id
    assert await users.find_by_email(ctx, Email("nobody@example.com")) is None


async def test_find_all_filters_sorts_and_paginates(users, ctx, user_factory):
    for name in ["Carla", "Ana", "Bruno", "Davi"]:
        user = user_factory(name=name)
        if name != "Davi":
            user.activate()
        await users.save(ctx, user)

    active = Filter(where={"is_active": True}, sort="name", order="asc")
    assert [u.name for u in await users.find_all(ctx, active)] == ["Ana", "Bruno", "Carla"]
    assert await users.count(ctx, active) == 3

    page = Filter(where={"is_active": True}, sort="name", order="desc", limit=1, offset=1)
    assert [u.name for u in await users.find_all(ctx, page)] == ["Bruno"]
    assert await users.count(ctx, page) == 3

    assert await users.count(ctx, Filter()) == 4
    assert len(await users.find_all(ctx, Filter(limit=2))) == 2


async def test_find_all_scoped_by_tenant(users, ctx, user_factory):
    tenant = uuid4()
    await users.save(ctx, user_factory(tenant=tenant))
    await users.save(ctx, user_factory())

    assert await users.count(ctx, Filter(where={"tenant_id": tenant})) == 1


@pytest.mark.parametrize("bad", [Filter(sort="password"), Filter(where={"nope": 1})])
async def test_unknown_field_rejected(users, ctx, bad):
    with pytest.raises(InvalidValueError):
        await users.find_all(ctx, bad)


async def test_duplicate_email_is_a_conflict(users, ctx, user_factory):
    await users.save(ctx, user_factory(email="dup@example.com"))
    duplicate = user_factory(email="dup@example.com")

    with pytest.raises(ConflictError) as exc_info:
        await users.save(ctx, duplicate)

    assert exc_info.value.details == {"entity_id": str(duplicate.id)}
    assert not await users.exists(ctx, duplicate.id)
