"""Unit tests for the in-memory repositories."""

from datetime import timedelta
from uuid import uuid4

import pytest

from showcase.domain.error import ConflictError, StorageError
from showcase.domain.repository import InsertStatus
from showcase.domain.value import Handle, ProjectId, Slug
from showcase.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryCategoryRepository,
    InMemoryProjectRepository,
)
from tests.conftest import make_account, make_category, make_project


class TestInMemoryAccountRepository:
    @pytest.mark.asyncio
    async def test_insert_and_find(self):
        repo = InMemoryAccountRepository()
        account = make_account(auth_id="u1")

        result = await repo.insert(account)

        assert result.status == InsertStatus.INSERTED
        assert await repo.find_by_auth_id("u1") == account
        assert await repo.find_by_id(account.id) == account
        assert await repo.handle_exists(account.handle)
        assert await repo.find_by_handle(account.handle) == account

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["auth_id", "email", "handle"])
    async def test_insert_reports_conflicting_field(self, field):
        repo = InMemoryAccountRepository()
        existing = make_account(handle="alice", auth_id="u1", email="a@x.com")
        await repo.insert(existing)
        clash = {
            "auth_id": make_account(handle="other", auth_id="u1"),
            "email": make_account(handle="other", email="a@x.com"),
            "handle": make_account(handle="alice"),
        }[field]

        result = await repo.insert(clash)

        assert result.is_conflict
        assert result.conflict_field == field
        assert result.account is None

    @pytest.mark.asyncio
    async def test_unknown_lookups_return_none(self):
        repo = InMemoryAccountRepository()

        assert await repo.find_by_auth_id("nobody") is None
        assert await repo.find_by_handle(Handle("nobody")) is None
        assert not await repo.handle_exists(Handle("nobody"))


class TestInMemoryProjectRepository:
    @pytest.mark.asyncio
    async def test_increment_and_overwrite(self):
        repo = InMemoryProjectRepository()
        project = await repo.save(make_project(make_account(), views=1))

        assert await repo.increment_views(project.id) == 2
        assert await repo.set_views(project.id, 10)
        assert await repo.get_views(project.id) == 10

    @pytest.mark.asyncio
    async def test_missing_project(self):
        repo = InMemoryProjectRepository()
        missing = ProjectId(uuid4())

        assert await repo.increment_views(missing) is None
        assert await repo.get_views(missing) is None
        assert not await repo.set_views(missing, 1)

    @pytest.mark.asyncio
    async def test_atomic_unavailable_raises_storage_error(self):
        repo = InMemoryProjectRepository(atomic_available=False)
        project = await repo.save(make_project(make_account()))

        with pytest.raises(StorageError):
            await repo.increment_views(project.id)

    @pytest.mark.asyncio
    async def test_duplicate_slug_rejected(self):
        repo = InMemoryProjectRepository()
        owner = make_account()
        await repo.save(make_project(owner, slug="taken"))

        with pytest.raises(ConflictError):
            await repo.save(make_project(owner, slug="taken"))

        assert await repo.slug_exists(Slug("taken"))
        assert not await repo.slug_exists(Slug("free"))


class TestInMemoryProjectListing:
    @pytest.mark.asyncio
    async def test_find_all_pages_newest_first(self):
        repo = InMemoryProjectRepository()
        owner = make_account()
        saved = [
            await repo.save(make_project(owner, age=timedelta(days=days)))
            for days in range(5)
        ]

        first = await repo.find_all(limit=2)
        rest = await repo.find_all(limit=10, offset=2)

        assert [p.id for p in first] == [saved[0].id, saved[1].id]
        assert [p.id for p in rest] == [p.id for p in saved[2:]]
        assert await repo.count() == 5

    @pytest.mark.asyncio
    async def test_filters_combine(self):
        repo = InMemoryProjectRepository()
        alice, bob = make_account(), make_account(handle="bob")
        defi, tools = make_category("defi"), make_category("tools")
        match = await repo.save(make_project(alice, category=defi))
        await repo.save(make_project(alice, category=tools))
        await repo.save(make_project(bob, category=defi))
        await repo.save(make_project(alice))

        found = await repo.find_all(owner_id=alice.id, category_id=defi.id)

        assert [p.id for p in found] == [match.id]
        assert await repo.count(owner_id=alice.id) == 3
        assert await repo.count(category_id=defi.id) == 2

    @pytest.mark.asyncio
    async def test_count_by_category_skips_uncategorised(self):
        repo = InMemoryProjectRepository()
        owner = make_account()
        defi = make_category("defi")
        await repo.save(make_project(owner, category=defi))
        await repo.save(make_project(owner, category=defi))
        await repo.save(make_project(owner))

        assert await repo.count_by_category() == {defi.id: 2}


class TestInMemoryCategoryRepository:
    @pytest.mark.asyncio
    async def test_save_and_find(self):
        repo = InMemoryCategoryRepository()
        category = await repo.save(make_category("defi"))

        assert await repo.find_by_id(category.id) == category
        assert await repo.find_by_slug(Slug("defi")) == category
        assert await repo.find_by_slug(Slug("other")) is None

    @pytest.mark.asyncio
    async def test_duplicate_slug_raises_conflict(self):
        repo = InMemoryCategoryRepository()
        await repo.save(make_category("defi"))

        with pytest.raises(ConflictError):
            await repo.save(make_category("defi", name="DeFi again"))

    @pytest.mark.asyncio
    async def test_find_active_orders_by_sort_order_then_name(self):
        repo = InMemoryCategoryRepository()
        await repo.save(make_category("tools", sort_order=2))
        await repo.save(make_category("nfts", sort_order=1))
        await repo.save(make_category("defi", sort_order=1))
        await repo.save(make_category("retired", sort_order=0, is_active=False))

        active = await repo.find_active()

        assert [c.slug.root for c in active] == ["defi", "nfts", "tools"]
