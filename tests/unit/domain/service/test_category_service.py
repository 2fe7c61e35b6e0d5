"""Unit tests for CategoryService."""

import pytest

from showcase.domain.error import ConflictError, NotFoundError, ValidationError
from showcase.domain.repository import CategoryRepository, ProjectRepository
from showcase.domain.service import CategoryService
from tests.conftest import make_account, make_category, make_project
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListActive:
    """Tests for list_active."""

    @pytest.mark.asyncio
    async def test_counts_projects_per_category(self, unit_env):
        service = await unit_env.get(CategoryService)
        categories = await unit_env.get(CategoryRepository)
        projects = await unit_env.get(ProjectRepository)
        defi = await categories.save(make_category("defi", sort_order=1))
        tools = await categories.save(make_category("tools", sort_order=2))
        owner = make_account()
        await projects.save(make_project(owner, category=defi))
        await projects.save(make_project(owner, category=defi))

        entries = await service.list_active()

        assert [(c.slug.root, n) for c, n in entries] == [("defi", 2), ("tools", 0)]
        assert entries[1][0] == tools

    @pytest.mark.asyncio
    async def test_inactive_categories_are_left_out(self, unit_env):
        service = await unit_env.get(CategoryService)
        categories = await unit_env.get(CategoryRepository)
        await categories.save(make_category("retired", is_active=False))

        assert await service.list_active() == []


class TestLookup:
    """Tests for find_by_slug and get_by_slug."""

    @pytest.mark.asyncio
    async def test_get_by_slug_returns_count(self, unit_env):
        service = await unit_env.get(CategoryService)
        categories = await unit_env.get(CategoryRepository)
        projects = await unit_env.get(ProjectRepository)
        defi = await categories.save(make_category("defi"))
        await projects.save(make_project(make_account(), category=defi))

        category, count = await service.get_by_slug("defi")

        assert category == defi
        assert count == 1

    @pytest.mark.asyncio
    async def test_inactive_category_is_hidden_from_get(self, unit_env):
        """Filters still resolve an inactive slug; the category page does not."""
        service = await unit_env.get(CategoryService)
        categories = await unit_env.get(CategoryRepository)
        retired = await categories.save(make_category("retired", is_active=False))

        assert await service.find_by_slug("retired") == retired
        with pytest.raises(NotFoundError):
            await service.get_by_slug("retired")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slug", ["missing", "Not A Slug"])
    async def test_unknown_slug(self, unit_env, slug):
        """Unknown and malformed slugs both name no category."""
        service = await unit_env.get(CategoryService)

        assert await service.find_by_slug(slug) is None
        with pytest.raises(NotFoundError):
            await service.get_by_slug(slug)


class TestCreate:
    """Tests for create."""

    @pytest.mark.asyncio
    async def test_create_saves_active_category(self, unit_env):
        service = await unit_env.get(CategoryService)
        categories = await unit_env.get(CategoryRepository)

        category = await service.create(
            slug="defi", name="DeFi", icon="coins", sort_order=3
        )

        assert category.is_active
        assert category.sort_order == 3
        assert await categories.find_by_id(category.id) == category

    @pytest.mark.asyncio
    async def test_duplicate_slug_raises_conflict(self, unit_env):
        service = await unit_env.get(CategoryService)
        await service.create(slug="defi", name="DeFi")

        with pytest.raises(ConflictError):
            await service.create(slug="defi", name="Decentralised finance")

    @pytest.mark.asyncio
    async def test_malformed_slug_raises_validation_error(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(ValidationError) as exc_info:
            await service.create(slug="De Fi", name="DeFi")

        assert exc_info.value.field == "slug"

    @pytest.mark.asyncio
    async def test_overlong_name_raises_validation_error(self, unit_env):
        service = await unit_env.get(CategoryService)

        with pytest.raises(ValidationError) as exc_info:
            await service.create(slug="defi", name="x" * 101)

        assert exc_info.value.field == "name"
