"""Unit tests for ProjectService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from showcase.domain.error import ConflictError, NotFoundError
from showcase.domain.repository import ProjectRepository
from showcase.domain.service import ProjectService
from showcase.domain.value import ProjectId
from showcase.persistence.repository.inmemory import InMemoryProjectRepository
from tests.conftest import make_account, make_category, make_project
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSlugify:
    """Tests for _slugify."""

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("Open Wallet Kit", "open-wallet-kit"),
            ("  DAO -- Toolbox!! 2 ", "dao-toolbox-2"),
            ("Émoji 🚀 launcher", "moji-launcher"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, title, expected):
        assert ProjectService._slugify(title) == expected

    def test_slugify_truncates_without_trailing_hyphen(self):
        slug = ProjectService._slugify("a" * 99 + " b")
        assert len(slug) <= 100
        assert not slug.endswith("-")


class TestGenerateUniqueSlug:
    """Tests for generate_unique_slug."""

    @pytest.mark.asyncio
    async def test_collisions_get_numeric_suffix(self, unit_env):
        """A taken slug is suffixed -1, then -2."""
        service = await unit_env.get(ProjectService)
        repo = await unit_env.get(ProjectRepository)
        owner = make_account()
        await repo.save(make_project(owner, slug="open-wallet-kit"))
        await repo.save(make_project(owner, slug="open-wallet-kit-1"))

        slug = await service.generate_unique_slug("Open Wallet Kit", ProjectId(uuid4()))

        assert slug.root == "open-wallet-kit-2"

    @pytest.mark.asyncio
    async def test_empty_slug_falls_back_to_id(self, unit_env):
        """Titles without alphanumerics use the project ID."""
        service = await unit_env.get(ProjectService)
        project_id = ProjectId(uuid4())

        slug = await service.generate_unique_slug("???", project_id)

        assert slug.root == f"project-{project_id.hex[:8]}"

    @pytest.mark.asyncio
    async def test_gives_up_after_bound(self):
        """A slug space that never frees up raises ConflictError."""

        class FullProjectRepository(InMemoryProjectRepository):
            async def slug_exists(self, slug):
                return True

        service = ProjectService(project_repository=FullProjectRepository())

        with pytest.raises(ConflictError):
            await service.generate_unique_slug("Taken", ProjectId(uuid4()))


class TestSubmit:
    """Tests for submit."""

    @pytest.mark.asyncio
    async def test_submit_saves_project_with_zero_views(self, unit_env):
        service = await unit_env.get(ProjectService)
        repo = await unit_env.get(ProjectRepository)
        owner = make_account()

        project = await service.submit(owner, "Open Wallet Kit", "A wallet SDK")

        assert project.views == 0
        assert project.owner_id == owner.id
        assert project.slug.root == "open-wallet-kit"
        assert await repo.find_by_id(project.id) == project


class TestQueries:
    """Tests for get_by_id and list_for_owner."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self, unit_env):
        service = await unit_env.get(ProjectService)

        with pytest.raises(NotFoundError):
            await service.get_by_id(ProjectId(uuid4()))

    @pytest.mark.asyncio
    async def test_list_for_owner_newest_first(self, unit_env):
        """Only the owner's projects, newest first."""
        service = await unit_env.get(ProjectService)
        repo = await unit_env.get(ProjectRepository)
        owner, other = make_account(), make_account(handle="bob")
        old = await repo.save(make_project(owner, age=timedelta(days=2)))
        new = await repo.save(make_project(owner, age=timedelta(hours=1)))
        await repo.save(make_project(other))

        projects = await service.list_for_owner(owner)

        assert [p.id for p in projects] == [new.id, old.id]


class TestBrowse:
    """Tests for browse."""

    @pytest.mark.asyncio
    async def test_returns_page_and_total(self, unit_env):
        service = await unit_env.get(ProjectService)
        repo = await unit_env.get(ProjectRepository)
        owner = make_account()
        saved = [
            await repo.save(make_project(owner, age=timedelta(hours=hours)))
            for hours in range(3)
        ]

        page, total = await service.browse(limit=2, offset=1)

        assert [p.id for p in page] == [saved[1].id, saved[2].id]
        assert total == 3

    @pytest.mark.asyncio
    async def test_filters_by_category(self, unit_env):
        service = await unit_env.get(ProjectService)
        repo = await unit_env.get(ProjectRepository)
        owner = make_account()
        defi = make_category("defi")
        listed = await repo.save(make_project(owner, category=defi))
        await repo.save(make_project(owner))

        page, total = await service.browse(category_id=defi.id)

        assert [p.id for p in page] == [listed.id]
        assert total == 1

    @pytest.mark.asyncio
    async def test_submit_records_category(self, unit_env):
        service = await unit_env.get(ProjectService)
        defi = make_category("defi")

        project = await service.submit(
            make_account(), "Lending Pool", "Pooled loans", category_id=defi.id
        )

        assert project.category_id == defi.id
