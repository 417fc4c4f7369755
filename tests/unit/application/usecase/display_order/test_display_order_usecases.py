"""Unit tests for display order use cases."""

import pytest

from gallery.application.usecase.display_order import (
    ArtistOrderItem,
    GlobalOrderItem,
    PopulateDisplayOrdersRequest,
    PopulateDisplayOrdersUseCase,
    UpdateArtistOrderRequest,
    UpdateArtistOrderUseCase,
    UpdateGlobalOrderRequest,
    UpdateGlobalOrderUseCase,
)
from gallery.domain.error import (
    AdminAccessRequiredError,
    NotAuthenticatedError,
    NotAuthorizedError,
)
from gallery.domain.repository import ArtworkRepository
from tests.conftest import admin_user, artist_user, at, make_artwork
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestPopulateDisplayOrders:
    """Tests for PopulateDisplayOrdersUseCase."""

    @pytest.mark.asyncio
    async def test_populate(self, unit_env):
        """Admins recompute every visible artwork's ranks."""
        # Arrange
        use_case = await unit_env.get(PopulateDisplayOrdersUseCase)
        repo = await unit_env.get(ArtworkRepository)
        await repo.create(make_artwork(1, "one", at(0)))
        await repo.create(make_artwork(2, "two", at(1)))
        await repo.create(make_artwork(2, "hidden", at(2), is_visible=False))

        # Act
        response = await use_case.execute(
            PopulateDisplayOrdersRequest(actor=admin_user())
        )

        # Assert
        assert response.success is True
        assert response.updated_count == 2
        assert response.message == "Successfully populated display orders for 2 artworks"

    @pytest.mark.asyncio
    async def test_empty_gallery(self, unit_env):
        use_case = await unit_env.get(PopulateDisplayOrdersUseCase)

        response = await use_case.execute(
            PopulateDisplayOrdersRequest(actor=admin_user())
        )

        assert response.success is True
        assert response.updated_count == 0

    @pytest.mark.asyncio
    async def test_store_failure_is_reported(self, unit_env, monkeypatch):
        """A failing write is reported in the response and nothing is kept."""
        # Arrange
        use_case = await unit_env.get(PopulateDisplayOrdersUseCase)
        repo = await unit_env.get(ArtworkRepository)
        await repo.create(make_artwork(1, "one", at(0)))

        async def failing_update(*args):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(repo, "update_display_orders", failing_update)

        # Act
        response = await use_case.execute(
            PopulateDisplayOrdersRequest(actor=admin_user())
        )

        # Assert
        assert response.success is False
        assert response.error == "Failed to populate display orders"

    @pytest.mark.asyncio
    async def test_non_admin_writes_nothing(self, unit_env):
        """Artists are refused before any artwork is touched."""
        # Arrange
        use_case = await unit_env.get(PopulateDisplayOrdersUseCase)
        repo = await unit_env.get(ArtworkRepository)
        artwork = await repo.create(make_artwork(1, "one", at(0)))

        # Act & Assert
        with pytest.raises(AdminAccessRequiredError):
            await use_case.execute(
                PopulateDisplayOrdersRequest(actor=artist_user(artist_id=1))
            )

        assert (await repo.find_by_id(artwork.id)).global_display_order == 0

    @pytest.mark.asyncio
    async def test_anonymous(self, unit_env):
        use_case = await unit_env.get(PopulateDisplayOrdersUseCase)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(PopulateDisplayOrdersRequest())


class TestUpdateArtistOrder:
    """Tests for UpdateArtistOrderUseCase."""

    @pytest.mark.asyncio
    async def test_artist_reorders_own_work(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateArtistOrderUseCase)
        repo = await unit_env.get(ArtworkRepository)
        first = await repo.create(make_artwork(1, "one", at(0)))
        second = await repo.create(make_artwork(1, "two", at(1)))

        # Act
        response = await use_case.execute(
            UpdateArtistOrderRequest(
                actor=artist_user(artist_id=1),
                items=[
                    ArtistOrderItem(id=first.id, artist_display_order=2),
                    ArtistOrderItem(id=second.id, artist_display_order=1),
                ],
            )
        )

        # Assert
        assert response.updated_count == 2
        assert (await repo.find_by_id(first.id)).artist_display_order == 2
        assert (await repo.find_by_id(second.id)).artist_display_order == 1

    @pytest.mark.asyncio
    async def test_unlinked_account(self, unit_env):
        """Artists whose login has no artistID cannot reorder."""
        use_case = await unit_env.get(UpdateArtistOrderUseCase)

        with pytest.raises(NotAuthorizedError, match="not linked"):
            await use_case.execute(
                UpdateArtistOrderRequest(
                    actor=artist_user(),
                    items=[ArtistOrderItem(id=1, artist_display_order=1)],
                )
            )

    @pytest.mark.asyncio
    async def test_admin_reorders_any(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateArtistOrderUseCase)
        repo = await unit_env.get(ArtworkRepository)
        artwork = await repo.create(make_artwork(7, "theirs", at(0)))

        # Act
        await use_case.execute(
            UpdateArtistOrderRequest(
                actor=admin_user(),
                items=[ArtistOrderItem(id=artwork.id, artist_display_order=3)],
            )
        )

        # Assert
        assert (await repo.find_by_id(artwork.id)).artist_display_order == 3


class TestUpdateGlobalOrder:
    """Tests for UpdateGlobalOrderUseCase."""

    @pytest.mark.asyncio
    async def test_admin_only(self, unit_env):
        use_case = await unit_env.get(UpdateGlobalOrderUseCase)

        with pytest.raises(AdminAccessRequiredError):
            await use_case.execute(
                UpdateGlobalOrderRequest(
                    actor=artist_user(artist_id=1),
                    items=[GlobalOrderItem(id=1, global_display_order=1)],
                )
            )

    @pytest.mark.asyncio
    async def test_update(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateGlobalOrderUseCase)
        repo = await unit_env.get(ArtworkRepository)
        artwork = await repo.create(make_artwork(1, "one", at(0)))

        # Act
        response = await use_case.execute(
            UpdateGlobalOrderRequest(
                actor=admin_user(),
                items=[GlobalOrderItem(id=artwork.id, global_display_order=5)],
            )
        )

        # Assert
        assert response.updated_count == 1
        assert (await repo.find_by_id(artwork.id)).global_display_order == 5
