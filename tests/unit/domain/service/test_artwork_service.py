"""Unit tests for ArtworkService."""

from decimal import Decimal

import pytest

from gallery.domain.error import NotFoundError, ValidationError
from gallery.domain.repository import ArtistRepository, ArtworkRepository
from gallery.domain.service import ArtworkService
from gallery.domain.value import ApprovalStatus, ArtworkId
from tests.conftest import at, make_artist, make_artwork
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _create(service: ArtworkService, artist, title="Sunset", **kwargs):
    return await service.create_artwork(
        artist,
        title=title,
        year="2024",
        medium="Watercolor",
        dimensions="12 x 16 in",
        description="Evening light over the bay.",
        price=Decimal("300.00"),
        **kwargs,
    )


class TestCreateArtwork:
    """Tests for create_artwork method."""

    @pytest.mark.asyncio
    async def test_artist_submission_waits_for_review(self, unit_env):
        """Artists without pre-approval submit pending, hidden artworks."""
        # Arrange
        service = await unit_env.get(ArtworkService)
        artist = await (await unit_env.get(ArtistRepository)).create(make_artist())

        # Act
        artwork = await _create(service, artist, is_visible=True)

        # Assert
        assert artwork.approval_status == ApprovalStatus.PENDING
        assert artwork.is_visible is False
        assert artwork.artist_display_order == 0
        assert artwork.global_display_order == 0

    @pytest.mark.asyncio
    async def test_pre_approved_artist_publishes_directly(self, unit_env):
        """Pre-approved artists skip review."""
        # Arrange
        service = await unit_env.get(ArtworkService)
        artist = await (await unit_env.get(ArtistRepository)).create(
            make_artist(pre_approved=True)
        )

        # Act
        artwork = await _create(service, artist)

        # Assert
        assert artwork.approval_status == ApprovalStatus.APPROVED
        assert artwork.is_visible is True

    @pytest.mark.asyncio
    async def test_admin_creation_keeps_requested_visibility(self, unit_env):
        """Admin-created artworks are approved with the visibility asked for."""
        # Arrange
        service = await unit_env.get(ArtworkService)
        artist = await (await unit_env.get(ArtistRepository)).create(make_artist())

        # Act
        artwork = await _create(service, artist, is_visible=False, created_by_admin=True)

        # Assert
        assert artwork.approval_status == ApprovalStatus.APPROVED
        assert artwork.is_visible is False

    @pytest.mark.asyncio
    async def test_duplicate_titles_get_suffixed_slugs(self, unit_env):
        """A repeated title gets a numeric slug suffix."""
        # Arrange
        service = await unit_env.get(ArtworkService)
        artist = await (await unit_env.get(ArtistRepository)).create(make_artist())

        # Act
        first = await _create(service, artist, title="Sunset Over The Bay")
        second = await _create(service, artist, title="Sunset over the bay!")

        # Assert
        assert str(first.slug) == "sunset-over-the-bay"
        assert str(second.slug) == "sunset-over-the-bay-1"

    @pytest.mark.asyncio
    async def test_unsaved_artist(self, unit_env):
        """The artist must exist before artworks are added."""
        service = await unit_env.get(ArtworkService)

        with pytest.raises(ValidationError):
            await _create(service, make_artist())


class TestReview:
    """Tests for approve, reject and set_visibility."""

    @pytest.mark.asyncio
    async def test_approve_publishes(self, unit_env):
        """Approving clears the reason and applies make_visible."""
        # Arrange
        service = await unit_env.get(ArtworkService)
        artist = await (await unit_env.get(ArtistRepository)).create(make_artist())
        pending = await _create(service, artist)

        # Act
        approved = await service.approve(pending.id, make_visible=True)

        # Assert
        assert approved.approval_status == ApprovalStatus.APPROVED
        assert approved.is_visible is True
        assert approved.rejection_reason is None
        assert approved.created_at == pending.created_at

    @pytest.mark.asyncio
    async def test_reject_requires_reason(self, unit_env):
        """A blank rejection reason is refused."""
        # Arrange
        service = await unit_env.get(ArtworkService)
        artist = await (await unit_env.get(ArtistRepository)).create(make_artist())
        pending = await _create(service, artist)

        # Act & Assert
        with pytest.raises(ValidationError, match="rejection reason"):
            await service.reject(pending.id, "   ")

    @pytest.mark.asyncio
    async def test_reject_hides(self, unit_env):
        """Rejected artworks are hidden and keep the reason."""
        # Arrange
        service = await unit_env.get(ArtworkService)
        artist = await (await unit_env.get(ArtistRepository)).create(make_artist())
        pending = await _create(service, artist)

        # Act
        rejected = await service.reject(pending.id, " Image too small ")

        # Assert
        assert rejected.approval_status == ApprovalStatus.REJECTED
        assert rejected.rejection_reason == "Image too small"
        assert rejected.is_visible is False

    @pytest.mark.asyncio
    async def test_set_visibility_keeps_created_at(self, unit_env):
        """Saving an artwork never rewrites its creation time."""
        # Arrange
        service = await unit_env.get(ArtworkService)
        repo = await unit_env.get(ArtworkRepository)
        artwork = await repo.create(make_artwork(1, "Harbor", at(0)))

        # Act
        hidden = await service.set_visibility(artwork.id, False)

        # Assert
        assert hidden.is_visible is False
        assert (await repo.find_by_id(artwork.id)).created_at == at(0)

    @pytest.mark.asyncio
    async def test_missing_artwork(self, unit_env):
        """Unknown artworks raise NotFoundError."""
        service = await unit_env.get(ArtworkService)

        with pytest.raises(NotFoundError, match="Artwork not found: 77"):
            await service.approve(ArtworkId(77))
