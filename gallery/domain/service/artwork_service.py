"""Artwork domain service."""

from decimal import Decimal

import logfire

from gallery.domain.error import NotFoundError, ValidationError
from gallery.domain.model.artist import Artist
from gallery.domain.model.artwork import Artwork
from gallery.domain.repository import ArtworkRepository
from gallery.domain.value import ApprovalStatus, ArtworkId, Slug

from .base import Service
from .slugs import generate_unique_slug


class ArtworkService(Service):
    """Domain service for artwork operations.

    Submissions by admins or pre-approved artists are published directly.
    All other submissions wait for review and stay hidden until approved.
    """

    def __init__(self, artwork_repository: ArtworkRepository) -> None:
        """Initialize artwork service.

        Args:
            artwork_repository: Artwork repository
        """
        self.artwork_repository = artwork_repository

    async def get_by_id(self, artwork_id: ArtworkId) -> Artwork:
        """Get an artwork by ID.

        Raises:
            NotFoundError: If the artwork does not exist
        """
        with logfire.span("artwork_service.get_by_id", artwork_id=artwork_id):
            artwork = await self.artwork_repository.find_by_id(artwork_id)
            if artwork is None:
                logfire.warn("Artwork not found", artwork_id=artwork_id)
                raise NotFoundError("Artwork", str(artwork_id))
            return artwork

    async def generate_unique_slug(self, title: str) -> Slug:
        """Generate an unused slug from an artwork title."""
        return await generate_unique_slug(
            title, "artwork", self.artwork_repository.slug_exists
        )

    async def create_artwork(
        self,
        artist: Artist,
        *,
        title: str,
        year: str,
        medium: str,
        dimensions: str,
        description: str,
        price: Decimal,
        original_image: str | None = None,
        is_visible: bool = True,
        created_by_admin: bool = False,
    ) -> Artwork:
        """Create an artwork for an artist.

        Args:
            artist: Owning artist
            title: Artwork title
            year: Four digit year
            medium: Medium description
            dimensions: Dimensions description
            description: Long description
            price: Asking price
            original_image: Image URL
            is_visible: Requested visibility once published
            created_by_admin: Whether an admin is creating it

        Returns:
            The stored artwork
        """
        if artist.id is None:
            raise ValidationError("Artist must be stored before adding artworks")

        with logfire.span(
            "artwork_service.create_artwork", artist_id=artist.id, title=title
        ):
            approved = created_by_admin or artist.pre_approved
            artwork = Artwork(
                artist_id=artist.id,
                title=title,
                slug=await self.generate_unique_slug(title),
                year=year,
                medium=medium,
                dimensions=dimensions,
                description=description,
                price=price,
                original_image=original_image,
                approval_status=(
                    ApprovalStatus.APPROVED if approved else ApprovalStatus.PENDING
                ),
                is_visible=is_visible if approved else False,
                artist_display_order=0,
                global_display_order=0,
            )
            saved = await self.artwork_repository.create(artwork)
            logfire.info(
                "Artwork created",
                artwork_id=saved.id,
                artist_id=artist.id,
                approval_status=saved.approval_status.value,
            )
            return saved

    async def approve(self, artwork_id: ArtworkId, make_visible: bool = True) -> Artwork:
        """Approve a submission.

        Args:
            artwork_id: Artwork to approve
            make_visible: Publish it, or keep it hidden

        Returns:
            The approved artwork
        """
        with logfire.span("artwork_service.approve", artwork_id=artwork_id):
            artwork = await self.get_by_id(artwork_id)
            updated = artwork.model_copy(
                update={
                    "approval_status": ApprovalStatus.APPROVED,
                    "rejection_reason": None,
                    "is_visible": make_visible,
                }
            )
            saved = await self.artwork_repository.save(updated)
            logfire.info(
                "Artwork approved", artwork_id=artwork_id, is_visible=make_visible
            )
            return saved

    async def reject(self, artwork_id: ArtworkId, reason: str) -> Artwork:
        """Reject a submission and hide it.

        Raises:
            ValidationError: If no reason is given
        """
        if not reason.strip():
            raise ValidationError("A rejection reason is required")

        with logfire.span("artwork_service.reject", artwork_id=artwork_id):
            artwork = await self.get_by_id(artwork_id)
            updated = artwork.model_copy(
                update={
                    "approval_status": ApprovalStatus.REJECTED,
                    "rejection_reason": reason.strip(),
                    "is_visible": False,
                }
            )
            saved = await self.artwork_repository.save(updated)
            logfire.info("Artwork rejected", artwork_id=artwork_id)
            return saved

    async def list_pending(self) -> list[Artwork]:
        """List submissions waiting for review, oldest first."""
        return await self.artwork_repository.find_by_approval_status(
            ApprovalStatus.PENDING
        )

    async def set_visibility(self, artwork_id: ArtworkId, is_visible: bool) -> Artwork:
        """Show or hide an artwork.

        Raises:
            NotFoundError: If the artwork does not exist
        """
        with logfire.span(
            "artwork_service.set_visibility",
            artwork_id=artwork_id,
            is_visible=is_visible,
        ):
            artwork = await self.get_by_id(artwork_id)
            saved = await self.artwork_repository.save(
                artwork.model_copy(update={"is_visible": is_visible})
            )
            logfire.info(
                "Artwork visibility updated",
                artwork_id=artwork_id,
                is_visible=is_visible,
            )
            return saved
