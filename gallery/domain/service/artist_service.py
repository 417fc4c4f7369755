"""Artist domain service."""

import logfire

from gallery.domain.error import NotFoundError
from gallery.domain.model.artist import Artist
from gallery.domain.model.invitation import ArtistInvitation
from gallery.domain.repository import ArtistRepository
from gallery.domain.value import ArtistId, Slug

from .base import Service
from .slugs import generate_unique_slug


class ArtistService(Service):
    """Domain service for artist operations."""

    def __init__(self, artist_repository: ArtistRepository) -> None:
        """Initialize artist service.

        Args:
            artist_repository: Artist repository
        """
        self.artist_repository = artist_repository

    async def get_by_id(self, artist_id: ArtistId) -> Artist:
        """Get an artist by ID.

        Raises:
            NotFoundError: If the artist does not exist
        """
        with logfire.span("artist_service.get_by_id", artist_id=artist_id):
            artist = await self.artist_repository.find_by_id(artist_id)
            if artist is None:
                logfire.warn("Artist not found", artist_id=artist_id)
                raise NotFoundError("Artist", str(artist_id))
            return artist

    async def generate_unique_slug(self, name: str) -> Slug:
        """Generate an unused slug from an artist name."""
        return await generate_unique_slug(
            name, "artist", self.artist_repository.slug_exists
        )

    @staticmethod
    def parse_exhibitions(text: str | None) -> list[str]:
        """Split multi-line exhibitions text into one entry per non-blank line."""
        if not text:
            return []
        return [line.strip() for line in text.splitlines() if line.strip()]

    async def create_from_invitation(
        self,
        invitation: ArtistInvitation,
        *,
        bio: str | None,
        specialty: str | None,
        exhibitions: str | None = None,
        profile_image: str | None = None,
    ) -> Artist:
        """Create the artist row for a redeemed invitation.

        The name, email and pre-approval flag come from the invitation.
        New artists are visible, not hidden and not featured.

        Args:
            invitation: Invitation being redeemed
            bio: Artist biography
            specialty: Artistic specialty, falls back to the invitation's
            exhibitions: Multi-line exhibitions text
            profile_image: Profile image URL

        Returns:
            The stored artist
        """
        with logfire.span(
            "artist_service.create_from_invitation", invitation_id=invitation.id
        ):
            artist = Artist(
                name=invitation.name,
                slug=await self.generate_unique_slug(invitation.name),
                email=invitation.email,
                bio=bio,
                specialty=specialty or invitation.specialty,
                exhibitions=self.parse_exhibitions(exhibitions),
                profile_image=profile_image or None,
                pre_approved=invitation.pre_approved,
                is_visible=True,
                is_hidden=False,
                featured=False,
            )
            saved = await self.artist_repository.create(artist)
            logfire.info(
                "Artist created from invitation",
                artist_id=saved.id,
                slug=str(saved.slug),
                invitation_id=invitation.id,
            )
            return saved

    async def set_visibility(self, artist_id: ArtistId, is_visible: bool) -> Artist:
        """Show or hide an artist.

        Hiding sets ``is_hidden`` as well so public listings skip the artist.

        Raises:
            NotFoundError: If the artist does not exist
        """
        with logfire.span(
            "artist_service.set_visibility", artist_id=artist_id, is_visible=is_visible
        ):
            artist = await self.get_by_id(artist_id)
            updated = artist.model_copy(
                update={"is_visible": is_visible, "is_hidden": not is_visible}
            )
            saved = await self.artist_repository.save(updated)
            logfire.info(
                "Artist visibility updated", artist_id=artist_id, is_visible=is_visible
            )
            return saved
