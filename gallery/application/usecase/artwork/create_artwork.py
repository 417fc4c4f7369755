"""Create artwork use case."""

from decimal import Decimal

import logfire
from pydantic import BaseModel, Field

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import (
    AdminGuard,
    ArtistService,
    ArtworkService,
    NotificationService,
)
from gallery.domain.value import ApprovalStatus, ArtistId, CurrentUser


class CreateArtworkRequest(BaseModel):
    """Request to add an artwork to an artist."""

    actor: CurrentUser | None = None
    artist_id: int
    title: str = Field(min_length=2, max_length=200)
    year: str = Field(pattern=r"^\d{4}$")
    medium: str = Field(min_length=2, max_length=100)
    dimensions: str = Field(min_length=2, max_length=100)
    description: str = Field(min_length=10, max_length=2000)
    price: Decimal = Field(ge=0, le=100000, decimal_places=2)
    original_image: str | None = None
    is_visible: bool = True


class CreateArtworkResponse(BaseModel):
    """Created artwork summary."""

    id: int
    slug: str
    approval_status: ApprovalStatus
    is_visible: bool
    admins_notified: bool | None = None  # None when no review is needed


class CreateArtworkUseCase(BaseUseCase):
    """Use case for creating an artwork as an admin or as its artist.

    Artist submissions that need review notify the configured admins;
    a failed notification does not undo the submission.
    """

    def __init__(
        self,
        admin_guard: AdminGuard,
        artist_service: ArtistService,
        artwork_service: ArtworkService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize use case.

        Args:
            admin_guard: Admin guard
            artist_service: Artist domain service
            artwork_service: Artwork domain service
            notification_service: Notification domain service
        """
        self.admin_guard = admin_guard
        self.artist_service = artist_service
        self.artwork_service = artwork_service
        self.notification_service = notification_service

    async def execute(self, request: CreateArtworkRequest) -> CreateArtworkResponse:
        """Create the artwork.

        Raises:
            NotAuthenticatedError: If there is no caller
            NotAuthorizedError: If the caller is neither admin nor the artist
            NotFoundError: If the artist does not exist
        """
        artist_id = ArtistId(request.artist_id)
        actor = self.admin_guard.require_artist_access(request.actor, artist_id)

        with logfire.span(
            "create_artwork.execute", artist_id=artist_id, title=request.title
        ):
            artist = await self.artist_service.get_by_id(artist_id)
            artwork = await self.artwork_service.create_artwork(
                artist,
                title=request.title.strip(),
                year=request.year,
                medium=request.medium.strip(),
                dimensions=request.dimensions.strip(),
                description=request.description.strip(),
                price=request.price,
                original_image=request.original_image or None,
                is_visible=request.is_visible,
                created_by_admin=self.admin_guard.is_admin(actor),
            )

            admins_notified = None
            if artwork.approval_status == ApprovalStatus.PENDING:
                result = await self.notification_service.send_submission_notification(
                    artist, artwork, artwork.created_at
                )
                admins_notified = result.success

            return CreateArtworkResponse(
                id=artwork.id or 0,
                slug=str(artwork.slug),
                approval_status=artwork.approval_status,
                is_visible=artwork.is_visible,
                admins_notified=admins_notified,
            )
