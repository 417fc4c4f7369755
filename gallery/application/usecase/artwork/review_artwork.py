"""Review artwork use case."""

from typing import Literal

import logfire
from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import (
    AdminGuard,
    ArtistService,
    ArtworkService,
    NotificationService,
)
from gallery.domain.value import ApprovalStatus, ArtworkId, CurrentUser


class ReviewArtworkRequest(BaseModel):
    """Approve or reject a submission."""

    actor: CurrentUser | None = None
    artwork_id: int
    decision: Literal["approve", "reject"]
    make_visible: bool = True  # Only used when approving
    reason: str | None = None  # Required when rejecting


class ReviewArtworkResponse(BaseModel):
    """Reviewed artwork summary."""

    id: int
    approval_status: ApprovalStatus
    is_visible: bool
    artist_notified: bool


class ReviewArtworkUseCase(BaseUseCase):
    """Use case for reviewing an artwork submission."""

    def __init__(
        self,
        admin_guard: AdminGuard,
        artist_service: ArtistService,
        artwork_service: ArtworkService,
        notification_service: NotificationService,
    ) -> None:
        self.admin_guard = admin_guard
        self.artist_service = artist_service
        self.artwork_service = artwork_service
        self.notification_service = notification_service

    async def execute(self, request: ReviewArtworkRequest) -> ReviewArtworkResponse:
        """Apply the review decision and tell the artist.

        Raises:
            AdminAccessRequiredError: If the caller is not an admin
            NotFoundError: If the artwork does not exist
            ValidationError: If a rejection has no reason
        """
        actor = self.admin_guard.require_admin(request.actor)
        artwork_id = ArtworkId(request.artwork_id)

        with logfire.span(
            "review_artwork.execute", artwork_id=artwork_id, decision=request.decision
        ):
            if request.decision == "approve":
                artwork = await self.artwork_service.approve(
                    artwork_id, make_visible=request.make_visible
                )
            else:
                artwork = await self.artwork_service.reject(
                    artwork_id, request.reason or ""
                )

            artist = await self.artist_service.get_by_id(artwork.artist_id)
            if request.decision == "approve":
                result = await self.notification_service.send_artwork_approval(
                    artist, artwork, actor.display_name or "Gallery Admin"
                )
            else:
                result = await self.notification_service.send_artwork_rejection(
                    artist, artwork, artwork.rejection_reason or ""
                )

            return ReviewArtworkResponse(
                id=artwork_id,
                approval_status=artwork.approval_status,
                is_visible=artwork.is_visible,
                artist_notified=result.success,
            )
