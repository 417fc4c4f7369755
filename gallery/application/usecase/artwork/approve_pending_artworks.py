"""Approve all pending artworks use case."""

import logfire
from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import AdminGuard, ArtworkService
from gallery.domain.value import CurrentUser


class ApprovePendingArtworksRequest(BaseModel):
    """Request to approve every pending submission."""

    actor: CurrentUser | None = None
    make_visible: bool = True


class ApprovePendingArtworksResponse(BaseModel):
    """Bulk approval result."""

    approved_count: int


class ApprovePendingArtworksUseCase(BaseUseCase):
    """Use case for bulk approval; all or nothing."""

    def __init__(
        self,
        admin_guard: AdminGuard,
        artwork_service: ArtworkService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.admin_guard = admin_guard
        self.artwork_service = artwork_service
        self.unit_of_work = unit_of_work

    async def execute(
        self, request: ApprovePendingArtworksRequest
    ) -> ApprovePendingArtworksResponse:
        """Approve every pending artwork in one transaction.

        Raises:
            AdminAccessRequiredError: If the caller is not an admin
        """
        self.admin_guard.require_admin(request.actor)

        with logfire.span(
            "approve_pending_artworks.execute", make_visible=request.make_visible
        ):
            async with self.unit_of_work.transaction():
                pending = await self.artwork_service.list_pending()
                for artwork in pending:
                    if artwork.id is not None:
                        await self.artwork_service.approve(
                            artwork.id, make_visible=request.make_visible
                        )

            logfire.info("Pending artworks approved", count=len(pending))
            return ApprovePendingArtworksResponse(approved_count=len(pending))
