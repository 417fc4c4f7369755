"""Update artist display order use case."""

import logfire
from pydantic import BaseModel, Field

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.error import NotAuthorizedError
from gallery.domain.service import AdminGuard, DisplayOrderService
from gallery.domain.value import ArtworkId, CurrentUser


class ArtistOrderItem(BaseModel):
    """New position of one artwork within its artist's list."""

    id: int
    artist_display_order: int = Field(ge=0)


class UpdateArtistOrderRequest(BaseModel):
    """Request to reorder artworks within an artist's list."""

    actor: CurrentUser | None = None
    items: list[ArtistOrderItem]


class UpdateArtistOrderResponse(BaseModel):
    """Reorder result."""

    updated_count: int


class UpdateArtistOrderUseCase(BaseUseCase):
    """Use case for the manual drag-and-drop artist ordering.

    Admins may reorder any artwork; artists only their own. A later
    recompute replaces this ordering with creation order.
    """

    def __init__(
        self, admin_guard: AdminGuard, display_order_service: DisplayOrderService
    ) -> None:
        self.admin_guard = admin_guard
        self.display_order_service = display_order_service

    async def execute(self, request: UpdateArtistOrderRequest) -> UpdateArtistOrderResponse:
        """Apply the ordering in one transaction.

        Raises:
            NotAuthenticatedError: If there is no caller
            NotAuthorizedError: If an artist reorders another artist's work
            NotFoundError: If an artwork does not exist
        """
        actor = self.admin_guard.require_authenticated(request.actor)

        with logfire.span(
            "update_artist_order.execute", count=len(request.items), user_id=actor.user_id
        ):
            owner_id = None
            if not self.admin_guard.is_admin(actor):
                if actor.artist_id is None:
                    raise NotAuthorizedError(
                        "Unauthorized: Account is not linked to an artist"
                    )
                owner_id = actor.artist_id

            updated = await self.display_order_service.apply_artist_order(
                [
                    (ArtworkId(item.id), item.artist_display_order)
                    for item in request.items
                ],
                owner_id=owner_id,
            )
            return UpdateArtistOrderResponse(updated_count=updated)

