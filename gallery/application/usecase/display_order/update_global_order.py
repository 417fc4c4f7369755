"""Update global display order use case."""

import logfire
from pydantic import BaseModel, Field

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import AdminGuard, DisplayOrderService
from gallery.domain.value import ArtworkId, CurrentUser


class GlobalOrderItem(BaseModel):
    """New gallery-wide position of one artwork."""

    id: int
    global_display_order: int = Field(ge=0)


class UpdateGlobalOrderRequest(BaseModel):
    """Request to reorder artworks across the gallery."""

    actor: CurrentUser | None = None
    items: list[GlobalOrderItem]


class UpdateGlobalOrderResponse(BaseModel):
    """Reorder result."""

    updated_count: int


class UpdateGlobalOrderUseCase(BaseUseCase):
    """Use case for the admin gallery-wide sorting page."""

    def __init__(
        self, admin_guard: AdminGuard, display_order_service: DisplayOrderService
    ) -> None:
        self.admin_guard = admin_guard
        self.display_order_service = display_order_service

    async def execute(self, request: UpdateGlobalOrderRequest) -> UpdateGlobalOrderResponse:
        """Apply the ordering in one transaction.

        Raises:
            AdminAccessRequiredError: If the caller is not an admin
            ValidationError: If the list is empty
            NotFoundError: If an artwork does not exist
        """
        self.admin_guard.require_admin(request.actor)

        with logfire.span("update_global_order.execute", count=len(request.items)):
            updated = await self.display_order_service.apply_global_order(
                [
                    (ArtworkId(item.id), item.global_display_order)
                    for item in request.items
                ]
            )
            return UpdateGlobalOrderResponse(updated_count=updated)
