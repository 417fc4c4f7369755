"""Populate display orders use case."""

import logfire
from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import AdminGuard, DisplayOrderService
from gallery.domain.value import CurrentUser


class PopulateDisplayOrdersRequest(BaseModel):
    """Request to recompute every display order."""

    actor: CurrentUser | None = None


class PopulateDisplayOrdersResponse(BaseModel):
    """Outcome of a recompute run."""

    success: bool
    updated_count: int = 0
    message: str | None = None
    error: str | None = None


class PopulateDisplayOrdersUseCase(BaseUseCase):
    """Use case for recomputing artist and global display orders.

    Admin only. A store failure is reported in the response rather than
    raised; nothing from the failed run is kept.
    """

    def __init__(
        self, admin_guard: AdminGuard, display_order_service: DisplayOrderService
    ) -> None:
        """Initialize use case.

        Args:
            admin_guard: Admin guard
            display_order_service: Display order domain service
        """
        self.admin_guard = admin_guard
        self.display_order_service = display_order_service

    async def execute(
        self, request: PopulateDisplayOrdersRequest
    ) -> PopulateDisplayOrdersResponse:
        """Execute the recompute.

        Raises:
            NotAuthenticatedError: If there is no caller
            AdminAccessRequiredError: If the caller is not an admin
        """
        self.admin_guard.require_admin(request.actor)

        with logfire.span("populate_display_orders.execute"):
            try:
                assignments = await self.display_order_service.recompute()
            except Exception as e:
                logfire.error("Failed to populate display orders", error=str(e))
                return PopulateDisplayOrdersResponse(
                    success=False, error="Failed to populate display orders"
                )

            count = len(assignments)
            return PopulateDisplayOrdersResponse(
                success=True,
                updated_count=count,
                message=f"Successfully populated display orders for {count} artworks",
            )
