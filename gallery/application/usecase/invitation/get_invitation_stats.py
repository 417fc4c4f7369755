"""Get invitation stats use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import AdminGuard, InvitationService
from gallery.domain.value import CurrentUser


class GetInvitationStatsRequest(BaseModel):
    """Request for invitation statistics."""

    actor: CurrentUser | None = None


class InvitationSummary(BaseModel):
    """Invitation item in the stats response."""

    id: int
    name: str
    email: str
    code: str
    invited_by: str
    created_at: datetime
    used_at: datetime | None
    expires_at: datetime | None


class GetInvitationStatsResponse(BaseModel):
    """Invitation counts plus the most recent invitations."""

    total: int
    pending: int
    used: int
    recent: list[InvitationSummary]


class GetInvitationStatsUseCase(BaseUseCase):
    """Use case for the admin invitation overview.

    ``pending`` counts every invitation with null ``used_at``, including
    expired ones.
    """

    def __init__(
        self, admin_guard: AdminGuard, invitation_service: InvitationService
    ) -> None:
        self.admin_guard = admin_guard
        self.invitation_service = invitation_service

    async def execute(
        self, request: GetInvitationStatsRequest
    ) -> GetInvitationStatsResponse:
        """Collect invitation statistics.

        Raises:
            AdminAccessRequiredError: If the caller is not an admin
        """
        self.admin_guard.require_admin(request.actor)

        with logfire.span("get_invitation_stats.execute"):
            stats = await self.invitation_service.get_stats()
            return GetInvitationStatsResponse(
                total=stats.total,
                pending=stats.pending,
                used=stats.used,
                recent=[
                    InvitationSummary(
                        id=inv.id or 0,
                        name=inv.name,
                        email=inv.email,
                        code=inv.code.root,
                        invited_by=inv.invited_by,
                        created_at=inv.created_at,
                        used_at=inv.used_at,
                        expires_at=inv.expires_at,
                    )
                    for inv in stats.recent
                ],
            )
