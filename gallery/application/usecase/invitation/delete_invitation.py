"""Delete invitation use case."""

import logfire
from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import AdminGuard, InvitationService
from gallery.domain.value import CurrentUser, InvitationId


class DeleteInvitationRequest(BaseModel):
    """Request to delete an invitation."""

    actor: CurrentUser | None = None
    invitation_id: int


class DeleteInvitationUseCase(BaseUseCase):
    """Use case for removing an invitation."""

    def __init__(
        self, admin_guard: AdminGuard, invitation_service: InvitationService
    ) -> None:
        self.admin_guard = admin_guard
        self.invitation_service = invitation_service

    async def execute(self, request: DeleteInvitationRequest) -> None:
        """Delete the invitation.

        Raises:
            AdminAccessRequiredError: If the caller is not an admin
            NotFoundError: If the invitation does not exist
        """
        self.admin_guard.require_admin(request.actor)

        with logfire.span(
            "delete_invitation.execute", invitation_id=request.invitation_id
        ):
            await self.invitation_service.delete_invitation(
                InvitationId(request.invitation_id)
            )
