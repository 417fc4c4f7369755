"""Issue artist invitation use case."""

import logfire
from pydantic import BaseModel, EmailStr, Field

from gallery.adapter.error import IdentityProviderError
from gallery.application.usecase.base import BaseUseCase
from gallery.config import Settings
from gallery.domain.service import (
    AdminGuard,
    IdentityService,
    InvitationService,
    NotificationService,
)
from gallery.domain.value import CurrentUser, IdentityUserId, Role

DEFAULT_ADMIN_NAME = "Gallery Admin"


class IssueInvitationRequest(BaseModel):
    """Request to invite an artist."""

    actor: CurrentUser | None = None
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    specialty: str | None = None
    message: str | None = None
    pre_approved: bool = False


class IssueInvitationResponse(BaseModel):
    """Issuance outcome.

    ``success`` is False when the invitation was stored but its email could
    not be sent; ``code`` is still returned in that case.
    """

    success: bool
    code: str | None = None
    invitation_id: int | None = None
    stack_user_id: str | None = None
    message: str | None = None
    error: str | None = None


class IssueInvitationUseCase(BaseUseCase):
    """Use case for inviting an artist by email."""

    def __init__(
        self,
        admin_guard: AdminGuard,
        invitation_service: InvitationService,
        identity_service: IdentityService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            admin_guard: Admin guard
            invitation_service: Invitation domain service
            identity_service: Identity domain service
            notification_service: Notification domain service
            settings: Application settings
        """
        self.admin_guard = admin_guard
        self.invitation_service = invitation_service
        self.identity_service = identity_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: IssueInvitationRequest) -> IssueInvitationResponse:
        """Issue an invitation and email it.

        Args:
            request: Invitation request

        Returns:
            Response with the invitation code

        Raises:
            AdminAccessRequiredError: If the caller is not an admin
            ConflictError: If the email belongs to an artist or has an
                unredeemed invitation
            CodeAllocationError: If no unused code could be drawn
        """
        actor = self.admin_guard.require_admin(request.actor)
        email = str(request.email)
        name = request.name.strip()

        with logfire.span("issue_invitation.execute", email=email):
            await self.invitation_service.ensure_can_invite(email)

            code = await self.invitation_service.allocate_code()
            admin_name = actor.display_name or actor.email or DEFAULT_ADMIN_NAME

            stack_user_id: IdentityUserId | None = None
            try:
                stack_user_id = await self.identity_service.ensure_account(
                    email, name, {"role": Role.ARTIST.value}
                )
            except IdentityProviderError as e:
                # Invitation still goes out; the account is created at setup
                logfire.warn(
                    "Identity account provisioning failed", email=email, error=str(e)
                )

            invitation = await self.invitation_service.create_invitation(
                name=name,
                email=email,
                code=code,
                invited_by=admin_name,
                specialty=request.specialty or None,
                message=request.message or None,
                pre_approved=request.pre_approved,
                stack_user_id=stack_user_id,
            )

            setup_url = self.invitation_service.setup_url(
                self.settings.api.frontend_url, code
            )
            result = await self.notification_service.send_artist_invitation(
                invitation, admin_name, setup_url
            )

            if not result.success:
                logfire.error(
                    "Failed to send invitation email",
                    invitation_id=invitation.id,
                    error=result.error,
                )
                return IssueInvitationResponse(
                    success=False,
                    code=code.root,
                    invitation_id=invitation.id,
                    stack_user_id=stack_user_id,
                    error=f"Invitation created but email failed to send: {result.error}",
                )

            logfire.info(
                "Artist invitation sent", invitation_id=invitation.id, code=code.masked()
            )
            return IssueInvitationResponse(
                success=True,
                code=code.root,
                invitation_id=invitation.id,
                stack_user_id=stack_user_id,
                message="Invitation sent successfully",
            )
