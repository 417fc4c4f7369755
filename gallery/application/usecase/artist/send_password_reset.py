"""Send artist password reset use case."""

import logfire
from pydantic import BaseModel, EmailStr

from gallery.adapter.error import IdentityProviderError
from gallery.application.usecase.base import BaseUseCase
from gallery.config import Settings
from gallery.domain.service import AdminGuard, IdentityService
from gallery.domain.value import CurrentUser

RESET_PATH = "/handler/reset-password"


class SendPasswordResetRequest(BaseModel):
    """Request a password reset email for an artist account."""

    actor: CurrentUser | None = None
    email: EmailStr


class SendPasswordResetResponse(BaseModel):
    """Password reset outcome."""

    success: bool
    message: str | None = None
    error: str | None = None


class SendPasswordResetUseCase(BaseUseCase):
    """Use case for an admin triggering an artist's password reset."""

    def __init__(
        self,
        admin_guard: AdminGuard,
        identity_service: IdentityService,
        settings: Settings,
    ) -> None:
        self.admin_guard = admin_guard
        self.identity_service = identity_service
        self.settings = settings

    async def execute(self, request: SendPasswordResetRequest) -> SendPasswordResetResponse:
        """Ask the identity provider to send the reset email.

        Raises:
            AdminAccessRequiredError: If the caller is not an admin
        """
        self.admin_guard.require_admin(request.actor)
        email = str(request.email)

        with logfire.span("send_password_reset.execute", email=email):
            callback_url = f"{self.settings.api.frontend_url}{RESET_PATH}"
            try:
                await self.identity_service.send_password_reset(email, callback_url)
            except IdentityProviderError as e:
                logfire.error("Password reset failed", email=email, error=str(e))
                return SendPasswordResetResponse(
                    success=False, error=f"Failed to send password reset: {e}"
                )

            return SendPasswordResetResponse(
                success=True, message=f"Password reset email sent to {email}"
            )
