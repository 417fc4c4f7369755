"""Validate invitation use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from gallery.domain.error import (
    InvalidInvitationCodeError,
    InvitationAlreadyUsedError,
    InvitationExpiredError,
)
from gallery.domain.model.common import utc_now
from gallery.domain.service import InvitationService
from gallery.domain.value import InvitationCode

MAX_CODE_LENGTH = 50


class ValidateInvitationRequest(BaseModel):
    """Validate invitation request."""

    code: str


class ValidateInvitationResponse(BaseModel):
    """Validate invitation response."""

    valid: bool
    name: str | None = None
    email: str | None = None
    code: str | None = None
    specialty: str | None = None
    created_at: datetime | None = None
    expires_at: datetime | None = None
    error: str | None = None


class ValidateInvitationUseCase:
    """Use case for checking an invitation code.

    This lets the setup page show the invitee's details before sign-up.
    Public: no caller check.
    """

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize validate invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(
        self, request: ValidateInvitationRequest
    ) -> ValidateInvitationResponse:
        """Validate an invitation code.

        Args:
            request: Validation request with code

        Returns:
            Validation response with invitation details or error
        """
        if not request.code.strip():
            return ValidateInvitationResponse(
                valid=False, error="Invitation code is required"
            )

        if len(request.code.strip()) > MAX_CODE_LENGTH:
            return ValidateInvitationResponse(
                valid=False, error="Invalid invitation code"
            )

        code = InvitationCode(request.code.strip())
        with logfire.span("validate_invitation.execute", code=code.masked()):
            try:
                invitation = await self.invitation_service.get_by_code(code)
                self.invitation_service.ensure_redeemable(invitation, utc_now())
            except (
                InvalidInvitationCodeError,
                InvitationAlreadyUsedError,
                InvitationExpiredError,
            ) as e:
                logfire.info("Invitation not valid", code=code.masked(), reason=str(e))
                return ValidateInvitationResponse(valid=False, error=str(e))

            return ValidateInvitationResponse(
                valid=True,
                name=invitation.name,
                email=invitation.email,
                code=invitation.code.root,
                specialty=invitation.specialty,
                created_at=invitation.created_at,
                expires_at=invitation.expires_at,
            )
