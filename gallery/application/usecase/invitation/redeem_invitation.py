"""Redeem artist invitation use case."""

import logfire
from pydantic import BaseModel, Field

from gallery.adapter.error import IdentityProviderError
from gallery.application.usecase.base import BaseUseCase
from gallery.domain.error import (
    InvalidInvitationCodeError,
    InvitationEmailMismatchError,
)
from gallery.domain.model.common import utc_now
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import (
    AdminGuard,
    ArtistService,
    IdentityService,
    InvitationService,
    NotificationService,
)
from gallery.domain.value import CurrentUser, InvitationCode


class RedeemInvitationRequest(BaseModel):
    """Request to create an artist profile from an invitation."""

    actor: CurrentUser | None = None
    code: str = Field(min_length=1, max_length=50)
    bio: str = Field(min_length=10, max_length=2000)
    specialty: str = Field(min_length=2, max_length=100)
    exhibitions: str | None = Field(default=None, max_length=5000)
    profile_image: str | None = None


class RedeemInvitationResponse(BaseModel):
    """Redemption outcome."""

    artist_id: int
    artist_slug: str
    user_id: str
    account_linked: bool
    welcome_email_sent: bool


class RedeemInvitationUseCase(BaseUseCase):
    """Use case for turning an invitation into an artist.

    The artist insert and the ``used_at`` update share one transaction,
    so a failure leaves the invitation pending and no artist row behind.
    Linking the login and the welcome email happen afterwards and only
    log on failure.
    """

    def __init__(
        self,
        admin_guard: AdminGuard,
        invitation_service: InvitationService,
        artist_service: ArtistService,
        identity_service: IdentityService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.admin_guard = admin_guard
        self.invitation_service = invitation_service
        self.artist_service = artist_service
        self.identity_service = identity_service
        self.notification_service = notification_service
        self.unit_of_work = unit_of_work

    async def execute(self, request: RedeemInvitationRequest) -> RedeemInvitationResponse:
        """Redeem an invitation for the signed-in caller.

        Checks run in order: code exists, not used, not expired, caller
        email equals invited email (case-sensitive).

        Raises:
            NotAuthenticatedError: If there is no caller
            InvalidInvitationCodeError: If the code is unknown
            InvitationAlreadyUsedError: If the code was already redeemed
            InvitationExpiredError: If the invitation has expired
            InvitationEmailMismatchError: If the caller's email differs
        """
        actor = self.admin_guard.require_authenticated(request.actor)
        if not request.code.strip():
            raise InvalidInvitationCodeError("")
        code = InvitationCode(request.code.strip())

        with logfire.span(
            "redeem_invitation.execute", code=code.masked(), user_id=actor.user_id
        ):
            now = utc_now()
            invitation = await self.invitation_service.get_by_code(code)
            self.invitation_service.ensure_redeemable(invitation, now)

            if actor.email != invitation.email:
                logfire.warn(
                    "Invitation email mismatch",
                    invitation_id=invitation.id,
                    user_id=actor.user_id,
                )
                raise InvitationEmailMismatchError()

            async with self.unit_of_work.transaction():
                artist = await self.artist_service.create_from_invitation(
                    invitation,
                    bio=request.bio.strip(),
                    specialty=request.specialty.strip(),
                    exhibitions=request.exhibitions,
                    profile_image=request.profile_image,
                )
                await self.invitation_service.mark_used(invitation, now)

            account_linked = True
            try:
                await self.identity_service.link_artist(actor.user_id, artist.id)
            except IdentityProviderError as e:
                account_linked = False
                logfire.error(
                    "Failed to link artist to account",
                    artist_id=artist.id,
                    user_id=actor.user_id,
                    error=str(e),
                )

            welcome = await self.notification_service.send_artist_welcome(artist)

            logfire.info(
                "Invitation redeemed",
                invitation_id=invitation.id,
                artist_id=artist.id,
                account_linked=account_linked,
            )
            return RedeemInvitationResponse(
                artist_id=artist.id,
                artist_slug=str(artist.slug),
                user_id=actor.user_id,
                account_linked=account_linked,
                welcome_email_sent=welcome.success,
            )
