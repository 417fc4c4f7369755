"""Artist invitation domain service."""

import secrets
import string
from datetime import datetime, timedelta

import logfire

from gallery.config import InvitationSettings
from gallery.domain.error import (
    CodeAllocationError,
    ConflictError,
    InvitationAlreadyUsedError,
    InvitationExpiredError,
    InvalidInvitationCodeError,
    NotFoundError,
)
from gallery.domain.model.common import utc_now
from gallery.domain.model.invitation import ArtistInvitation
from gallery.domain.repository import ArtistRepository, InvitationRepository
from gallery.domain.value import IdentityUserId, InvitationCode, InvitationId
from gallery.domain.value.common import ValueObject

from .base import Service

CODE_ALPHABET = string.ascii_uppercase + string.digits


class InvitationStats(ValueObject):
    """Aggregate invitation counts plus the newest invitations."""

    total: int
    pending: int
    used: int
    recent: list[ArtistInvitation]


class InvitationService(Service):
    """Domain service for the invitation lifecycle.

    pending -> redeemed (``used_at`` set) and pending -> expired (clock
    passes ``expires_at``) are the only transitions; both are terminal.
    """

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        artist_repository: ArtistRepository,
        settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            artist_repository: Artist repository, for the existing-artist check
            settings: Invitation settings
        """
        self.invitation_repository = invitation_repository
        self.artist_repository = artist_repository
        self.settings = settings

    def generate_code(self) -> InvitationCode:
        """Draw a random code: prefix plus uppercase alphanumerics."""
        body = "".join(
            secrets.choice(CODE_ALPHABET) for _ in range(self.settings.code_length)
        )
        return InvitationCode(self.settings.code_prefix + body)

    async def allocate_code(self) -> InvitationCode:
        """Draw codes until one is unused.

        Returns:
            A code no stored invitation carries

        Raises:
            CodeAllocationError: If every attempt collided
        """
        with logfire.span("invitation_service.allocate_code"):
            for attempt in range(1, self.settings.max_code_attempts + 1):
                code = self.generate_code()
                existing = await self.invitation_repository.find_by_code(code)
                if existing is None:
                    return code
                logfire.warn(
                    "Invitation code collision", attempt=attempt, code=code.masked()
                )

            logfire.error(
                "Could not allocate invitation code",
                attempts=self.settings.max_code_attempts,
            )
            raise CodeAllocationError(self.settings.max_code_attempts)

    async def ensure_can_invite(self, email: str) -> None:
        """Check that a new invitation may be issued for an email.

        Args:
            email: Invitee email

        Raises:
            ConflictError: If an artist already uses the email, or an
                invitation for it has not been redeemed
        """
        with logfire.span("invitation_service.ensure_can_invite", email=email):
            if await self.artist_repository.find_by_email(email) is not None:
                logfire.warn("Artist already exists for invitation email", email=email)
                raise ConflictError(f"Artist with email {email} already exists")

            if await self.invitation_repository.exists_unused_for_email(email):
                logfire.warn("Pending invitation already exists", email=email)
                raise ConflictError(
                    f"Artist with email {email} already has a pending invitation"
                )

    async def create_invitation(
        self,
        *,
        name: str,
        email: str,
        code: InvitationCode,
        invited_by: str,
        specialty: str | None = None,
        message: str | None = None,
        pre_approved: bool = False,
        stack_user_id: IdentityUserId | None = None,
        now: datetime | None = None,
    ) -> ArtistInvitation:
        """Persist a new pending invitation.

        Args:
            name: Invitee name
            email: Invitee email
            code: Allocated invitation code
            invited_by: Display name of the issuing admin
            specialty: Optional artistic specialty
            message: Optional personal message
            pre_approved: Whether the artist's submissions skip review
            stack_user_id: Pre-provisioned identity account, if any
            now: Creation time (defaults to current UTC time)

        Returns:
            The stored invitation
        """
        with logfire.span(
            "invitation_service.create_invitation", email=email, code=code.masked()
        ):
            created_at = now or utc_now()
            invitation = ArtistInvitation(
                email=email,
                name=name,
                specialty=specialty,
                message=message,
                code=code,
                invited_by=invited_by,
                stack_user_id=stack_user_id,
                pre_approved=pre_approved,
                created_at=created_at,
                expires_at=created_at + timedelta(days=self.settings.expiry_days),
            )
            saved = await self.invitation_repository.create(invitation)
            logfire.info(
                "Invitation created",
                invitation_id=saved.id,
                email=email,
                has_account=stack_user_id is not None,
            )
            return saved

    async def get_by_code(self, code: InvitationCode) -> ArtistInvitation:
        """Get an invitation by code.

        Raises:
            InvalidInvitationCodeError: If no invitation carries the code
        """
        with logfire.span("invitation_service.get_by_code", code=code.masked()):
            invitation = await self.invitation_repository.find_by_code(code)
            if invitation is None:
                logfire.warn("Invitation not found", code=code.masked())
                raise InvalidInvitationCodeError(code.masked())
            return invitation

    @staticmethod
    def ensure_redeemable(invitation: ArtistInvitation, now: datetime) -> None:
        """Check that an invitation is neither used nor expired.

        Raises:
            InvitationAlreadyUsedError: If ``used_at`` is set
            InvitationExpiredError: If ``now`` is past ``expires_at``
        """
        if invitation.is_used():
            raise InvitationAlreadyUsedError()
        if invitation.is_expired(now):
            raise InvitationExpiredError()

    async def mark_used(
        self, invitation: ArtistInvitation, now: datetime
    ) -> ArtistInvitation:
        """Set ``used_at`` on a pending invitation.

        The stored row decides, so a stale ``invitation`` loaded before a
        concurrent redemption is still rejected.

        Raises:
            InvitationAlreadyUsedError: If it was already redeemed
            NotFoundError: If the invitation no longer exists
        """
        with logfire.span("invitation_service.mark_used", invitation_id=invitation.id):
            if invitation.is_used():
                raise InvitationAlreadyUsedError()
            saved = await self.invitation_repository.mark_used(invitation.id, now)
            if saved is None:
                if await self.invitation_repository.find_by_id(invitation.id) is None:
                    raise NotFoundError("Invitation", str(invitation.id))
                logfire.warn("Invitation redeemed concurrently", invitation_id=invitation.id)
                raise InvitationAlreadyUsedError()
            logfire.info("Invitation redeemed", invitation_id=invitation.id)
            return saved

    async def delete_invitation(self, invitation_id: InvitationId) -> None:
        """Delete an invitation.

        Raises:
            NotFoundError: If no invitation has this id
        """
        with logfire.span(
            "invitation_service.delete_invitation", invitation_id=invitation_id
        ):
            deleted = await self.invitation_repository.delete(invitation_id)
            if not deleted:
                raise NotFoundError("Invitation", str(invitation_id))
            logfire.info("Invitation deleted", invitation_id=invitation_id)

    async def get_stats(self) -> InvitationStats:
        """Count invitations and fetch the most recent ones."""
        with logfire.span("invitation_service.get_stats"):
            pending, used = await self.invitation_repository.count_by_usage()
            recent = await self.invitation_repository.find_recent(
                self.settings.recent_limit
            )
            return InvitationStats(
                total=pending + used, pending=pending, used=used, recent=recent
            )

    def setup_url(self, base_url: str, code: InvitationCode) -> str:
        """Build the account setup link embedded in the invitation email."""
        return f"{base_url.rstrip('/')}{self.settings.setup_path}?code={code.root}"
