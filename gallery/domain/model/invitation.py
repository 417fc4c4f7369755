"""Artist invitation entity.

Invitations gate artist onboarding. Each one is bound to a single email
address and carries a single-use code that expires after a fixed window.
"""

from datetime import datetime

from pydantic import Field

from gallery.domain.model.common import DomainModel, utc_now
from gallery.domain.value import (
    IdentityUserId,
    InvitationCode,
    InvitationId,
    InvitationStatus,
)


class ArtistInvitation(DomainModel):
    """Artist invitation entity.

    Business rules:
    - ``used_at`` is null while pending and set exactly once on redemption
    - Invalid once ``now > expires_at`` regardless of ``used_at``
    - State is derived from ``used_at``/``expires_at``, never stored
    """

    id: InvitationId | None = None
    email: str
    name: str
    specialty: str | None = None
    message: str | None = None
    code: InvitationCode
    invited_by: str  # Display name of the issuing admin
    stack_user_id: IdentityUserId | None = None  # Pre-provisioned account, if any
    pre_approved: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    used_at: datetime | None = None
    expires_at: datetime | None = None

    def is_used(self) -> bool:
        """Whether the invitation has been redeemed."""
        return self.used_at is not None

    def is_expired(self, now: datetime) -> bool:
        """Whether the expiry has passed at ``now``."""
        return self.expires_at is not None and now > self.expires_at

    def status_at(self, now: datetime) -> InvitationStatus:
        """Derive the lifecycle state at ``now``.

        Redemption wins over expiry so a redeemed invitation stays redeemed.
        """
        if self.is_used():
            return InvitationStatus.REDEEMED
        if self.is_expired(now):
            return InvitationStatus.EXPIRED
        return InvitationStatus.PENDING
