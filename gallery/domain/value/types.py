"""Domain value objects for the gallery.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import Any

from pydantic import field_validator

from gallery.domain.value.common import RootValueObject, ValueObject
from gallery.domain.value.identifiers import ArtistId, IdentityUserId


class Role(str, Enum):
    """Role stored in identity provider server metadata."""

    ARTIST = "artist"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


class ApprovalStatus(str, Enum):
    """Review state of an artwork submission."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class InvitationStatus(str, Enum):
    """Derived state of an invitation.

    Never stored; computed from ``used_at`` and ``expires_at``.
    """

    PENDING = "pending"
    REDEEMED = "redeemed"
    EXPIRED = "expired"


class Slug(RootValueObject[str]):
    """URL-friendly identifier derived from a name or title.

    Lowercase alphanumerics separated by single hyphens, 1-100 characters.
    Examples: 'jane-doe', 'sunset-over-the-bay-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v) or len(v) > 100:
            raise ValueError(
                "Slug must be 1-100 characters, lowercase alphanumeric with single hyphens"
            )
        return v


class InvitationCode(RootValueObject[str]):
    """Single-use invitation credential.

    A fixed prefix followed by uppercase alphanumerics, e.g. 'INVITE-7QX2M0ZA'.
    """

    @field_validator("root")
    @classmethod
    def validate_code(cls, v: str) -> str:
        """Validate code is non-empty and within column limits."""
        if not v or len(v) > 50:
            raise ValueError("Invitation code must be 1-50 characters")
        return v

    def masked(self) -> str:
        """Return a truncated form safe for logs."""
        return self.root[:8] + "..."


class CurrentUser(ValueObject):
    """Authenticated principal as reported by the identity provider.

    ``artist_id`` is the weak back-reference stored in server metadata
    under ``artistID``; it is absent for admins and not-yet-linked artists.
    """

    user_id: IdentityUserId
    email: str | None = None
    display_name: str | None = None
    role: str = Role.ARTIST.value
    artist_id: ArtistId | None = None


class IdentityAccount(ValueObject):
    """Account record returned by the identity provider.

    Generic structure for user info returned by any identity backend.
    """

    id: IdentityUserId
    primary_email: str | None = None
    display_name: str | None = None
    server_metadata: dict[str, Any] = {}
    client_metadata: dict[str, Any] = {}
