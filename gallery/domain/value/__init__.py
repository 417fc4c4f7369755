"""Domain value objects for the gallery."""

from gallery.domain.value.identifiers import (
    ArtistId,
    ArtworkId,
    IdentityUserId,
    InvitationId,
)
from gallery.domain.value.types import (
    ApprovalStatus,
    CurrentUser,
    IdentityAccount,
    InvitationCode,
    InvitationStatus,
    Role,
    Slug,
)

__all__ = [
    # Identifiers
    "ArtistId",
    "ArtworkId",
    "InvitationId",
    "IdentityUserId",
    # Types
    "ApprovalStatus",
    "CurrentUser",
    "IdentityAccount",
    "InvitationCode",
    "InvitationStatus",
    "Role",
    "Slug",
]
