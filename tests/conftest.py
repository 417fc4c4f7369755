"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from gallery.domain.model import Artist, ArtistInvitation, Artwork
from gallery.domain.service.slugs import slugify
from gallery.domain.value import (
    ArtistId,
    CurrentUser,
    IdentityUserId,
    InvitationCode,
    Role,
    Slug,
)

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Fixed timestamp ``minutes`` after T0."""
    return T0 + timedelta(minutes=minutes)


def admin_user(display_name: str = "Admin User") -> CurrentUser:
    """Principal with the admin role."""
    return CurrentUser(
        user_id=IdentityUserId("user_admin"),
        email="admin@example.com",
        display_name=display_name,
        role=Role.ADMIN.value,
    )


def artist_user(
    email: str = "artist@example.com", artist_id: int | None = None
) -> CurrentUser:
    """Principal with the artist role, optionally linked to an artist."""
    return CurrentUser(
        user_id=IdentityUserId(f"user_{slugify(email)}"),
        email=email,
        role=Role.ARTIST.value,
        artist_id=ArtistId(artist_id) if artist_id is not None else None,
    )


def make_artist(
    name: str = "Jane Doe",
    email: str | None = "jane@example.com",
    pre_approved: bool = False,
) -> Artist:
    """Unsaved artist with a slug derived from its name."""
    return Artist(
        name=name,
        slug=Slug(slugify(name)),
        email=email,
        pre_approved=pre_approved,
    )


def make_artwork(
    artist_id: int,
    title: str,
    created_at: datetime,
    is_visible: bool = True,
    artist_display_order: int = 0,
    global_display_order: int = 0,
) -> Artwork:
    """Unsaved approved artwork with a slug derived from its title."""
    return Artwork(
        artist_id=ArtistId(artist_id),
        title=title,
        slug=Slug(slugify(title)),
        year="2024",
        medium="Oil on canvas",
        dimensions="24 x 36 in",
        description="A painting used in tests.",
        price=Decimal("450.00"),
        is_visible=is_visible,
        artist_display_order=artist_display_order,
        global_display_order=global_display_order,
        created_at=created_at,
    )


def make_invitation(
    email: str = "invitee@example.com",
    code: str = "INVITE-TEST0001",
    created_at: datetime | None = None,
    used_at: datetime | None = None,
    name: str = "Invited Artist",
) -> ArtistInvitation:
    """Unsaved invitation expiring seven days after ``created_at``."""
    created = created_at or datetime.now(timezone.utc)
    return ArtistInvitation(
        email=email,
        name=name,
        code=InvitationCode(code),
        invited_by="Admin User",
        created_at=created,
        expires_at=created + timedelta(days=7),
        used_at=used_at,
    )
