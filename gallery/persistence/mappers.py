"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from gallery.domain.model import Artist, ArtistInvitation, Artwork
from gallery.domain.value import (
    ApprovalStatus,
    ArtistId,
    ArtworkId,
    IdentityUserId,
    InvitationCode,
    InvitationId,
    Slug,
)


def row_to_artist(row: Dict[str, Any]) -> Artist:
    """Convert database row to Artist domain model.

    Args:
        row: Database row as dict

    Returns:
        Artist domain model
    """
    return Artist(
        id=ArtistId(row["id"]),
        name=row["name"],
        slug=Slug(row["slug"]),
        email=row.get("email"),
        bio=row.get("bio"),
        specialty=row.get("specialty"),
        exhibitions=list(row.get("exhibitions") or []),
        profile_image=row.get("profile_image"),
        pre_approved=row["pre_approved"],
        is_visible=row["is_visible"],
        is_hidden=row["is_hidden"],
        featured=row["featured"],
        created_at=row["created_at"],
    )


def artist_to_dict(artist: Artist) -> Dict[str, Any]:
    """Convert Artist domain model to database dict.

    The id is left out; it is assigned by the database on insert.
    """
    data = artist.model_dump(exclude={"id"})
    data["slug"] = artist.slug.root
    return data


def row_to_artwork(row: Dict[str, Any]) -> Artwork:
    """Convert database row to Artwork domain model.

    Args:
        row: Database row as dict

    Returns:
        Artwork domain model
    """
    return Artwork(
        id=ArtworkId(row["id"]),
        artist_id=ArtistId(row["artist_id"]),
        title=row["title"],
        slug=Slug(row["slug"]),
        year=row["year"],
        medium=row["medium"],
        dimensions=row["dimensions"],
        description=row["description"],
        price=row["price"],
        status=row["status"],
        original_image=row.get("original_image"),
        approval_status=ApprovalStatus(row["approval_status"]),
        rejection_reason=row.get("rejection_reason"),
        is_visible=row["is_visible"],
        artist_display_order=row["artist_display_order"],
        global_display_order=row["global_display_order"],
        created_at=row["created_at"],
    )


def artwork_to_dict(artwork: Artwork) -> Dict[str, Any]:
    """Convert Artwork domain model to database dict."""
    data = artwork.model_dump(exclude={"id"})
    data["slug"] = artwork.slug.root
    data["approval_status"] = artwork.approval_status.value
    return data


def row_to_invitation(row: Dict[str, Any]) -> ArtistInvitation:
    """Convert database row to ArtistInvitation domain model.

    Args:
        row: Database row as dict

    Returns:
        ArtistInvitation domain model
    """
    stack_user_id = row.get("stack_user_id")
    return ArtistInvitation(
        id=InvitationId(row["id"]),
        email=row["email"],
        name=row["name"],
        specialty=row.get("specialty"),
        message=row.get("message"),
        code=InvitationCode(row["code"]),
        invited_by=row["invited_by"],
        stack_user_id=IdentityUserId(stack_user_id) if stack_user_id else None,
        pre_approved=row["pre_approved"],
        created_at=row["created_at"],
        used_at=row.get("used_at"),
        expires_at=row.get("expires_at"),
    )


def invitation_to_dict(invitation: ArtistInvitation) -> Dict[str, Any]:
    """Convert ArtistInvitation domain model to database dict."""
    data = invitation.model_dump(exclude={"id"})
    data["code"] = invitation.code.root
    return data
