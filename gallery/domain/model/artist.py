"""Artist entity.

Artists are created directly by an admin or by redeeming an invitation.
The link between a login and an artist lives only in the identity
provider's server metadata (``artistID``), never in this table.
"""

from datetime import datetime

from pydantic import Field

from gallery.domain.model.common import DomainModel, utc_now
from gallery.domain.value import ArtistId, Slug


class Artist(DomainModel):
    """Artist entity."""

    id: ArtistId | None = None
    name: str
    slug: Slug
    email: str | None = None  # Invitation email for invited artists
    bio: str | None = None
    specialty: str | None = None
    exhibitions: list[str] = Field(default_factory=list)
    profile_image: str | None = None
    pre_approved: bool = False  # Submissions skip review when set
    is_visible: bool = True
    is_hidden: bool = False
    featured: bool = False
    created_at: datetime = Field(default_factory=utc_now)
