"""Artwork entity."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from gallery.domain.model.common import DomainModel, utc_now
from gallery.domain.value import ApprovalStatus, ArtistId, ArtworkId, Slug


class Artwork(DomainModel):
    """Artwork entity.

    Business rules:
    - Every artwork has exactly one owning artist
    - ``created_at`` is set once at insertion and never changes
    - Display order fields default to 0 until ranked
    - Hidden artworks are skipped by display order recomputation
    """

    id: ArtworkId | None = None  # Assigned by the store on insert
    artist_id: ArtistId
    title: str
    slug: Slug
    year: str
    medium: str
    dimensions: str
    description: str
    price: Decimal
    status: str = "Available"  # Sale status shown to visitors
    original_image: str | None = None
    approval_status: ApprovalStatus = ApprovalStatus.APPROVED
    rejection_reason: str | None = None
    is_visible: bool = True
    artist_display_order: int = 0
    global_display_order: int = 0
    created_at: datetime = Field(default_factory=utc_now)
