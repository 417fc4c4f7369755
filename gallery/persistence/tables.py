"""SQLAlchemy table definitions for the gallery.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

metadata = MetaData()

# ============================================================================
# ARTISTS TABLE
# ============================================================================
artists_table = Table(
    "artists",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("specialty", String(100), nullable=True),
    Column("exhibitions", JSONB, nullable=False, server_default=text("'[]'::jsonb")),
    Column("profile_image", Text, nullable=True),
    Column("pre_approved", Boolean, nullable=False, server_default="false"),
    Column("is_visible", Boolean, nullable=False, server_default="true"),
    Column("is_hidden", Boolean, nullable=False, server_default="false"),
    Column("featured", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_artists_email", artists_table.c.email)

# ============================================================================
# ARTWORKS TABLE
# ============================================================================
artworks_table = Table(
    "artworks",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column(
        "artist_id",
        Integer,
        ForeignKey("artists.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(200), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),
    Column("year", String(4), nullable=False),
    Column("medium", String(100), nullable=False),
    Column("dimensions", String(100), nullable=False),
    Column("description", Text, nullable=False),
    Column("price", Numeric(10, 2), nullable=False),
    Column("status", String(50), nullable=False, server_default="Available"),
    Column("original_image", Text, nullable=True),
    Column("approval_status", String(20), nullable=False, server_default="approved"),
    Column("rejection_reason", Text, nullable=True),
    Column("is_visible", Boolean, nullable=False, server_default="true"),
    Column("artist_display_order", Integer, nullable=False, server_default="0"),
    Column("global_display_order", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_artworks_artist_id", artworks_table.c.artist_id)
Index("idx_artworks_created_at", artworks_table.c.created_at, artworks_table.c.id)
Index("idx_artworks_approval_status", artworks_table.c.approval_status)

# ============================================================================
# ARTIST INVITATIONS TABLE
# ============================================================================
artist_invitations_table = Table(
    "artist_invitations",
    metadata,
    Column("id", Integer, Identity(), primary_key=True),
    Column("email", String(255), nullable=False),
    Column("name", String(100), nullable=False),
    Column("specialty", String(100), nullable=True),
    Column("message", Text, nullable=True),
    Column("code", String(50), nullable=False, unique=True),
    Column("invited_by", String(255), nullable=False),
    Column("stack_user_id", String(255), nullable=True),
    Column("pre_approved", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "expires_at",
        TIMESTAMP(timezone=True),
        nullable=True,
        server_default=text("NOW() + INTERVAL '7 days'"),
    ),
)

Index("idx_artist_invitations_email", artist_invitations_table.c.email)
Index("idx_artist_invitations_used_at", artist_invitations_table.c.used_at)
