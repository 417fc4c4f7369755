"""initial_schema

Create the gallery schema:
- Artists
- Artworks (with per-artist and global display order)
- Artist invitations (single-use codes with expiry)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-18 10:12:44.518302

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "artists",
        sa.Column("id", sa.Integer(), sa.Identity(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("specialty", sa.String(100), nullable=True),
        sa.Column(
            "exhibitions",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("profile_image", sa.Text(), nullable=True),
        sa.Column("pre_approved", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_visible", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("is_hidden", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.UniqueConstraint("slug", name="uq_artists_slug"),
    )
    op.create_index("idx_artists_email", "artists", ["email"])

    op.create_table(
        "artworks",
        sa.Column("id", sa.Integer(), sa.Identity(), primary_key=True),
        sa.Column(
            "artist_id",
            sa.Integer(),
            sa.ForeignKey("artists.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("year", sa.String(4), nullable=False),
        sa.Column("medium", sa.String(100), nullable=False),
        sa.Column("dimensions", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default="Available"),
        sa.Column("original_image", sa.Text(), nullable=True),
        sa.Column(
            "approval_status", sa.String(20), nullable=False, server_default="approved"
        ),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        sa.Column("is_visible", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "artist_display_order", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column(
            "global_display_order", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.UniqueConstraint("slug", name="uq_artworks_slug"),
        sa.CheckConstraint(
            "approval_status IN ('pending', 'approved', 'rejected')",
            name="ck_artworks_approval_status",
        ),
    )
    op.create_index("idx_artworks_artist_id", "artworks", ["artist_id"])
    op.create_index("idx_artworks_created_at", "artworks", ["created_at", "id"])
    op.create_index("idx_artworks_approval_status", "artworks", ["approval_status"])

    op.create_table(
        "artist_invitations",
        sa.Column("id", sa.Integer(), sa.Identity(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("specialty", sa.String(100), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("invited_by", sa.String(255), nullable=False),
        sa.Column("stack_user_id", sa.String(255), nullable=True),
        sa.Column("pre_approved", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("used_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "expires_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=True,
            server_default=sa.text("NOW() + INTERVAL '7 days'"),
        ),
        sa.UniqueConstraint("code", name="uq_artist_invitations_code"),
    )
    op.create_index(
        "idx_artist_invitations_email", "artist_invitations", ["email"]
    )
    op.create_index(
        "idx_artist_invitations_used_at", "artist_invitations", ["used_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_artist_invitations_used_at", table_name="artist_invitations")
    op.drop_index("idx_artist_invitations_email", table_name="artist_invitations")
    op.drop_table("artist_invitations")

    op.drop_index("idx_artworks_approval_status", table_name="artworks")
    op.drop_index("idx_artworks_created_at", table_name="artworks")
    op.drop_index("idx_artworks_artist_id", table_name="artworks")
    op.drop_table("artworks")

    op.drop_index("idx_artists_email", table_name="artists")
    op.drop_table("artists")
