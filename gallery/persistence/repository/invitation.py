"""PostgreSQL implementation of ArtistInvitation repository."""

from datetime import datetime

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.model import ArtistInvitation
from gallery.domain.repository import InvitationRepository
from gallery.domain.value import InvitationCode, InvitationId
from gallery.persistence.mappers import invitation_to_dict, row_to_invitation
from gallery.persistence.tables import artist_invitations_table

_t = artist_invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> ArtistInvitation | None:
        """Find an invitation by ID."""
        stmt = select(_t).where(_t.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_code(self, code: InvitationCode) -> ArtistInvitation | None:
        """Find an invitation by its code."""
        stmt = select(_t).where(_t.c.code == code.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def exists_unused_for_email(self, email: str) -> bool:
        """Check if an unredeemed invitation exists for an email."""
        stmt = select(_t.c.id).where(_t.c.email == email, _t.c.used_at.is_(None))
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, invitation: ArtistInvitation) -> ArtistInvitation:
        """Insert a new invitation and return it with its id.

        Raises:
            IntegrityError: If the code is already taken
        """
        stmt = insert(_t).values(**invitation_to_dict(invitation)).returning(*_t.c)
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_invitation(dict(row))

    async def mark_used(
        self, invitation_id: InvitationId, used_at: datetime
    ) -> ArtistInvitation | None:
        """Set used_at only where it is still null."""
        stmt = (
            update(_t)
            .where(_t.c.id == invitation_id, _t.c.used_at.is_(None))
            .values(used_at=used_at)
            .returning(*_t.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            return None
        await self.session.flush()
        return row_to_invitation(dict(row))

    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation; True if a row was removed."""
        stmt = delete(_t).where(_t.c.id == invitation_id).returning(_t.c.id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def count_by_usage(self) -> tuple[int, int]:
        """Count (pending, used) invitations."""
        stmt = select(
            func.count().filter(_t.c.used_at.is_(None)),
            func.count().filter(_t.c.used_at.is_not(None)),
        ).select_from(_t)
        result = await self.session.execute(stmt)
        pending, used = result.one()
        return pending or 0, used or 0

    async def find_recent(self, limit: int = 10) -> list[ArtistInvitation]:
        """List the newest invitations."""
        stmt = select(_t).order_by(_t.c.created_at.desc(), _t.c.id.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]
