"""PostgreSQL implementation of Artist repository."""

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.error import NotFoundError
from gallery.domain.model import Artist
from gallery.domain.repository import ArtistRepository
from gallery.domain.value import ArtistId, Slug
from gallery.persistence.mappers import artist_to_dict, row_to_artist
from gallery.persistence.tables import artists_table


class PostgresArtistRepository(ArtistRepository):
    """PostgreSQL implementation of ArtistRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, artist_id: ArtistId) -> Artist | None:
        """Find an artist by ID."""
        stmt = select(artists_table).where(artists_table.c.id == artist_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_artist(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Artist | None:
        """Find an artist by exact email."""
        stmt = (
            select(artists_table)
            .where(artists_table.c.email == email)
            .order_by(artists_table.c.id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_artist(dict(row)) if row else None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken."""
        stmt = select(artists_table.c.id).where(artists_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, artist: Artist) -> Artist:
        """Insert a new artist and return it with its id."""
        stmt = (
            insert(artists_table)
            .values(**artist_to_dict(artist))
            .returning(*artists_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_artist(dict(row))

    async def save(self, artist: Artist) -> Artist:
        """Update an existing artist.

        Raises:
            NotFoundError: If no artist has this id
        """
        stmt = (
            update(artists_table)
            .where(artists_table.c.id == artist.id)
            .values(**artist_to_dict(artist))
            .returning(*artists_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise NotFoundError("Artist", str(artist.id))
        await self.session.flush()
        return row_to_artist(dict(row))
