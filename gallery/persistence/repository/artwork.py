"""PostgreSQL implementation of Artwork repository."""

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.error import NotFoundError
from gallery.domain.model import Artwork
from gallery.domain.repository import ArtworkRepository
from gallery.domain.value import ApprovalStatus, ArtistId, ArtworkId, Slug
from gallery.persistence.mappers import artwork_to_dict, row_to_artwork
from gallery.persistence.tables import artworks_table


class PostgresArtworkRepository(ArtworkRepository):
    """PostgreSQL implementation of ArtworkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _ordered(self):
        return select(artworks_table).order_by(
            artworks_table.c.created_at, artworks_table.c.id
        )

    async def _fetch_all(self, stmt) -> list[Artwork]:
        result = await self.session.execute(stmt)
        return [row_to_artwork(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, artwork_id: ArtworkId) -> Artwork | None:
        """Find an artwork by ID."""
        stmt = select(artworks_table).where(artworks_table.c.id == artwork_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_artwork(dict(row)) if row else None

    async def list_by_creation(self) -> list[Artwork]:
        """List every artwork ordered by (created_at, id)."""
        return await self._fetch_all(self._ordered())

    async def find_by_artist(self, artist_id: ArtistId) -> list[Artwork]:
        """List an artist's artworks, oldest first."""
        stmt = self._ordered().where(artworks_table.c.artist_id == artist_id)
        return await self._fetch_all(stmt)

    async def find_by_approval_status(self, status: ApprovalStatus) -> list[Artwork]:
        """List artworks in a given review state, oldest first."""
        stmt = self._ordered().where(artworks_table.c.approval_status == status.value)
        return await self._fetch_all(stmt)

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken."""
        stmt = select(artworks_table.c.id).where(artworks_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, artwork: Artwork) -> Artwork:
        """Insert a new artwork and return it with its id."""
        stmt = (
            insert(artworks_table)
            .values(**artwork_to_dict(artwork))
            .returning(*artworks_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_artwork(dict(row))

    async def save(self, artwork: Artwork) -> Artwork:
        """Update an existing artwork.

        ``created_at`` is never rewritten.

        Raises:
            NotFoundError: If no artwork has this id
        """
        values = artwork_to_dict(artwork)
        values.pop("created_at")
        stmt = (
            update(artworks_table)
            .where(artworks_table.c.id == artwork.id)
            .values(**values)
            .returning(*artworks_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise NotFoundError("Artwork", str(artwork.id))
        await self.session.flush()
        return row_to_artwork(dict(row))

    async def _update_orders(self, artwork_id: ArtworkId, **values: int) -> None:
        stmt = (
            update(artworks_table)
            .where(artworks_table.c.id == artwork_id)
            .values(**values)
            .returning(artworks_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("Artwork", str(artwork_id))

    async def update_display_orders(
        self, artwork_id: ArtworkId, artist_order: int, global_order: int
    ) -> None:
        """Write both display order fields of one artwork."""
        await self._update_orders(
            artwork_id,
            artist_display_order=artist_order,
            global_display_order=global_order,
        )

    async def update_artist_display_order(
        self, artwork_id: ArtworkId, artist_order: int
    ) -> None:
        """Write the artist display order of one artwork."""
        await self._update_orders(artwork_id, artist_display_order=artist_order)

    async def update_global_display_order(
        self, artwork_id: ArtworkId, global_order: int
    ) -> None:
        """Write the global display order of one artwork."""
        await self._update_orders(artwork_id, global_display_order=global_order)
