"""In-memory artwork repository for testing."""

from sqlalchemy.exc import IntegrityError

from gallery.domain.error import NotFoundError
from gallery.domain.model import Artwork
from gallery.domain.repository import ArtworkRepository
from gallery.domain.value import ApprovalStatus, ArtistId, ArtworkId, Slug

from .store import InMemoryStore


class InMemoryArtworkRepository(ArtworkRepository):
    """In-memory implementation of ArtworkRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _ordered(self) -> list[Artwork]:
        return sorted(
            self.store.artworks.values(), key=lambda a: (a.created_at, a.id)
        )

    def _get(self, artwork_id: ArtworkId) -> Artwork:
        artwork = self.store.artworks.get(artwork_id)
        if artwork is None:
            raise NotFoundError("Artwork", str(artwork_id))
        return artwork

    async def find_by_id(self, artwork_id: ArtworkId) -> Artwork | None:
        """Find an artwork by ID."""
        return self.store.artworks.get(artwork_id)

    async def list_by_creation(self) -> list[Artwork]:
        """List every artwork ordered by (created_at, id)."""
        return self._ordered()

    async def find_by_artist(self, artist_id: ArtistId) -> list[Artwork]:
        """List an artist's artworks, oldest first."""
        return [a for a in self._ordered() if a.artist_id == artist_id]

    async def find_by_approval_status(self, status: ApprovalStatus) -> list[Artwork]:
        """List artworks in a given review state, oldest first."""
        return [a for a in self._ordered() if a.approval_status == status]

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken."""
        return any(a.slug == slug for a in self.store.artworks.values())

    async def create(self, artwork: Artwork) -> Artwork:
        """Insert a new artwork.

        Raises:
            IntegrityError: If the slug is already taken
        """
        if await self.slug_exists(artwork.slug):
            raise IntegrityError("Duplicate artwork slug", None, Exception())
        stored = artwork.model_copy(
            update={"id": ArtworkId(self.store.next_id("artworks"))}
        )
        self.store.artworks[stored.id] = stored
        return stored

    async def save(self, artwork: Artwork) -> Artwork:
        """Update an existing artwork, keeping its original ``created_at``."""
        existing = self._get(artwork.id)
        stored = artwork.model_copy(update={"created_at": existing.created_at})
        self.store.artworks[artwork.id] = stored
        return stored

    async def update_display_orders(
        self, artwork_id: ArtworkId, artist_order: int, global_order: int
    ) -> None:
        """Write both display order fields of one artwork."""
        artwork = self._get(artwork_id)
        self.store.artworks[artwork_id] = artwork.model_copy(
            update={
                "artist_display_order": artist_order,
                "global_display_order": global_order,
            }
        )

    async def update_artist_display_order(
        self, artwork_id: ArtworkId, artist_order: int
    ) -> None:
        """Write the artist display order of one artwork."""
        artwork = self._get(artwork_id)
        self.store.artworks[artwork_id] = artwork.model_copy(
            update={"artist_display_order": artist_order}
        )

    async def update_global_display_order(
        self, artwork_id: ArtworkId, global_order: int
    ) -> None:
        """Write the global display order of one artwork."""
        artwork = self._get(artwork_id)
        self.store.artworks[artwork_id] = artwork.model_copy(
            update={"global_display_order": global_order}
        )
