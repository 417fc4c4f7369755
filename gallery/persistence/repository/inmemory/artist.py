"""In-memory artist repository for testing."""

from sqlalchemy.exc import IntegrityError

from gallery.domain.error import NotFoundError
from gallery.domain.model import Artist
from gallery.domain.repository import ArtistRepository
from gallery.domain.value import ArtistId, Slug

from .store import InMemoryStore


class InMemoryArtistRepository(ArtistRepository):
    """In-memory implementation of ArtistRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, artist_id: ArtistId) -> Artist | None:
        """Find an artist by ID."""
        return self.store.artists.get(artist_id)

    async def find_by_email(self, email: str) -> Artist | None:
        """Find an artist by exact email."""
        for artist in self.store.artists.values():
            if artist.email == email:
                return artist
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken."""
        return any(a.slug == slug for a in self.store.artists.values())

    async def create(self, artist: Artist) -> Artist:
        """Insert a new artist.

        Raises:
            IntegrityError: If the slug is already taken
        """
        if await self.slug_exists(artist.slug):
            raise IntegrityError("Duplicate artist slug", None, Exception())
        stored = artist.model_copy(
            update={"id": ArtistId(self.store.next_id("artists"))}
        )
        self.store.artists[stored.id] = stored
        return stored

    async def save(self, artist: Artist) -> Artist:
        """Update an existing artist."""
        if artist.id not in self.store.artists:
            raise NotFoundError("Artist", str(artist.id))
        self.store.artists[artist.id] = artist
        return artist
