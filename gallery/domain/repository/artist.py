"""Artist repository interface."""

from abc import ABC, abstractmethod

from gallery.domain.model.artist import Artist
from gallery.domain.value import ArtistId, Slug


class ArtistRepository(ABC):
    """Repository for Artist entity."""

    @abstractmethod
    async def find_by_id(self, artist_id: ArtistId) -> Artist | None:
        """Find an artist by ID.

        Args:
            artist_id: The artist's unique identifier

        Returns:
            The artist if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Artist | None:
        """Find an artist by exact email.

        Args:
            email: Email address, compared as stored

        Returns:
            The artist if found, None otherwise
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken."""
        pass

    @abstractmethod
    async def create(self, artist: Artist) -> Artist:
        """Insert a new artist.

        Args:
            artist: Artist without an id

        Returns:
            The stored artist with its assigned id
        """
        pass

    @abstractmethod
    async def save(self, artist: Artist) -> Artist:
        """Update an existing artist.

        Raises:
            NotFoundError: If no artist has this id
        """
        pass
