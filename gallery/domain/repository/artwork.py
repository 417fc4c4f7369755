"""Artwork repository interface."""

from abc import ABC, abstractmethod

from gallery.domain.model.artwork import Artwork
from gallery.domain.value import ApprovalStatus, ArtistId, ArtworkId, Slug


class ArtworkRepository(ABC):
    """Repository for Artwork entity.

    Defines the contract for artwork persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, artwork_id: ArtworkId) -> Artwork | None:
        """Find an artwork by ID.

        Args:
            artwork_id: The artwork's unique identifier

        Returns:
            The artwork if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_creation(self) -> list[Artwork]:
        """List every artwork ordered by creation time.

        Ties on ``created_at`` are broken by ascending id so that repeated
        reads return the same sequence.

        Returns:
            All artworks, oldest first
        """
        pass

    @abstractmethod
    async def find_by_artist(self, artist_id: ArtistId) -> list[Artwork]:
        """List an artist's artworks, oldest first.

        Args:
            artist_id: Owning artist

        Returns:
            The artist's artworks
        """
        pass

    @abstractmethod
    async def find_by_approval_status(self, status: ApprovalStatus) -> list[Artwork]:
        """List artworks in a given review state, oldest first.

        Args:
            status: Approval status filter

        Returns:
            Matching artworks
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken.

        Args:
            slug: Slug to check

        Returns:
            True if an artwork uses this slug
        """
        pass

    @abstractmethod
    async def create(self, artwork: Artwork) -> Artwork:
        """Insert a new artwork.

        Args:
            artwork: Artwork without an id

        Returns:
            The stored artwork with its assigned id
        """
        pass

    @abstractmethod
    async def save(self, artwork: Artwork) -> Artwork:
        """Update an existing artwork.

        Args:
            artwork: Artwork with an id

        Returns:
            The saved artwork

        Raises:
            NotFoundError: If no artwork has this id
        """
        pass

    @abstractmethod
    async def update_display_orders(
        self, artwork_id: ArtworkId, artist_order: int, global_order: int
    ) -> None:
        """Write both display order fields of one artwork.

        Args:
            artwork_id: Artwork to update
            artist_order: New artist display order
            global_order: New global display order

        Raises:
            NotFoundError: If no artwork has this id
        """
        pass

    @abstractmethod
    async def update_artist_display_order(
        self, artwork_id: ArtworkId, artist_order: int
    ) -> None:
        """Write the artist display order of one artwork.

        Raises:
            NotFoundError: If no artwork has this id
        """
        pass

    @abstractmethod
    async def update_global_display_order(
        self, artwork_id: ArtworkId, global_order: int
    ) -> None:
        """Write the global display order of one artwork.

        Raises:
            NotFoundError: If no artwork has this id
        """
        pass
