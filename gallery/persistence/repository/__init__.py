"""PostgreSQL repository implementations."""

from gallery.persistence.repository.artist import PostgresArtistRepository
from gallery.persistence.repository.artwork import PostgresArtworkRepository
from gallery.persistence.repository.invitation import PostgresInvitationRepository

__all__ = [
    "PostgresArtistRepository",
    "PostgresArtworkRepository",
    "PostgresInvitationRepository",
]
