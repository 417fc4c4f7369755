"""In-memory repository implementations for testing."""

from .artist import InMemoryArtistRepository
from .artwork import InMemoryArtworkRepository
from .invitation import InMemoryInvitationRepository
from .store import InMemoryStore
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryArtistRepository",
    "InMemoryArtworkRepository",
    "InMemoryInvitationRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
]
