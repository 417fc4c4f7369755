"""Domain repository interfaces."""

from gallery.domain.repository.artist import ArtistRepository
from gallery.domain.repository.artwork import ArtworkRepository
from gallery.domain.repository.invitation import InvitationRepository
from gallery.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "ArtistRepository",
    "ArtworkRepository",
    "InvitationRepository",
    "UnitOfWork",
]
