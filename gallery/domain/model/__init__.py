"""Domain model entities for the gallery."""

from gallery.domain.model.artist import Artist
from gallery.domain.model.artwork import Artwork
from gallery.domain.model.invitation import ArtistInvitation

__all__ = [
    "Artist",
    "Artwork",
    "ArtistInvitation",
]
