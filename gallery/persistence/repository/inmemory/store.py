"""Shared state for the in-memory repositories."""

import copy
from dataclasses import dataclass, field
from typing import Any

from gallery.domain.model import Artist, ArtistInvitation, Artwork


@dataclass
class InMemoryStore:
    """Tables and id sequences shared by the in-memory repositories.

    One store lives for the whole container so rows survive across
    requests, the way a database would.
    """

    artists: dict[int, Artist] = field(default_factory=dict)
    artworks: dict[int, Artwork] = field(default_factory=dict)
    invitations: dict[int, ArtistInvitation] = field(default_factory=dict)
    sequences: dict[str, int] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        """Advance and return the id sequence for ``table``."""
        self.sequences[table] = self.sequences.get(table, 0) + 1
        return self.sequences[table]

    def snapshot(self) -> dict[str, Any]:
        """Capture every table; models are immutable so shallow copies suffice."""
        return {
            "artists": dict(self.artists),
            "artworks": dict(self.artworks),
            "invitations": dict(self.invitations),
            "sequences": copy.copy(self.sequences),
        }

    def restore(self, state: dict[str, Any]) -> None:
        """Put back a state captured by :meth:`snapshot`."""
        self.artists = state["artists"]
        self.artworks = state["artworks"]
        self.invitations = state["invitations"]
        self.sequences = state["sequences"]
