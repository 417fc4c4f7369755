"""Artwork use cases."""

from gallery.application.usecase.artwork.approve_pending_artworks import (
    ApprovePendingArtworksRequest,
    ApprovePendingArtworksResponse,
    ApprovePendingArtworksUseCase,
)
from gallery.application.usecase.artwork.create_artwork import (
    CreateArtworkRequest,
    CreateArtworkResponse,
    CreateArtworkUseCase,
)
from gallery.application.usecase.artwork.review_artwork import (
    ReviewArtworkRequest,
    ReviewArtworkResponse,
    ReviewArtworkUseCase,
)
from gallery.application.usecase.artwork.set_artwork_visibility import (
    SetArtworkVisibilityRequest,
    SetArtworkVisibilityResponse,
    SetArtworkVisibilityUseCase,
)

__all__ = [
    "ApprovePendingArtworksRequest",
    "ApprovePendingArtworksResponse",
    "ApprovePendingArtworksUseCase",
    "CreateArtworkRequest",
    "CreateArtworkResponse",
    "CreateArtworkUseCase",
    "ReviewArtworkRequest",
    "ReviewArtworkResponse",
    "ReviewArtworkUseCase",
    "SetArtworkVisibilityRequest",
    "SetArtworkVisibilityResponse",
    "SetArtworkVisibilityUseCase",
]
