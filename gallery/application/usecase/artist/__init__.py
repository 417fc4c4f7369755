"""Artist use cases."""

from gallery.application.usecase.artist.send_password_reset import (
    SendPasswordResetRequest,
    SendPasswordResetResponse,
    SendPasswordResetUseCase,
)
from gallery.application.usecase.artist.set_artist_visibility import (
    SetArtistVisibilityRequest,
    SetArtistVisibilityResponse,
    SetArtistVisibilityUseCase,
)

__all__ = [
    "SendPasswordResetRequest",
    "SendPasswordResetResponse",
    "SendPasswordResetUseCase",
    "SetArtistVisibilityRequest",
    "SetArtistVisibilityResponse",
    "SetArtistVisibilityUseCase",
]
