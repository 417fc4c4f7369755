"""Set artist visibility use case."""

from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import AdminGuard, ArtistService
from gallery.domain.value import ArtistId, CurrentUser


class SetArtistVisibilityRequest(BaseModel):
    """Show or hide an artist."""

    actor: CurrentUser | None = None
    artist_id: int
    is_visible: bool


class SetArtistVisibilityResponse(BaseModel):
    """Artist visibility after the change."""

    id: int
    is_visible: bool
    is_hidden: bool


class SetArtistVisibilityUseCase(BaseUseCase):
    """Use case for toggling artist visibility."""

    def __init__(self, admin_guard: AdminGuard, artist_service: ArtistService) -> None:
        self.admin_guard = admin_guard
        self.artist_service = artist_service

    async def execute(
        self, request: SetArtistVisibilityRequest
    ) -> SetArtistVisibilityResponse:
        self.admin_guard.require_admin(request.actor)
        artist = await self.artist_service.set_visibility(
            ArtistId(request.artist_id), request.is_visible
        )
        return SetArtistVisibilityResponse(
            id=request.artist_id,
            is_visible=artist.is_visible,
            is_hidden=artist.is_hidden,
        )
