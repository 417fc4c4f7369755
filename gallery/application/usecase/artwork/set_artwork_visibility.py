"""Set artwork visibility use case."""

from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import AdminGuard, ArtworkService
from gallery.domain.value import ArtworkId, CurrentUser


class SetArtworkVisibilityRequest(BaseModel):
    """Show or hide an artwork."""

    actor: CurrentUser | None = None
    artwork_id: int
    is_visible: bool


class SetArtworkVisibilityResponse(BaseModel):
    """Artwork visibility after the change."""

    id: int
    is_visible: bool


class SetArtworkVisibilityUseCase(BaseUseCase):
    """Use case for toggling artwork visibility."""

    def __init__(self, admin_guard: AdminGuard, artwork_service: ArtworkService) -> None:
        self.admin_guard = admin_guard
        self.artwork_service = artwork_service

    async def execute(
        self, request: SetArtworkVisibilityRequest
    ) -> SetArtworkVisibilityResponse:
        self.admin_guard.require_admin(request.actor)
        artwork = await self.artwork_service.set_visibility(
            ArtworkId(request.artwork_id), request.is_visible
        )
        return SetArtworkVisibilityResponse(
            id=request.artwork_id, is_visible=artwork.is_visible
        )
