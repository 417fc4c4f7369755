"""Artist administration routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr

from gallery.application.usecase.artist import (
    SendPasswordResetRequest,
    SendPasswordResetResponse,
    SendPasswordResetUseCase,
    SetArtistVisibilityRequest,
    SetArtistVisibilityResponse,
    SetArtistVisibilityUseCase,
)
from gallery.domain.service import IdentityService
from gallery.interface.api.auth import access_token

router = APIRouter(prefix="/admin/artists", tags=["artists"], route_class=DishkaRoute)


class VisibilityAPIRequest(BaseModel):
    """API request for toggling visibility."""

    is_visible: bool


class PasswordResetAPIRequest(BaseModel):
    """API request for sending a password reset email."""

    email: EmailStr


@router.patch("/{artist_id}/visibility", response_model=SetArtistVisibilityResponse)
async def set_artist_visibility(
    artist_id: int,
    request: VisibilityAPIRequest,
    use_case: FromDishka[SetArtistVisibilityUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> SetArtistVisibilityResponse:
    """Show or hide an artist."""
    actor = await identity_service.get_current_user(token)
    return await use_case.execute(
        SetArtistVisibilityRequest(
            actor=actor, artist_id=artist_id, is_visible=request.is_visible
        )
    )


@router.post("/password-reset", response_model=SendPasswordResetResponse)
async def send_password_reset(
    request: PasswordResetAPIRequest,
    response: Response,
    use_case: FromDishka[SendPasswordResetUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> SendPasswordResetResponse:
    """Ask the identity provider to email a password reset link."""
    actor = await identity_service.get_current_user(token)
    result = await use_case.execute(
        SendPasswordResetRequest(actor=actor, email=request.email)
    )
    if not result.success:
        response.status_code = status.HTTP_502_BAD_GATEWAY
    return result
