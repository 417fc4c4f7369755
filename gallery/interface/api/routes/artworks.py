"""Artwork administration routes."""

from decimal import Decimal
from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from gallery.application.usecase.artwork import (
    ApprovePendingArtworksRequest,
    ApprovePendingArtworksResponse,
    ApprovePendingArtworksUseCase,
    CreateArtworkRequest,
    CreateArtworkResponse,
    CreateArtworkUseCase,
    ReviewArtworkRequest,
    ReviewArtworkResponse,
    ReviewArtworkUseCase,
    SetArtworkVisibilityRequest,
    SetArtworkVisibilityResponse,
    SetArtworkVisibilityUseCase,
)
from gallery.domain.service import IdentityService
from gallery.interface.api.auth import access_token

router = APIRouter(prefix="/admin/artworks", tags=["artworks"], route_class=DishkaRoute)


class CreateArtworkAPIRequest(BaseModel):
    """API request for creating an artwork."""

    artist_id: int
    title: str = Field(min_length=2, max_length=200)
    year: str = Field(pattern=r"^\d{4}$")
    medium: str = Field(min_length=2, max_length=100)
    dimensions: str = Field(min_length=2, max_length=100)
    description: str = Field(min_length=10, max_length=2000)
    price: Decimal = Field(ge=0, le=100000, decimal_places=2)
    original_image: str | None = None
    is_visible: bool = True


class ReviewArtworkAPIRequest(BaseModel):
    """API request for approving or rejecting a submission."""

    decision: Literal["approve", "reject"]
    make_visible: bool = True
    reason: str | None = Field(default=None, max_length=2000)


class ApprovePendingAPIRequest(BaseModel):
    """API request for approving every pending submission."""

    make_visible: bool = True


class VisibilityAPIRequest(BaseModel):
    """API request for toggling visibility."""

    is_visible: bool


@router.post(
    "", response_model=CreateArtworkResponse, status_code=status.HTTP_201_CREATED
)
async def create_artwork(
    request: CreateArtworkAPIRequest,
    use_case: FromDishka[CreateArtworkUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> CreateArtworkResponse:
    """Create an artwork for an artist.

    Admins may create for any artist; artists only for themselves.
    Submissions from artists who are not pre-approved wait for review.
    """
    actor = await identity_service.get_current_user(token)
    return await use_case.execute(
        CreateArtworkRequest(actor=actor, **request.model_dump())
    )


@router.post("/approve-pending", response_model=ApprovePendingArtworksResponse)
async def approve_pending_artworks(
    request: ApprovePendingAPIRequest,
    use_case: FromDishka[ApprovePendingArtworksUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> ApprovePendingArtworksResponse:
    """Approve every pending submission at once."""
    actor = await identity_service.get_current_user(token)
    return await use_case.execute(
        ApprovePendingArtworksRequest(actor=actor, make_visible=request.make_visible)
    )


@router.post("/{artwork_id}/review", response_model=ReviewArtworkResponse)
async def review_artwork(
    artwork_id: int,
    request: ReviewArtworkAPIRequest,
    use_case: FromDishka[ReviewArtworkUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> ReviewArtworkResponse:
    """Approve or reject a submitted artwork."""
    actor = await identity_service.get_current_user(token)
    return await use_case.execute(
        ReviewArtworkRequest(
            actor=actor,
            artwork_id=artwork_id,
            decision=request.decision,
            make_visible=request.make_visible,
            reason=request.reason,
        )
    )


@router.patch("/{artwork_id}/visibility", response_model=SetArtworkVisibilityResponse)
async def set_artwork_visibility(
    artwork_id: int,
    request: VisibilityAPIRequest,
    use_case: FromDishka[SetArtworkVisibilityUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> SetArtworkVisibilityResponse:
    """Show or hide an artwork."""
    actor = await identity_service.get_current_user(token)
    return await use_case.execute(
        SetArtworkVisibilityRequest(
            actor=actor, artwork_id=artwork_id, is_visible=request.is_visible
        )
    )
