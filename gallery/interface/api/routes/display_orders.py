"""Display order routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from gallery.application.usecase.display_order import (
    ArtistOrderItem,
    GlobalOrderItem,
    PopulateDisplayOrdersRequest,
    PopulateDisplayOrdersResponse,
    PopulateDisplayOrdersUseCase,
    UpdateArtistOrderRequest,
    UpdateArtistOrderResponse,
    UpdateArtistOrderUseCase,
    UpdateGlobalOrderRequest,
    UpdateGlobalOrderResponse,
    UpdateGlobalOrderUseCase,
)
from gallery.domain.service import IdentityService
from gallery.interface.api.auth import access_token

router = APIRouter(prefix="/admin", tags=["display-orders"], route_class=DishkaRoute)


class ArtistOrderAPIRequest(BaseModel):
    """API request for a manual per-artist reorder."""

    items: list[ArtistOrderItem]


class GlobalOrderAPIRequest(BaseModel):
    """API request for a manual gallery-wide reorder."""

    items: list[GlobalOrderItem]


@router.post("/display-orders/populate", response_model=PopulateDisplayOrdersResponse)
async def populate_display_orders(
    response: Response,
    use_case: FromDishka[PopulateDisplayOrdersUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> PopulateDisplayOrdersResponse:
    """Recompute artist and global display orders for every visible artwork.

    Responds 500 with ``success: false`` when the recompute fails; no
    partial orders are kept.
    """
    actor = await identity_service.get_current_user(token)
    result = await use_case.execute(PopulateDisplayOrdersRequest(actor=actor))
    if not result.success:
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return result


@router.put("/artworks/artist-order", response_model=UpdateArtistOrderResponse)
async def update_artist_order(
    request: ArtistOrderAPIRequest,
    use_case: FromDishka[UpdateArtistOrderUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> UpdateArtistOrderResponse:
    """Apply a drag-and-drop order within one artist's artworks."""
    actor = await identity_service.get_current_user(token)
    return await use_case.execute(
        UpdateArtistOrderRequest(actor=actor, items=request.items)
    )


@router.put("/artworks/global-order", response_model=UpdateGlobalOrderResponse)
async def update_global_order(
    request: GlobalOrderAPIRequest,
    use_case: FromDishka[UpdateGlobalOrderUseCase],
    identity_service: FromDishka[IdentityService],
    token: str | None = Depends(access_token),
) -> UpdateGlobalOrderResponse:
    """Apply a drag-and-drop order across the whole gallery."""
    actor = await identity_service.get_current_user(token)
    return await use_case.execute(
        UpdateGlobalOrderRequest(actor=actor, items=request.items)
    )
