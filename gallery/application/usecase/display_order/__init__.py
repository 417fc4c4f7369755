"""Display order use cases."""

from gallery.application.usecase.display_order.populate_display_orders import (
    PopulateDisplayOrdersRequest,
    PopulateDisplayOrdersResponse,
    PopulateDisplayOrdersUseCase,
)
from gallery.application.usecase.display_order.update_artist_order import (
    ArtistOrderItem,
    UpdateArtistOrderRequest,
    UpdateArtistOrderResponse,
    UpdateArtistOrderUseCase,
)
from gallery.application.usecase.display_order.update_global_order import (
    GlobalOrderItem,
    UpdateGlobalOrderRequest,
    UpdateGlobalOrderResponse,
    UpdateGlobalOrderUseCase,
)

__all__ = [
    "ArtistOrderItem",
    "GlobalOrderItem",
    "PopulateDisplayOrdersRequest",
    "PopulateDisplayOrdersResponse",
    "PopulateDisplayOrdersUseCase",
    "UpdateArtistOrderRequest",
    "UpdateArtistOrderResponse",
    "UpdateArtistOrderUseCase",
    "UpdateGlobalOrderRequest",
    "UpdateGlobalOrderResponse",
    "UpdateGlobalOrderUseCase",
]
