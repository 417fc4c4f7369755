"""Domain services for the gallery."""

from .admin_guard import AdminGuard
from .artist_service import ArtistService
from .artwork_service import ArtworkService
from .base import Service
from .display_order_service import DisplayOrderAssignment, DisplayOrderService
from .identity_service import IdentityClient, IdentityService
from .invitation_service import InvitationService, InvitationStats
from .notification_service import (
    EmailClient,
    EmailMessage,
    EmailRecipient,
    EmailResult,
    NotificationService,
)

__all__ = [
    "AdminGuard",
    "ArtistService",
    "ArtworkService",
    "DisplayOrderAssignment",
    "DisplayOrderService",
    "EmailClient",
    "EmailMessage",
    "EmailRecipient",
    "EmailResult",
    "IdentityClient",
    "IdentityService",
    "InvitationService",
    "InvitationStats",
    "NotificationService",
    "Service",
]
