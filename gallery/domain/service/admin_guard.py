"""Admin guard.

Every mutating operation checks the caller here before touching data.
Failures raise instead of returning a result.
"""

import logfire

from gallery.config import IdentitySettings
from gallery.domain.error import (
    AdminAccessRequiredError,
    NotAuthenticatedError,
    NotAuthorizedError,
)
from gallery.domain.value import ArtistId, CurrentUser

from .base import Service


class AdminGuard(Service):
    """Role checks against the caller's identity metadata."""

    def __init__(self, settings: IdentitySettings) -> None:
        """Initialize admin guard.

        Args:
            settings: Identity settings with the admin role names
        """
        self.settings = settings

    def is_admin(self, user: CurrentUser | None) -> bool:
        """Whether the caller holds an admin role."""
        return user is not None and user.role in self.settings.admin_roles

    def require_authenticated(self, user: CurrentUser | None) -> CurrentUser:
        """Require a signed-in caller.

        Raises:
            NotAuthenticatedError: If there is no caller
        """
        if user is None:
            raise NotAuthenticatedError()
        return user

    def require_admin(self, user: CurrentUser | None) -> CurrentUser:
        """Require an admin or super admin caller.

        Raises:
            NotAuthenticatedError: If there is no caller
            AdminAccessRequiredError: If the caller is not an admin
        """
        user = self.require_authenticated(user)
        if not self.is_admin(user):
            logfire.warn("Admin access denied", user_id=user.user_id, role=user.role)
            raise AdminAccessRequiredError()
        return user

    def require_artist_access(
        self, user: CurrentUser | None, artist_id: ArtistId
    ) -> CurrentUser:
        """Require an admin, or the artist the caller's account is linked to.

        Raises:
            NotAuthenticatedError: If there is no caller
            NotAuthorizedError: If the caller is neither admin nor that artist
        """
        user = self.require_authenticated(user)
        if self.is_admin(user) or user.artist_id == artist_id:
            return user
        logfire.warn(
            "Artist access denied",
            user_id=user.user_id,
            artist_id=artist_id,
            linked_artist_id=user.artist_id,
        )
        raise NotAuthorizedError(
            "Unauthorized: You can only manage your own artist profile"
        )
