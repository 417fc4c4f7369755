"""Identity domain service.

Accounts live in the external identity provider. The only link between
an account and an artist row is ``artistID`` in the account's server
metadata, and this service is the one place that reads or writes it.
"""

from typing import Any

import logfire

from gallery.config import IdentitySettings
from gallery.domain.value import (
    ArtistId,
    CurrentUser,
    IdentityAccount,
    IdentityUserId,
)

from .base import Service

ARTIST_ID_KEY = "artistID"
ROLE_KEY = "role"


class IdentityClient:
    """Generic identity provider client interface."""

    async def get_user_by_token(self, access_token: str) -> IdentityAccount | None:
        """Resolve an access token to the account that owns it.

        Args:
            access_token: Session access token sent by the caller

        Returns:
            The account, or None if the token is invalid or expired
        """
        raise NotImplementedError

    async def get_user(self, user_id: IdentityUserId) -> IdentityAccount | None:
        """Fetch an account by id, or None if it does not exist."""
        raise NotImplementedError

    async def list_users(self, email: str | None = None) -> list[IdentityAccount]:
        """List accounts, optionally filtered by primary email."""
        raise NotImplementedError

    async def create_user(
        self,
        email: str,
        display_name: str,
        server_metadata: dict[str, Any],
    ) -> IdentityAccount:
        """Create an account with a verified primary email."""
        raise NotImplementedError

    async def update_server_metadata(
        self, user_id: IdentityUserId, server_metadata: dict[str, Any]
    ) -> IdentityAccount:
        """Replace an account's server metadata."""
        raise NotImplementedError

    async def send_password_reset(self, email: str, callback_url: str) -> None:
        """Trigger the provider's password reset email."""
        raise NotImplementedError


class IdentityService(Service):
    """Domain service for identity provider operations."""

    def __init__(
        self, identity_client: IdentityClient, settings: IdentitySettings
    ) -> None:
        """Initialize identity service.

        Args:
            identity_client: Identity provider client
            settings: Identity settings
        """
        self.identity_client = identity_client
        self.settings = settings

    def resolve_artist_id(self, account: IdentityAccount) -> ArtistId | None:
        """Resolve the artist an account belongs to.

        Args:
            account: Identity provider account

        Returns:
            Artist id from ``artistID`` server metadata, or None if absent or malformed
        """
        # Client metadata is writable by the user and never trusted here
        raw = account.server_metadata.get(ARTIST_ID_KEY)
        if raw is None or raw == "":
            return None
        try:
            return ArtistId(int(str(raw)))
        except ValueError:
            logfire.warn(
                "Malformed artistID metadata", user_id=account.id, value=str(raw)
            )
            return None

    def resolve_role(self, account: IdentityAccount) -> str:
        """Role from server metadata, defaulting to the configured artist role."""
        role = account.server_metadata.get(ROLE_KEY)
        return str(role) if role else self.settings.default_role

    def to_current_user(self, account: IdentityAccount) -> CurrentUser:
        """Build the request principal from an account."""
        return CurrentUser(
            user_id=account.id,
            email=account.primary_email,
            display_name=account.display_name,
            role=self.resolve_role(account),
            artist_id=self.resolve_artist_id(account),
        )

    async def get_current_user(self, access_token: str | None) -> CurrentUser | None:
        """Resolve the caller of a request.

        Args:
            access_token: Access token from header or cookie

        Returns:
            The principal, or None if unauthenticated
        """
        if not access_token:
            return None

        with logfire.span("identity_service.get_current_user"):
            account = await self.identity_client.get_user_by_token(access_token)
            if account is None:
                logfire.info("Access token did not resolve to an account")
                return None
            return self.to_current_user(account)

    async def ensure_account(
        self, email: str, display_name: str, server_metadata: dict[str, Any]
    ) -> IdentityUserId:
        """Find or create the account for an email.

        Reuses an existing account with the same primary email.

        Args:
            email: Account email
            display_name: Display name for a new account
            server_metadata: Metadata for a new account

        Returns:
            The account id

        Raises:
            IdentityProviderError: If the provider rejects a request
        """
        with logfire.span("identity_service.ensure_account", email=email):
            existing = await self.identity_client.list_users(email=email)
            for account in existing:
                if account.primary_email == email:
                    logfire.info(
                        "Reusing identity account", user_id=account.id, email=email
                    )
                    return account.id

            created = await self.identity_client.create_user(
                email, display_name, server_metadata
            )
            logfire.info("Identity account created", user_id=created.id, email=email)
            return created.id

    async def link_artist(self, user_id: IdentityUserId, artist_id: ArtistId) -> None:
        """Record an artist on an account's server metadata.

        Existing metadata keys are kept; ``artistID`` and ``role`` are set.

        Raises:
            IdentityProviderError: If the provider rejects the update
        """
        with logfire.span(
            "identity_service.link_artist", user_id=user_id, artist_id=artist_id
        ):
            current = await self.identity_client.get_user(user_id)
            metadata = dict(current.server_metadata) if current else {}
            metadata[ARTIST_ID_KEY] = artist_id
            metadata.setdefault(ROLE_KEY, self.settings.default_role)
            await self.identity_client.update_server_metadata(user_id, metadata)
            logfire.info("Artist linked to account", user_id=user_id, artist_id=artist_id)

    async def send_password_reset(self, email: str, callback_url: str) -> None:
        """Ask the provider to email a password reset link.

        Raises:
            IdentityProviderError: If the provider rejects the request
        """
        with logfire.span("identity_service.send_password_reset", email=email):
            await self.identity_client.send_password_reset(email, callback_url)
            logfire.info("Password reset requested", email=email)
