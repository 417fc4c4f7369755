"""Stack Auth identity client implementation.

Talks to the Stack Auth REST API with server credentials.
"""

import secrets
from typing import Any

import httpx
import logfire

from gallery.adapter.error import IdentityProviderError
from gallery.domain.service.identity_service import IdentityClient
from gallery.domain.value import IdentityAccount, IdentityUserId, Role


class StackAuthClient(IdentityClient):
    """Stack Auth client using the server access type.

    Every request carries the project id and secret server key; the
    caller's own access token is forwarded only to resolve ``/users/me``.
    """

    def __init__(
        self,
        api_url: str,
        project_id: str,
        secret_server_key: str,
        publishable_client_key: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Stack Auth client.

        Args:
            api_url: Stack Auth API root, e.g. https://api.stack-auth.com
            project_id: Stack Auth project id
            secret_server_key: Server secret key
            publishable_client_key: Publishable client key
            timeout: Request timeout in seconds
        """
        self.base_url = f"{api_url.rstrip('/')}/api/v1"
        self.project_id = project_id
        self.secret_server_key = secret_server_key
        self.publishable_client_key = publishable_client_key
        self.timeout = timeout

    def _server_headers(self) -> dict[str, str]:
        return {
            "x-stack-access-type": "server",
            "x-stack-project-id": self.project_id,
            "x-stack-secret-server-key": self.secret_server_key,
            "Content-Type": "application/json",
        }

    def _client_headers(self) -> dict[str, str]:
        return {
            "x-stack-access-type": "client",
            "x-stack-project-id": self.project_id,
            "x-stack-publishable-client-key": self.publishable_client_key,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _to_account(data: dict[str, Any]) -> IdentityAccount:
        return IdentityAccount(
            id=IdentityUserId(data["id"]),
            primary_email=data.get("primary_email"),
            display_name=data.get("display_name"),
            server_metadata=data.get("server_metadata") or {},
            client_metadata=data.get("client_metadata") or {},
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str],
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        allow_not_found: bool = False,
    ) -> dict[str, Any] | None:
        """Send a request and decode the JSON body.

        Returns:
            Decoded body, or None for a tolerated 401/404

        Raises:
            IdentityProviderError: On transport errors or unexpected statuses
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method,
                    f"{self.base_url}{path}",
                    headers=headers,
                    json=json,
                    params=params,
                )
        except httpx.HTTPError as e:
            logfire.error("Stack Auth HTTP error", path=path, error=str(e))
            raise IdentityProviderError(f"HTTP error calling Stack Auth: {e}")

        if allow_not_found and response.status_code in (401, 404):
            return None

        if response.status_code >= 400:
            logfire.error(
                "Stack Auth request failed",
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise IdentityProviderError(
                f"Stack Auth request failed: {response.status_code}"
            )

        if not response.content:
            return {}
        return response.json()

    async def get_user_by_token(self, access_token: str) -> IdentityAccount | None:
        """Resolve the caller's access token via ``/users/me``."""
        headers = {**self._server_headers(), "x-stack-access-token": access_token}
        data = await self._request(
            "GET", "/users/me", headers=headers, allow_not_found=True
        )
        return self._to_account(data) if data else None

    async def get_user(self, user_id: IdentityUserId) -> IdentityAccount | None:
        """Fetch an account by id."""
        data = await self._request(
            "GET",
            f"/users/{user_id}",
            headers=self._server_headers(),
            allow_not_found=True,
        )
        return self._to_account(data) if data else None

    async def list_users(self, email: str | None = None) -> list[IdentityAccount]:
        """List accounts, searching by email when given."""
        params = {"query": email} if email else None
        data = await self._request(
            "GET", "/users", headers=self._server_headers(), params=params
        )
        accounts = [self._to_account(item) for item in (data or {}).get("items", [])]
        if email:
            accounts = [a for a in accounts if a.primary_email == email]
        return accounts

    async def create_user(
        self,
        email: str,
        display_name: str,
        server_metadata: dict[str, Any],
    ) -> IdentityAccount:
        """Create an account with a verified, sign-in enabled primary email."""
        data = await self._request(
            "POST",
            "/users",
            headers=self._server_headers(),
            json={
                "primary_email": email,
                "primary_email_verified": True,
                "primary_email_auth_enabled": True,
                "display_name": display_name,
                "server_metadata": server_metadata,
            },
        )
        account = self._to_account(data or {})
        logfire.info("Stack Auth user created", user_id=account.id, email=email)
        return account

    async def update_server_metadata(
        self, user_id: IdentityUserId, server_metadata: dict[str, Any]
    ) -> IdentityAccount:
        """Replace an account's server metadata."""
        data = await self._request(
            "PATCH",
            f"/users/{user_id}",
            headers=self._server_headers(),
            json={"server_metadata": server_metadata},
        )
        return self._to_account(data or {})

    async def send_password_reset(self, email: str, callback_url: str) -> None:
        """Trigger the password reset email (client endpoint)."""
        await self._request(
            "POST",
            "/auth/password/send-reset-code",
            headers=self._client_headers(),
            json={"email": email, "callback_url": callback_url},
        )
        logfire.info("Stack Auth password reset sent", email=email)


class MockIdentityClient(IdentityClient):
    """Mock identity client for testing.

    Keeps accounts in memory. Tokens are resolved as follows:
    - ``mock-admin-token`` -> a seeded admin account
    - ``mock-user:<email>`` -> the account with that email, created on first use
    - anything else -> unauthenticated
    """

    ADMIN_TOKEN = "mock-admin-token"
    ADMIN_EMAIL = "admin@example.com"
    USER_TOKEN_PREFIX = "mock-user:"

    def __init__(self) -> None:
        """Initialize mock client with one admin account."""
        self.accounts: dict[IdentityUserId, IdentityAccount] = {}
        self.password_resets: list[tuple[str, str]] = []
        self.fail_requests = False
        admin = self._add(
            self.ADMIN_EMAIL, "Admin User", {"role": Role.ADMIN.value}
        )
        self.admin_id = admin.id

    @classmethod
    def token_for(cls, email: str) -> str:
        """Access token that resolves to the account for ``email``."""
        return f"{cls.USER_TOKEN_PREFIX}{email}"

    def _add(
        self, email: str, display_name: str | None, metadata: dict[str, Any]
    ) -> IdentityAccount:
        account = IdentityAccount(
            id=IdentityUserId(f"user_{secrets.token_hex(6)}"),
            primary_email=email,
            display_name=display_name,
            server_metadata=dict(metadata),
        )
        self.accounts[account.id] = account
        return account

    def _check(self) -> None:
        if self.fail_requests:
            raise IdentityProviderError("Mock identity provider unavailable")

    def _find_by_email(self, email: str) -> IdentityAccount | None:
        return next(
            (a for a in self.accounts.values() if a.primary_email == email), None
        )

    async def get_user_by_token(self, access_token: str) -> IdentityAccount | None:
        """Resolve a mock token."""
        if access_token == self.ADMIN_TOKEN:
            return self.accounts[self.admin_id]
        if access_token.startswith(self.USER_TOKEN_PREFIX):
            email = access_token[len(self.USER_TOKEN_PREFIX) :]
            return self._find_by_email(email) or self._add(email, None, {})
        return None

    async def get_user(self, user_id: IdentityUserId) -> IdentityAccount | None:
        """Return a stored account."""
        self._check()
        return self.accounts.get(user_id)

    async def list_users(self, email: str | None = None) -> list[IdentityAccount]:
        """List stored accounts."""
        self._check()
        return [
            a
            for a in self.accounts.values()
            if email is None or a.primary_email == email
        ]

    async def create_user(
        self,
        email: str,
        display_name: str,
        server_metadata: dict[str, Any],
    ) -> IdentityAccount:
        """Store a new account."""
        self._check()
        return self._add(email, display_name, server_metadata)

    async def update_server_metadata(
        self, user_id: IdentityUserId, server_metadata: dict[str, Any]
    ) -> IdentityAccount:
        """Replace metadata on a stored account."""
        self._check()
        account = self.accounts.get(user_id)
        if account is None:
            raise IdentityProviderError(f"Unknown user: {user_id}")
        updated = account.model_copy(update={"server_metadata": dict(server_metadata)})
        self.accounts[user_id] = updated
        return updated

    async def send_password_reset(self, email: str, callback_url: str) -> None:
        """Record the reset request."""
        self._check()
        self.password_resets.append((email, callback_url))
