"""Unit tests for IdentityService and AdminGuard."""

import pytest

from gallery.adapter.error import IdentityProviderError
from gallery.adapter.stack import MockIdentityClient
from gallery.domain.error import (
    AdminAccessRequiredError,
    NotAuthenticatedError,
    NotAuthorizedError,
)
from gallery.domain.service import AdminGuard, IdentityClient, IdentityService
from gallery.domain.value import ArtistId, IdentityAccount, IdentityUserId, Role
from tests.conftest import admin_user, artist_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def _account(**metadata) -> IdentityAccount:
    return IdentityAccount(
        id=IdentityUserId("user_1"),
        primary_email="jane@example.com",
        server_metadata=metadata,
    )


class TestResolveArtistId:
    """Tests for reading artistID metadata."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw,expected",
        [(12, 12), ("12", 12), (None, None), ("", None), ("abc", None)],
    )
    async def test_resolve(self, unit_env, raw, expected):
        service = await unit_env.get(IdentityService)
        metadata = {} if raw is None else {"artistID": raw}

        assert service.resolve_artist_id(_account(**metadata)) == expected

    @pytest.mark.asyncio
    async def test_ignores_client_metadata(self, unit_env):
        """User-writable client metadata cannot grant a role or an artist link."""
        # Arrange
        service = await unit_env.get(IdentityService)
        guard = await unit_env.get(AdminGuard)
        account = _account().model_copy(
            update={"client_metadata": {"role": "admin", "artistID": 7}}
        )

        # Act
        user = service.to_current_user(account)

        # Assert
        assert user.role == Role.ARTIST.value
        assert user.artist_id is None
        with pytest.raises(AdminAccessRequiredError):
            guard.require_admin(user)
        with pytest.raises(NotAuthorizedError):
            guard.require_artist_access(user, ArtistId(7))

    @pytest.mark.asyncio
    async def test_server_metadata_wins_over_client(self, unit_env):
        service = await unit_env.get(IdentityService)
        account = _account(artistID=2).model_copy(
            update={"client_metadata": {"artistID": 7}}
        )

        assert service.resolve_artist_id(account) == 2


class TestGetCurrentUser:
    """Tests for get_current_user method."""

    @pytest.mark.asyncio
    async def test_missing_token(self, unit_env):
        """No token means no caller."""
        service = await unit_env.get(IdentityService)

        assert await service.get_current_user(None) is None
        assert await service.get_current_user("") is None

    @pytest.mark.asyncio
    async def test_unknown_token(self, unit_env):
        """Tokens the provider does not know resolve to no caller."""
        service = await unit_env.get(IdentityService)

        assert await service.get_current_user("garbage") is None

    @pytest.mark.asyncio
    async def test_admin_token(self, unit_env):
        """The seeded admin resolves with the admin role."""
        service = await unit_env.get(IdentityService)

        user = await service.get_current_user(MockIdentityClient.ADMIN_TOKEN)

        assert user.role == Role.ADMIN.value
        assert user.email == MockIdentityClient.ADMIN_EMAIL
        assert user.artist_id is None

    @pytest.mark.asyncio
    async def test_new_account_defaults_to_artist_role(self, unit_env):
        """Accounts without role metadata get the default role."""
        service = await unit_env.get(IdentityService)

        user = await service.get_current_user(
            MockIdentityClient.token_for("new@example.com")
        )

        assert user.role == Role.ARTIST.value
        assert user.email == "new@example.com"


class TestAccounts:
    """Tests for ensure_account and link_artist."""

    @pytest.mark.asyncio
    async def test_ensure_account_reuses_existing(self, unit_env):
        """An account with the same email is reused, not duplicated."""
        # Arrange
        service = await unit_env.get(IdentityService)
        client = await unit_env.get(IdentityClient)
        existing = await client.create_user("jane@example.com", "Jane", {})

        # Act
        user_id = await service.ensure_account("jane@example.com", "Jane", {})

        # Assert
        assert user_id == existing.id
        assert len(await client.list_users(email="jane@example.com")) == 1

    @pytest.mark.asyncio
    async def test_ensure_account_creates(self, unit_env):
        """A new email gets a new account with the given metadata."""
        # Arrange
        service = await unit_env.get(IdentityService)
        client = await unit_env.get(IdentityClient)

        # Act
        user_id = await service.ensure_account(
            "maria@example.com", "Maria", {"role": "artist"}
        )

        # Assert
        account = await client.get_user(user_id)
        assert account.display_name == "Maria"
        assert account.server_metadata == {"role": "artist"}

    @pytest.mark.asyncio
    async def test_link_artist_keeps_metadata(self, unit_env):
        """Linking sets artistID without dropping other keys."""
        # Arrange
        service = await unit_env.get(IdentityService)
        client = await unit_env.get(IdentityClient)
        account = await client.create_user(
            "jane@example.com", "Jane", {"role": "artist", "onboarded": True}
        )

        # Act
        await service.link_artist(account.id, ArtistId(5))

        # Assert
        stored = await client.get_user(account.id)
        assert stored.server_metadata == {
            "role": "artist",
            "onboarded": True,
            "artistID": 5,
        }

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self, unit_env):
        """Provider errors surface as IdentityProviderError."""
        service = await unit_env.get(IdentityService)
        client = await unit_env.get(IdentityClient)
        client.fail_requests = True

        with pytest.raises(IdentityProviderError):
            await service.ensure_account("jane@example.com", "Jane", {})


class TestAdminGuard:
    """Tests for AdminGuard."""

    @pytest.mark.asyncio
    async def test_require_admin(self, unit_env):
        guard = await unit_env.get(AdminGuard)

        assert guard.require_admin(admin_user()).role == Role.ADMIN.value

    @pytest.mark.asyncio
    async def test_super_admin_is_admin(self, unit_env):
        guard = await unit_env.get(AdminGuard)
        user = admin_user().model_copy(update={"role": Role.SUPER_ADMIN.value})

        assert guard.is_admin(user)

    @pytest.mark.asyncio
    async def test_anonymous(self, unit_env):
        guard = await unit_env.get(AdminGuard)

        with pytest.raises(NotAuthenticatedError, match="Not authenticated"):
            guard.require_admin(None)

    @pytest.mark.asyncio
    async def test_artist_is_not_admin(self, unit_env):
        guard = await unit_env.get(AdminGuard)

        with pytest.raises(
            AdminAccessRequiredError, match="Unauthorized: Admin access required"
        ):
            guard.require_admin(artist_user())

    @pytest.mark.asyncio
    async def test_artist_access(self, unit_env):
        """Artists may act on their own profile only."""
        guard = await unit_env.get(AdminGuard)
        user = artist_user(artist_id=4)

        assert guard.require_artist_access(user, ArtistId(4)) is user
        assert guard.require_artist_access(admin_user(), ArtistId(4)).role == "admin"
        with pytest.raises(NotAuthorizedError, match="your own artist profile"):
            guard.require_artist_access(user, ArtistId(5))
