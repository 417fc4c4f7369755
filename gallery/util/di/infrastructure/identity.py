"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from gallery.adapter.stack.client import StackAuthClient
from gallery.config import IdentitySettings
from gallery.domain.service import IdentityClient
from gallery.util.di.base import ProviderBase
from gallery.util.error import ConfigurationError


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider backed by Stack Auth."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: IdentitySettings) -> IdentityClient:
        """Provide Stack Auth client.

        Raises:
            ConfigurationError: If Stack Auth credentials are not configured
        """
        if not settings.project_id:
            raise ConfigurationError("Stack Auth project ID must be configured")
        if not settings.secret_server_key:
            raise ConfigurationError("Stack Auth secret server key must be configured")

        return StackAuthClient(
            api_url=settings.api_url,
            project_id=settings.project_id,
            secret_server_key=settings.secret_server_key,
            publishable_client_key=settings.publishable_client_key,
            timeout=settings.timeout,
        )
