"""Mock email providers for testing."""

from dishka import Scope, provide

from gallery.adapter.resend.client import MockEmailClient
from gallery.domain.service import EmailClient
from gallery.util.di.infrastructure.email import EmailProvider


class MockEmailProvider(EmailProvider):
    """Mock email provider that records outgoing messages."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_email_client(self) -> EmailClient:
        """Provide mock email client."""
        return MockEmailClient()
