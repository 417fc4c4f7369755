"""Email infrastructure providers."""

import logfire
from dishka import Scope, provide

from gallery.adapter.resend.client import ResendEmailClient
from gallery.config import EmailSettings
from gallery.domain.service import EmailClient
from gallery.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider backed by Resend."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_client(self, settings: EmailSettings) -> EmailClient:
        """Provide Resend client.

        A missing API key is allowed; sends then report failure.
        """
        if not settings.api_key:
            logfire.warn("Resend API key not set, emails will not be delivered")

        return ResendEmailClient(
            api_key=settings.api_key,
            api_url=settings.api_url,
            default_from=settings.default_from,
            default_bcc=settings.default_bcc,
            timeout=settings.timeout,
        )
