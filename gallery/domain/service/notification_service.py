"""Notification domain service.

Builds transactional emails and hands them to the email client. Sending
never raises: every outcome is reported as an ``EmailResult`` so callers
decide whether a failed send matters.
"""

from datetime import datetime

import logfire

from gallery.config import EmailSettings
from gallery.domain.model.artist import Artist
from gallery.domain.model.artwork import Artwork
from gallery.domain.model.invitation import ArtistInvitation
from gallery.domain.value.common import ValueObject

from . import email_templates
from .base import Service


class EmailRecipient(ValueObject):
    """Email address with an optional display name."""

    email: str
    name: str | None = None

    def formatted(self) -> str:
        """Render as ``Name <email>`` when a name is present."""
        return f"{self.name} <{self.email}>" if self.name else self.email


class EmailMessage(ValueObject):
    """Outgoing email."""

    to: list[EmailRecipient]
    subject: str
    html: str | None = None
    text: str | None = None
    from_address: str | None = None
    cc: list[EmailRecipient] = []
    bcc: list[EmailRecipient] = []
    reply_to: str | None = None


class EmailResult(ValueObject):
    """Outcome of a send attempt."""

    success: bool
    message_id: str | None = None
    error: str | None = None


class EmailClient:
    """Generic transactional email client interface."""

    async def send(self, message: EmailMessage) -> EmailResult:
        """Send an email.

        Args:
            message: Message to send

        Returns:
            Message id on success, error text on failure
        """
        raise NotImplementedError


class NotificationService(Service):
    """Domain service for gallery email notifications."""

    def __init__(
        self, email_client: EmailClient, settings: EmailSettings, frontend_url: str
    ) -> None:
        """Initialize notification service.

        Args:
            email_client: Email client
            settings: Email settings
            frontend_url: Base URL for links in emails
        """
        self.email_client = email_client
        self.settings = settings
        self.frontend_url = frontend_url.rstrip("/")

    async def _send(self, message: EmailMessage, kind: str) -> EmailResult:
        with logfire.span(
            "notification_service.send",
            kind=kind,
            recipients=len(message.to),
        ):
            result = await self.email_client.send(message)
            if result.success:
                logfire.info("Email sent", kind=kind, message_id=result.message_id)
            else:
                logfire.warn("Email failed", kind=kind, error=result.error)
            return result

    async def send_artist_invitation(
        self, invitation: ArtistInvitation, admin_name: str, setup_url: str
    ) -> EmailResult:
        """Email the invitee their setup link."""
        html = email_templates.artist_invitation(
            invitation.name, admin_name, invitation.code.root, setup_url
        )
        message = EmailMessage(
            to=[EmailRecipient(email=invitation.email, name=invitation.name)],
            subject="You're Invited to Join The Friendship Center Gallery",
            html=html,
            from_address=self.settings.artist_from,
        )
        return await self._send(message, "artist_invitation")

    async def send_artist_welcome(self, artist: Artist) -> EmailResult:
        """Email a newly onboarded artist.

        Reports failure without sending when the artist has no email.
        """
        if not artist.email:
            return EmailResult(success=False, error="Artist has no email address")
        html = email_templates.artist_welcome(
            artist.name, f"{self.frontend_url}/artist", self.settings.support_email
        )
        message = EmailMessage(
            to=[EmailRecipient(email=artist.email, name=artist.name)],
            subject="Welcome to The Friendship Center Gallery!",
            html=html,
            from_address=self.settings.artist_from,
        )
        return await self._send(message, "artist_welcome")

    async def send_artwork_approval(
        self, artist: Artist, artwork: Artwork, approved_by: str
    ) -> EmailResult:
        """Tell an artist their submission was approved."""
        if not artist.email:
            return EmailResult(success=False, error="Artist has no email address")
        html = email_templates.artwork_approval(
            artist.name,
            artwork.title,
            approved_by,
            f"{self.frontend_url}/artworks/{artwork.slug}",
        )
        message = EmailMessage(
            to=[EmailRecipient(email=artist.email, name=artist.name)],
            subject=f"Artwork Approved: {artwork.title}",
            html=html,
            from_address=self.settings.artist_from,
        )
        return await self._send(message, "artwork_approval")

    async def send_artwork_rejection(
        self, artist: Artist, artwork: Artwork, reason: str
    ) -> EmailResult:
        """Tell an artist their submission was not accepted."""
        if not artist.email:
            return EmailResult(success=False, error="Artist has no email address")
        html = email_templates.artwork_rejection(
            artist.name, artwork.title, reason, self.settings.support_email
        )
        message = EmailMessage(
            to=[EmailRecipient(email=artist.email, name=artist.name)],
            subject=f"Artwork Submission Update: {artwork.title}",
            html=html,
            from_address=self.settings.artist_from,
        )
        return await self._send(message, "artwork_rejection")

    async def send_submission_notification(
        self, artist: Artist, artwork: Artwork, submitted_at: datetime
    ) -> EmailResult:
        """Tell the configured admins a submission is waiting for review."""
        recipients = [
            EmailRecipient(email=r.email, name=r.name)
            for r in self.settings.admin_recipients
        ]
        if not recipients:
            return EmailResult(success=False, error="No admin recipients configured")
        html = email_templates.artwork_submission_notification(
            artist.name,
            artwork.title,
            submitted_at.strftime("%B %d, %Y"),
            f"{self.frontend_url}/admin/artworks",
        )
        message = EmailMessage(
            to=recipients,
            subject=f"New Artwork Submission: {artwork.title}",
            html=html,
            from_address=self.settings.admin_from,
        )
        return await self._send(message, "artwork_submission")
