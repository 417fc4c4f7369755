"""Resend email client implementation."""

import html
import re
import secrets
from typing import Any

import httpx
import logfire

from gallery.domain.service.notification_service import (
    EmailClient,
    EmailMessage,
    EmailResult,
)

_BLOCK_TAGS = re.compile(r"</?(p|div|h[1-6]|li|tr|table|ul|ol)[^>]*>", re.IGNORECASE)
_BREAK_TAGS = re.compile(r"<br\s*/?>", re.IGNORECASE)
_STRIP_BLOCKS = re.compile(r"<(style|script)[^>]*>.*?</\1>", re.IGNORECASE | re.DOTALL)
_ANY_TAG = re.compile(r"<[^>]+>")
_BLANK_LINES = re.compile(r"\n\s*\n+")


def html_to_plain_text(markup: str) -> str:
    """Derive a plain text body from an HTML email.

    Args:
        markup: HTML source

    Returns:
        Text with tags removed and paragraphs separated by blank lines
    """
    text = _STRIP_BLOCKS.sub("", markup)
    text = _BREAK_TAGS.sub("\n", text)
    text = _BLOCK_TAGS.sub("\n", text)
    text = _ANY_TAG.sub("", text)
    text = html.unescape(text)
    lines = [line.strip() for line in text.splitlines()]
    text = "\n".join(lines)
    return _BLANK_LINES.sub("\n\n", text).strip()


class ResendEmailClient(EmailClient):
    """Resend HTTP API client."""

    def __init__(
        self,
        api_key: str | None,
        api_url: str,
        default_from: str,
        default_bcc: list[str] | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Resend client.

        Args:
            api_key: Resend API key; sends fail when missing
            api_url: Resend send endpoint
            default_from: Sender used when a message has none
            default_bcc: Addresses blind copied on every message
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.api_url = api_url
        self.default_from = default_from
        self.default_bcc = default_bcc or []
        self.timeout = timeout

    def _payload(self, message: EmailMessage) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "from": message.from_address or self.default_from,
            "to": [r.formatted() for r in message.to],
            "subject": message.subject,
        }
        if message.html:
            payload["html"] = message.html
        text = message.text or (html_to_plain_text(message.html) if message.html else None)
        if text:
            payload["text"] = text
        if message.cc:
            payload["cc"] = [r.formatted() for r in message.cc]
        bcc = self.default_bcc + [r.formatted() for r in message.bcc]
        if bcc:
            payload["bcc"] = bcc
        if message.reply_to:
            payload["reply_to"] = message.reply_to
        return payload

    async def send(self, message: EmailMessage) -> EmailResult:
        """Send through Resend.

        Transport and API errors are reported in the result.
        """
        if not self.api_key:
            logfire.warn("Resend API key not configured", subject=message.subject)
            return EmailResult(success=False, error="Email service not configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url,
                    json=self._payload(message),
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                )
        except httpx.HTTPError as e:
            logfire.error("Resend HTTP error", error=str(e))
            return EmailResult(success=False, error=f"HTTP error sending email: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Resend send failed",
                status_code=response.status_code,
                error=response.text,
            )
            try:
                detail = response.json().get("message", response.text)
            except ValueError:
                detail = response.text
            return EmailResult(success=False, error=detail or "Failed to send email")

        return EmailResult(success=True, message_id=response.json().get("id"))


class MockEmailClient(EmailClient):
    """Mock email client for testing.

    Records every message it accepts. Set ``fail_with`` to make sends fail
    with that error text.
    """

    def __init__(self) -> None:
        """Initialize mock client with an empty outbox."""
        self.sent: list[EmailMessage] = []
        self.fail_with: str | None = None

    async def send(self, message: EmailMessage) -> EmailResult:
        """Record the message."""
        if self.fail_with is not None:
            return EmailResult(success=False, error=self.fail_with)
        self.sent.append(message)
        return EmailResult(success=True, message_id=f"mock_{secrets.token_hex(6)}")

    def sent_to(self, email: str) -> list[EmailMessage]:
        """Messages addressed to ``email``."""
        return [m for m in self.sent if any(r.email == email for r in m.to)]
