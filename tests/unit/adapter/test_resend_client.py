"""Tests for the Resend email client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from gallery.adapter.resend import ResendEmailClient, html_to_plain_text
from gallery.domain.service import EmailMessage, EmailRecipient


def _message(**kwargs) -> EmailMessage:
    return EmailMessage(
        to=[EmailRecipient(email="jane@example.com", name="Jane Doe")],
        subject="Hello",
        html="<h1>Welcome</h1><p>Glad you&#39;re here.</p>",
        **kwargs,
    )


def _client(api_key: str | None = "re_test") -> ResendEmailClient:
    return ResendEmailClient(
        api_key=api_key,
        api_url="https://api.resend.test/emails",
        default_from="Gallery <noreply@example.com>",
        default_bcc=["archive@example.com"],
    )


class TestHtmlToPlainText:
    """Tests for html_to_plain_text."""

    def test_strips_tags_and_styles(self):
        markup = (
            "<html><head><style>p { color: red; }</style></head>"
            "<body><h1>Title</h1><p>First &amp; second</p><br>Last</body></html>"
        )

        assert html_to_plain_text(markup) == "Title\n\nFirst & second\n\nLast"

    def test_collapses_blank_lines(self):
        assert html_to_plain_text("<p>a</p>\n\n\n<p>b</p>") == "a\n\nb"


class TestResendEmailClient:
    """Tests for ResendEmailClient."""

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        """Without a key sends fail without any HTTP call."""
        with patch("httpx.AsyncClient") as mock_client:
            result = await _client(api_key=None).send(_message())

        assert result.success is False
        assert result.error == "Email service not configured"
        mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_send_payload(self):
        """The payload carries defaults, bcc and a derived text body."""
        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=httpx.Response(200, json={"id": "msg_1"}))
            mock_client.return_value.__aenter__.return_value.post = post

            result = await _client().send(_message(reply_to="admin@example.com"))

        assert result.success is True
        assert result.message_id == "msg_1"

        payload = post.call_args.kwargs["json"]
        assert payload["from"] == "Gallery <noreply@example.com>"
        assert payload["to"] == ["Jane Doe <jane@example.com>"]
        assert payload["bcc"] == ["archive@example.com"]
        assert payload["text"] == "Welcome\n\nGlad you're here."
        assert payload["reply_to"] == "admin@example.com"
        assert "cc" not in payload
        assert post.call_args.kwargs["headers"]["Authorization"] == "Bearer re_test"

    @pytest.mark.asyncio
    async def test_api_error(self):
        """Error statuses are reported with the API message."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=httpx.Response(
                    422, json={"message": "Invalid `to` field"}
                )
            )

            result = await _client().send(_message())

        assert result.success is False
        assert result.error == "Invalid `to` field"

    @pytest.mark.asyncio
    async def test_transport_error(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            result = await _client().send(_message())

        assert result.success is False
        assert result.error.startswith("HTTP error sending email")
