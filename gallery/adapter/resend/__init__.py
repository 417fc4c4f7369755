"""Resend email adapter."""

from .client import MockEmailClient, ResendEmailClient, html_to_plain_text

__all__ = ["ResendEmailClient", "MockEmailClient", "html_to_plain_text"]
