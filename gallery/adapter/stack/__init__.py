"""Stack Auth identity adapter."""

from .client import MockIdentityClient, StackAuthClient

__all__ = ["StackAuthClient", "MockIdentityClient"]
