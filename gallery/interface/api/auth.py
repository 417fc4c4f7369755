"""Access token extraction for Stack Auth sessions."""

from fastapi import Cookie, Header


def access_token(
    x_stack_access_token: str | None = Header(default=None),
    stack_access_token: str | None = Cookie(default=None, alias="stack-access-token"),
) -> str | None:
    """Read the caller's access token.

    The ``x-stack-access-token`` header wins over the cookie.
    """
    return x_stack_access_token or stack_access_token
