"""Slug helpers shared by artist and artwork services."""

import re
from collections.abc import Awaitable, Callable

import logfire

from gallery.domain.value import Slug

MAX_SLUG_LENGTH = 100


def slugify(text: str) -> str:
    """Convert text to URL-safe slug format.

    - Converts to lowercase
    - Replaces runs of non-alphanumeric chars with a single hyphen
    - Strips leading/trailing hyphens
    - Truncates to 100 characters

    Args:
        text: Name or title to slugify

    Returns:
        Slug string (may be empty if text has no valid chars)
    """
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return slug.strip("-")[:MAX_SLUG_LENGTH].rstrip("-")


async def generate_unique_slug(
    text: str,
    fallback: str,
    slug_exists: Callable[[Slug], Awaitable[bool]],
) -> Slug:
    """Generate a slug that no existing row uses.

    Handles collisions by appending numeric suffixes.

    Args:
        text: Name or title to slugify
        fallback: Base slug when the text yields nothing
        slug_exists: Repository lookup for taken slugs

    Returns:
        Unique slug
    """
    base_slug_str = slugify(text) or fallback

    slug_str = base_slug_str
    counter = 1
    while await slug_exists(Slug(slug_str)):
        suffix = f"-{counter}"
        # Ensure we don't exceed 100 chars with suffix
        slug_str = base_slug_str[: MAX_SLUG_LENGTH - len(suffix)].rstrip("-") + suffix
        counter += 1
        logfire.debug(
            "Slug collision, trying with suffix",
            base_slug=base_slug_str,
            attempt=slug_str,
            counter=counter,
        )

    return Slug(slug_str)
