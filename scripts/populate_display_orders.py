#!/usr/bin/env python3
"""Recompute artwork display orders from the command line.

Operator tool: runs against the production container and skips the
admin check that guards the HTTP endpoint.
"""

import asyncio
import sys

import logfire

from gallery.config import Settings
from gallery.domain.service import DisplayOrderService
from gallery.util.di.container import create_container
from gallery.util.logging import get_logger, setup_logging
from gallery.util.observability import configure_logfire

logger = get_logger("gallery.scripts.populate_display_orders")


async def populate() -> int:
    """Run one recompute inside a request scope so the session commits."""
    container = create_container()
    try:
        async with container() as request_container:
            service = await request_container.get(DisplayOrderService)
            assignments = await service.recompute()
        return len(assignments)
    finally:
        await container.close()


def main() -> int:
    """Recompute display orders and report the number of updated artworks."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        count = asyncio.run(populate())
    except Exception as e:
        logfire.error(
            "Display order population failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        logger.error("Failed to populate display orders: %s", e)
        return 1

    logger.info("Successfully populated display orders for %d artworks", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
