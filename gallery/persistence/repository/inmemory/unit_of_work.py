"""In-memory unit of work for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from gallery.domain.repository import UnitOfWork

from .store import InMemoryStore


class InMemoryUnitOfWork(UnitOfWork):
    """Restores the store snapshot when the block raises."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Run the block, rolling the store back on any exception."""
        state = self.store.snapshot()
        try:
            yield
        except BaseException:
            self.store.restore(state)
            raise
