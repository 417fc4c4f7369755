"""PostgreSQL unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work backed by a savepoint on the request session.

    The request session commits at the end of the request; a savepoint
    lets a block be rolled back on its own when it raises.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Run the block inside a nested transaction."""
        async with self.session.begin_nested():
            yield
