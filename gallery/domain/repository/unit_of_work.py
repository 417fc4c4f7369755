"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Groups repository writes into one atomic step.

    Usage:
        async with uow.transaction():
            await artist_repository.create(artist)
            await invitation_repository.mark_used(invitation.id, now)

    Any exception raised inside the block discards every write made in it.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction scoped to the ``async with`` block."""
        pass
