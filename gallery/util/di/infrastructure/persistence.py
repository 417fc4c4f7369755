"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from gallery.config import Settings
from gallery.domain.repository import (
    ArtistRepository,
    ArtworkRepository,
    InvitationRepository,
    UnitOfWork,
)
from gallery.persistence.database import create_engine, create_session_factory
from gallery.persistence.repository import (
    PostgresArtistRepository,
    PostgresArtworkRepository,
    PostgresInvitationRepository,
)
from gallery.persistence.unit_of_work import PostgresUnitOfWork
from gallery.util.di.base import ProviderBase
from gallery.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work on the request session."""
        return PostgresUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_artist_repository(self, session: AsyncSession) -> ArtistRepository:
        """Provide Artist repository."""
        return PostgresArtistRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_artwork_repository(self, session: AsyncSession) -> ArtworkRepository:
        """Provide Artwork repository."""
        return PostgresArtworkRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(
        self, session: AsyncSession
    ) -> InvitationRepository:
        """Provide ArtistInvitation repository."""
        return PostgresInvitationRepository(session)
