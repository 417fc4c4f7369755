"""Domain layer DI providers."""

from dishka import Scope, provide

from gallery.config import (
    EmailSettings,
    IdentitySettings,
    InvitationSettings,
    Settings,
)
from gallery.domain.repository import (
    ArtistRepository,
    ArtworkRepository,
    InvitationRepository,
    UnitOfWork,
)
from gallery.domain.service import (
    AdminGuard,
    ArtistService,
    ArtworkService,
    DisplayOrderService,
    EmailClient,
    IdentityClient,
    IdentityService,
    InvitationService,
    NotificationService,
)
from gallery.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_admin_guard(self, settings: IdentitySettings) -> AdminGuard:
        """Provide role checks."""
        return AdminGuard(settings=settings)

    @provide
    def get_identity_service(
        self, identity_client: IdentityClient, settings: IdentitySettings
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(identity_client=identity_client, settings=settings)

    @provide
    def get_artist_service(self, artist_repository: ArtistRepository) -> ArtistService:
        """Provide artist domain service."""
        return ArtistService(artist_repository=artist_repository)

    @provide
    def get_artwork_service(
        self, artwork_repository: ArtworkRepository
    ) -> ArtworkService:
        """Provide artwork domain service."""
        return ArtworkService(artwork_repository=artwork_repository)

    @provide
    def get_display_order_service(
        self, artwork_repository: ArtworkRepository, unit_of_work: UnitOfWork
    ) -> DisplayOrderService:
        """Provide display order domain service."""
        return DisplayOrderService(
            artwork_repository=artwork_repository, unit_of_work=unit_of_work
        )

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        artist_repository: ArtistRepository,
        settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            artist_repository=artist_repository,
            settings=settings,
        )

    @provide
    def get_notification_service(
        self,
        email_client: EmailClient,
        email_settings: EmailSettings,
        settings: Settings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            email_client=email_client,
            settings=email_settings,
            frontend_url=settings.api.frontend_url,
        )
