"""Application layer DI providers."""

from dishka import Scope, provide

from gallery.application.usecase.artist import (
    SendPasswordResetUseCase,
    SetArtistVisibilityUseCase,
)
from gallery.application.usecase.artwork import (
    ApprovePendingArtworksUseCase,
    CreateArtworkUseCase,
    ReviewArtworkUseCase,
    SetArtworkVisibilityUseCase,
)
from gallery.application.usecase.display_order import (
    PopulateDisplayOrdersUseCase,
    UpdateArtistOrderUseCase,
    UpdateGlobalOrderUseCase,
)
from gallery.application.usecase.invitation import (
    DeleteInvitationUseCase,
    GetInvitationStatsUseCase,
    IssueInvitationUseCase,
    RedeemInvitationUseCase,
    ValidateInvitationUseCase,
)
from gallery.config import Settings
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import (
    AdminGuard,
    ArtistService,
    ArtworkService,
    DisplayOrderService,
    IdentityService,
    InvitationService,
    NotificationService,
)
from gallery.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Display order use cases
    @provide(scope=Scope.REQUEST)
    def get_populate_display_orders_use_case(
        self, admin_guard: AdminGuard, display_order_service: DisplayOrderService
    ) -> PopulateDisplayOrdersUseCase:
        """Provide populate display orders use case."""
        return PopulateDisplayOrdersUseCase(
            admin_guard=admin_guard, display_order_service=display_order_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_artist_order_use_case(
        self, admin_guard: AdminGuard, display_order_service: DisplayOrderService
    ) -> UpdateArtistOrderUseCase:
        """Provide update artist order use case."""
        return UpdateArtistOrderUseCase(
            admin_guard=admin_guard, display_order_service=display_order_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_global_order_use_case(
        self, admin_guard: AdminGuard, display_order_service: DisplayOrderService
    ) -> UpdateGlobalOrderUseCase:
        """Provide update global order use case."""
        return UpdateGlobalOrderUseCase(
            admin_guard=admin_guard, display_order_service=display_order_service
        )

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_issue_invitation_use_case(
        self,
        admin_guard: AdminGuard,
        invitation_service: InvitationService,
        identity_service: IdentityService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> IssueInvitationUseCase:
        """Provide issue invitation use case."""
        return IssueInvitationUseCase(
            admin_guard=admin_guard,
            invitation_service=invitation_service,
            identity_service=identity_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_redeem_invitation_use_case(
        self,
        admin_guard: AdminGuard,
        invitation_service: InvitationService,
        artist_service: ArtistService,
        identity_service: IdentityService,
        notification_service: NotificationService,
        unit_of_work: UnitOfWork,
    ) -> RedeemInvitationUseCase:
        """Provide redeem invitation use case."""
        return RedeemInvitationUseCase(
            admin_guard=admin_guard,
            invitation_service=invitation_service,
            artist_service=artist_service,
            identity_service=identity_service,
            notification_service=notification_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_validate_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_invitation_stats_use_case(
        self, admin_guard: AdminGuard, invitation_service: InvitationService
    ) -> GetInvitationStatsUseCase:
        """Provide invitation stats use case."""
        return GetInvitationStatsUseCase(
            admin_guard=admin_guard, invitation_service=invitation_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_invitation_use_case(
        self, admin_guard: AdminGuard, invitation_service: InvitationService
    ) -> DeleteInvitationUseCase:
        """Provide delete invitation use case."""
        return DeleteInvitationUseCase(
            admin_guard=admin_guard, invitation_service=invitation_service
        )

    # Artwork use cases
    @provide(scope=Scope.REQUEST)
    def get_create_artwork_use_case(
        self,
        admin_guard: AdminGuard,
        artist_service: ArtistService,
        artwork_service: ArtworkService,
        notification_service: NotificationService,
    ) -> CreateArtworkUseCase:
        """Provide create artwork use case."""
        return CreateArtworkUseCase(
            admin_guard=admin_guard,
            artist_service=artist_service,
            artwork_service=artwork_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_review_artwork_use_case(
        self,
        admin_guard: AdminGuard,
        artist_service: ArtistService,
        artwork_service: ArtworkService,
        notification_service: NotificationService,
    ) -> ReviewArtworkUseCase:
        """Provide review artwork use case."""
        return ReviewArtworkUseCase(
            admin_guard=admin_guard,
            artist_service=artist_service,
            artwork_service=artwork_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_approve_pending_artworks_use_case(
        self,
        admin_guard: AdminGuard,
        artwork_service: ArtworkService,
        unit_of_work: UnitOfWork,
    ) -> ApprovePendingArtworksUseCase:
        """Provide approve pending artworks use case."""
        return ApprovePendingArtworksUseCase(
            admin_guard=admin_guard,
            artwork_service=artwork_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_set_artwork_visibility_use_case(
        self, admin_guard: AdminGuard, artwork_service: ArtworkService
    ) -> SetArtworkVisibilityUseCase:
        """Provide set artwork visibility use case."""
        return SetArtworkVisibilityUseCase(
            admin_guard=admin_guard, artwork_service=artwork_service
        )

    # Artist use cases
    @provide(scope=Scope.REQUEST)
    def get_set_artist_visibility_use_case(
        self, admin_guard: AdminGuard, artist_service: ArtistService
    ) -> SetArtistVisibilityUseCase:
        """Provide set artist visibility use case."""
        return SetArtistVisibilityUseCase(
            admin_guard=admin_guard, artist_service=artist_service
        )

    @provide(scope=Scope.REQUEST)
    def get_send_password_reset_use_case(
        self,
        admin_guard: AdminGuard,
        identity_service: IdentityService,
        settings: Settings,
    ) -> SendPasswordResetUseCase:
        """Provide send password reset use case."""
        return SendPasswordResetUseCase(
            admin_guard=admin_guard,
            identity_service=identity_service,
            settings=settings,
        )
