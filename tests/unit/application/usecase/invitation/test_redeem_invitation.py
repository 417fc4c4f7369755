"""Unit tests for RedeemInvitationUseCase."""

from datetime import timedelta

import pytest

from gallery.adapter.stack import MockIdentityClient
from gallery.application.usecase.invitation import (
    RedeemInvitationRequest,
    RedeemInvitationUseCase,
)
from gallery.domain.error import (
    InvalidInvitationCodeError,
    InvitationAlreadyUsedError,
    InvitationEmailMismatchError,
    InvitationExpiredError,
    NotAuthenticatedError,
)
from gallery.domain.model.common import utc_now
from gallery.domain.repository import ArtistRepository, InvitationRepository
from gallery.domain.service import EmailClient, IdentityClient, IdentityService
from gallery.domain.value import InvitationCode
from tests.conftest import make_invitation
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

EMAIL = "maria@example.com"
CODE = "INVITE-MARIA001"


async def _signed_in(unit_env, email: str = EMAIL):
    """Resolve the mock token for ``email`` into a principal."""
    identity = await unit_env.get(IdentityService)
    return await identity.get_current_user(MockIdentityClient.token_for(email))


def _request(actor, code: str = CODE) -> RedeemInvitationRequest:
    return RedeemInvitationRequest(
        actor=actor,
        code=code,
        bio="Ceramic artist working with local clay.",
        specialty="Ceramics",
        exhibitions="Clay Works 2022\n\nFired Up 2023",
        profile_image="https://cdn.example.com/maria.jpg",
    )


class TestRedeemInvitation:
    """Tests for RedeemInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_redeem_success(self, unit_env):
        """Redemption creates the artist, uses the code and links the login."""
        # Arrange
        use_case = await unit_env.get(RedeemInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        artists = await unit_env.get(ArtistRepository)
        identity = await unit_env.get(IdentityClient)
        emails = await unit_env.get(EmailClient)
        invitation = await invitations.create(make_invitation(email=EMAIL, code=CODE))
        actor = await _signed_in(unit_env)

        # Act
        response = await use_case.execute(_request(actor))

        # Assert
        assert response.account_linked is True
        assert response.welcome_email_sent is True

        artist = await artists.find_by_id(response.artist_id)
        assert artist.email == EMAIL
        assert artist.exhibitions == ["Clay Works 2022", "Fired Up 2023"]
        assert artist.profile_image == "https://cdn.example.com/maria.jpg"

        stored = await invitations.find_by_id(invitation.id)
        assert stored.used_at is not None

        account = await identity.get_user(actor.user_id)
        assert account.server_metadata["artistID"] == response.artist_id

        assert len(emails.sent_to(EMAIL)) == 1

    @pytest.mark.asyncio
    async def test_second_redemption_rejected(self, unit_env):
        """A code works once; the second attempt creates nothing."""
        # Arrange
        use_case = await unit_env.get(RedeemInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        artists = await unit_env.get(ArtistRepository)
        await invitations.create(make_invitation(email=EMAIL, code=CODE))
        actor = await _signed_in(unit_env)
        first = await use_case.execute(_request(actor))

        # Act & Assert
        with pytest.raises(InvitationAlreadyUsedError):
            await use_case.execute(_request(actor))

        assert await artists.find_by_email(EMAIL) is not None
        assert await artists.find_by_id(first.artist_id + 1) is None

    @pytest.mark.asyncio
    async def test_unknown_code(self, unit_env):
        use_case = await unit_env.get(RedeemInvitationUseCase)
        actor = await _signed_in(unit_env)

        with pytest.raises(InvalidInvitationCodeError):
            await use_case.execute(_request(actor, code="INVITE-UNKNOWN0"))

    @pytest.mark.asyncio
    async def test_blank_code(self, unit_env):
        """A whitespace-only code is reported as invalid, not as a server error."""
        use_case = await unit_env.get(RedeemInvitationUseCase)
        actor = await _signed_in(unit_env)

        with pytest.raises(InvalidInvitationCodeError, match="Invalid invitation code"):
            await use_case.execute(_request(actor, code="   "))

    @pytest.mark.asyncio
    async def test_expired(self, unit_env):
        """Expired invitations cannot be redeemed."""
        # Arrange
        use_case = await unit_env.get(RedeemInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        await invitations.create(
            make_invitation(
                email=EMAIL, code=CODE, created_at=utc_now() - timedelta(days=8)
            )
        )
        actor = await _signed_in(unit_env)

        # Act & Assert
        with pytest.raises(InvitationExpiredError):
            await use_case.execute(_request(actor))

    @pytest.mark.asyncio
    async def test_email_mismatch(self, unit_env):
        """A different signed-in email cannot redeem the invitation."""
        # Arrange
        use_case = await unit_env.get(RedeemInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        artists = await unit_env.get(ArtistRepository)
        await invitations.create(make_invitation(email=EMAIL, code=CODE))
        actor = await _signed_in(unit_env, "someone@example.com")

        # Act & Assert
        with pytest.raises(InvitationEmailMismatchError):
            await use_case.execute(_request(actor))

        assert await artists.find_by_email(EMAIL) is None

    @pytest.mark.asyncio
    async def test_email_match_is_case_sensitive(self, unit_env):
        """Emails differing only in case do not match."""
        # Arrange
        use_case = await unit_env.get(RedeemInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        await invitations.create(make_invitation(email=EMAIL, code=CODE))
        actor = await _signed_in(unit_env, EMAIL.upper())

        # Act & Assert
        with pytest.raises(InvitationEmailMismatchError):
            await use_case.execute(_request(actor))

    @pytest.mark.asyncio
    async def test_anonymous(self, unit_env):
        use_case = await unit_env.get(RedeemInvitationUseCase)

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(_request(None))

    @pytest.mark.asyncio
    async def test_failed_mark_used_rolls_back_artist(self, unit_env, monkeypatch):
        """If the code cannot be marked used, no artist row is left behind."""
        # Arrange
        use_case = await unit_env.get(RedeemInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        artists = await unit_env.get(ArtistRepository)
        invitation = await invitations.create(make_invitation(email=EMAIL, code=CODE))
        actor = await _signed_in(unit_env)

        async def failing_mark_used(_invitation_id, _used_at):
            raise RuntimeError("write failed")

        monkeypatch.setattr(invitations, "mark_used", failing_mark_used)

        # Act & Assert
        with pytest.raises(RuntimeError, match="write failed"):
            await use_case.execute(_request(actor))

        assert await artists.find_by_email(EMAIL) is None
        assert (await invitations.find_by_code(InvitationCode(CODE))).used_at is None
        assert invitation.used_at is None

    @pytest.mark.asyncio
    async def test_link_failure_is_not_fatal(self, unit_env):
        """The artist is kept when the identity provider is down."""
        # Arrange
        use_case = await unit_env.get(RedeemInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        identity = await unit_env.get(IdentityClient)
        await invitations.create(make_invitation(email=EMAIL, code=CODE))
        actor = await _signed_in(unit_env)
        identity.fail_requests = True

        # Act
        response = await use_case.execute(_request(actor))

        # Assert
        assert response.account_linked is False
        assert (await invitations.find_by_code(InvitationCode(CODE))).used_at is not None

    @pytest.mark.asyncio
    async def test_welcome_failure_is_not_fatal(self, unit_env):
        """A failed welcome email does not undo the redemption."""
        # Arrange
        use_case = await unit_env.get(RedeemInvitationUseCase)
        invitations = await unit_env.get(InvitationRepository)
        emails = await unit_env.get(EmailClient)
        await invitations.create(make_invitation(email=EMAIL, code=CODE))
        actor = await _signed_in(unit_env)
        emails.fail_with = "Mailbox unavailable"

        # Act
        response = await use_case.execute(_request(actor))

        # Assert
        assert response.welcome_email_sent is False
        assert response.account_linked is True
