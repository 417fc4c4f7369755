"""Artist invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from gallery.domain.model.invitation import ArtistInvitation
from gallery.domain.value import InvitationCode, InvitationId


class InvitationRepository(ABC):
    """Repository for ArtistInvitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> ArtistInvitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_code(self, code: InvitationCode) -> ArtistInvitation | None:
        """Find an invitation by its code.

        Used when an invitee opens the setup link.

        Args:
            code: The invitation code

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_unused_for_email(self, email: str) -> bool:
        """Check if an invitation with null ``used_at`` exists for an email.

        Expired-but-unused invitations count as unused.

        Args:
            email: Invitee email, compared as stored

        Returns:
            True if such an invitation exists
        """
        pass

    @abstractmethod
    async def create(self, invitation: ArtistInvitation) -> ArtistInvitation:
        """Insert a new invitation.

        Args:
            invitation: Invitation without an id

        Returns:
            The stored invitation with its assigned id

        Raises:
            IntegrityError: If the code is already taken
        """
        pass

    @abstractmethod
    async def mark_used(
        self, invitation_id: InvitationId, used_at: datetime
    ) -> ArtistInvitation | None:
        """Set ``used_at`` on an invitation that is still unused.

        The check and the write are one statement, so only one of two
        concurrent redemptions can succeed.

        Returns:
            The updated invitation, or None if no unused invitation has this id
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation.

        Returns:
            True if a row was deleted, False if none matched
        """
        pass

    @abstractmethod
    async def count_by_usage(self) -> tuple[int, int]:
        """Count invitations split by redemption.

        Returns:
            Tuple of (pending, used) where pending means ``used_at`` is null
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 10) -> list[ArtistInvitation]:
        """List the most recently created invitations, newest first.

        Args:
            limit: Maximum number of results
        """
        pass
