"""In-memory invitation repository for testing."""

from datetime import datetime

from sqlalchemy.exc import IntegrityError

from gallery.domain.model import ArtistInvitation
from gallery.domain.repository import InvitationRepository
from gallery.domain.value import InvitationCode, InvitationId

from .store import InMemoryStore


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, invitation_id: InvitationId) -> ArtistInvitation | None:
        """Find an invitation by ID."""
        return self.store.invitations.get(invitation_id)

    async def find_by_code(self, code: InvitationCode) -> ArtistInvitation | None:
        """Find an invitation by its code."""
        for invitation in self.store.invitations.values():
            if invitation.code == code:
                return invitation
        return None

    async def exists_unused_for_email(self, email: str) -> bool:
        """Check if an unredeemed invitation exists for an email."""
        return any(
            i.email == email and i.used_at is None
            for i in self.store.invitations.values()
        )

    async def create(self, invitation: ArtistInvitation) -> ArtistInvitation:
        """Insert a new invitation.

        Raises:
            IntegrityError: If the code is already taken
        """
        if await self.find_by_code(invitation.code) is not None:
            raise IntegrityError("Duplicate invitation code", None, Exception())
        stored = invitation.model_copy(
            update={"id": InvitationId(self.store.next_id("invitations"))}
        )
        self.store.invitations[stored.id] = stored
        return stored

    async def mark_used(
        self, invitation_id: InvitationId, used_at: datetime
    ) -> ArtistInvitation | None:
        """Set used_at if the invitation exists and is unused."""
        current = self.store.invitations.get(invitation_id)
        if current is None or current.is_used():
            return None
        used = current.model_copy(update={"used_at": used_at})
        self.store.invitations[invitation_id] = used
        return used

    async def delete(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation; True if one was removed."""
        return self.store.invitations.pop(invitation_id, None) is not None

    async def count_by_usage(self) -> tuple[int, int]:
        """Count (pending, used) invitations."""
        used = sum(1 for i in self.store.invitations.values() if i.is_used())
        return len(self.store.invitations) - used, used

    async def find_recent(self, limit: int = 10) -> list[ArtistInvitation]:
        """List the newest invitations."""
        ordered = sorted(
            self.store.invitations.values(),
            key=lambda i: (i.created_at, i.id),
            reverse=True,
        )
        return ordered[:limit]
