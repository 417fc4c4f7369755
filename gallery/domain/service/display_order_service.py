"""Display order domain service.

Visible artworks carry two 1-based ranks: one within their artist's
visible artworks and one across the whole gallery. Both are recomputed
from scratch from creation time.
"""

from collections.abc import Iterable

import logfire

from gallery.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from gallery.domain.model.artwork import Artwork
from gallery.domain.repository import ArtworkRepository, UnitOfWork
from gallery.domain.value import ArtistId, ArtworkId
from gallery.domain.value.common import ValueObject

from .base import Service


class DisplayOrderAssignment(ValueObject):
    """Ranks assigned to one visible artwork."""

    artwork_id: ArtworkId
    artist_display_order: int
    global_display_order: int


class DisplayOrderService(Service):
    """Domain service for artwork display ordering."""

    def __init__(
        self, artwork_repository: ArtworkRepository, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize display order service.

        Args:
            artwork_repository: Artwork repository
            unit_of_work: Transaction boundary for multi-row writes
        """
        self.artwork_repository = artwork_repository
        self.unit_of_work = unit_of_work

    @staticmethod
    def compute_assignments(
        artworks: Iterable[Artwork],
    ) -> list[DisplayOrderAssignment]:
        """Derive display orders for a set of artworks.

        Artworks are ordered by (created_at, id) and grouped by artist.
        Groups are visited in order of each artist's oldest artwork; the
        global counter runs across groups in that order. Hidden artworks
        get no assignment and do not advance either counter.

        Args:
            artworks: Every artwork in the gallery

        Returns:
            Assignments for visible artworks, in the order they were made
        """
        ordered = sorted(artworks, key=lambda a: (a.created_at, a.id or 0))

        # dict preserves first-occurrence order of each artist
        groups: dict[ArtistId, list[Artwork]] = {}
        for artwork in ordered:
            groups.setdefault(artwork.artist_id, []).append(artwork)

        assignments: list[DisplayOrderAssignment] = []
        global_order = 1
        for group in groups.values():
            artist_order = 1
            for artwork in group:
                if not artwork.is_visible:
                    continue
                if artwork.id is None:
                    raise ValidationError("Cannot order an artwork without an id")
                assignments.append(
                    DisplayOrderAssignment(
                        artwork_id=artwork.id,
                        artist_display_order=artist_order,
                        global_display_order=global_order,
                    )
                )
                artist_order += 1
                global_order += 1

        return assignments

    async def recompute(self) -> list[DisplayOrderAssignment]:
        """Recompute and persist display orders for every visible artwork.

        Writes one row at a time inside a single transaction; a failed
        write discards all earlier writes of the run.

        Returns:
            The persisted assignments
        """
        with logfire.span("display_order_service.recompute"):
            artworks = await self.artwork_repository.list_by_creation()
            assignments = self.compute_assignments(artworks)

            async with self.unit_of_work.transaction():
                for assignment in assignments:
                    await self.artwork_repository.update_display_orders(
                        assignment.artwork_id,
                        assignment.artist_display_order,
                        assignment.global_display_order,
                    )

            logfire.info(
                "Display orders recomputed",
                total_artworks=len(artworks),
                updated=len(assignments),
            )
            return assignments

    async def apply_artist_order(
        self,
        orders: list[tuple[ArtworkId, int]],
        owner_id: ArtistId | None = None,
    ) -> int:
        """Apply a manual per-artist ordering.

        Args:
            orders: (artwork id, artist display order) pairs
            owner_id: When set, every artwork must belong to this artist

        Returns:
            Number of artworks updated

        Raises:
            ValidationError: If no orders are given
            NotFoundError: If an artwork does not exist
            NotAuthorizedError: If an artwork belongs to another artist
        """
        with logfire.span(
            "display_order_service.apply_artist_order",
            count=len(orders),
            owner_id=owner_id,
        ):
            if not orders:
                raise ValidationError("No artworks to reorder")

            async with self.unit_of_work.transaction():
                for artwork_id, artist_order in orders:
                    artwork = await self.artwork_repository.find_by_id(artwork_id)
                    if artwork is None:
                        raise NotFoundError("Artwork", str(artwork_id))
                    if owner_id is not None and artwork.artist_id != owner_id:
                        logfire.warn(
                            "Reorder of another artist's artwork rejected",
                            artwork_id=artwork_id,
                            owner_id=owner_id,
                        )
                        raise NotAuthorizedError(
                            "Unauthorized: You can only reorder your own artworks"
                        )
                    await self.artwork_repository.update_artist_display_order(
                        artwork_id, artist_order
                    )

            logfire.info("Artist display order updated", count=len(orders))
            return len(orders)

    async def apply_global_order(self, orders: list[tuple[ArtworkId, int]]) -> int:
        """Apply a manual gallery-wide ordering.

        Args:
            orders: (artwork id, global display order) pairs

        Returns:
            Number of artworks updated

        Raises:
            ValidationError: If no orders are given
            NotFoundError: If an artwork does not exist
        """
        with logfire.span(
            "display_order_service.apply_global_order", count=len(orders)
        ):
            if not orders:
                raise ValidationError("No artworks to reorder")

            async with self.unit_of_work.transaction():
                for artwork_id, global_order in orders:
                    await self.artwork_repository.update_global_display_order(
                        artwork_id, global_order
                    )

            logfire.info("Global display order updated", count=len(orders))
            return len(orders)
