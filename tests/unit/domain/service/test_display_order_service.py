"""Unit tests for DisplayOrderService."""

import pytest

from gallery.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from gallery.domain.repository import ArtworkRepository
from gallery.domain.service import DisplayOrderService
from gallery.domain.value import ArtworkId
from tests.conftest import at, make_artwork
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _seed(repo: ArtworkRepository, *artworks):
    return [await repo.create(artwork) for artwork in artworks]


class TestComputeAssignments:
    """Tests for the pure ordering computation."""

    def test_empty_gallery(self):
        """No artworks means no assignments."""
        assert DisplayOrderService.compute_assignments([]) == []

    def test_groups_artists_by_first_artwork(self):
        """Artist groups are visited in order of each artist's oldest artwork."""
        # Arrange
        artworks = [
            make_artwork(1, "a-late", at(3)).model_copy(update={"id": ArtworkId(1)}),
            make_artwork(2, "b-first", at(0)).model_copy(update={"id": ArtworkId(2)}),
            make_artwork(1, "a-early", at(1)).model_copy(update={"id": ArtworkId(3)}),
        ]

        # Act
        assignments = DisplayOrderService.compute_assignments(artworks)

        # Assert
        ranks = {
            a.artwork_id: (a.artist_display_order, a.global_display_order)
            for a in assignments
        }
        assert ranks == {2: (1, 1), 3: (1, 2), 1: (2, 3)}

    def test_ties_on_created_at_break_by_id(self):
        """Equal timestamps are ordered by ascending id."""
        # Arrange
        artworks = [
            make_artwork(1, "second", at(0)).model_copy(update={"id": ArtworkId(9)}),
            make_artwork(1, "first", at(0)).model_copy(update={"id": ArtworkId(4)}),
        ]

        # Act
        assignments = DisplayOrderService.compute_assignments(artworks)

        # Assert
        assert [a.artwork_id for a in assignments] == [4, 9]
        assert [a.artist_display_order for a in assignments] == [1, 2]

    def test_hidden_artworks_do_not_advance_counters(self):
        """Hidden artworks are skipped without leaving gaps."""
        # Arrange
        artworks = [
            make_artwork(1, "one", at(0)).model_copy(update={"id": ArtworkId(1)}),
            make_artwork(1, "hidden", at(1), is_visible=False).model_copy(
                update={"id": ArtworkId(2)}
            ),
            make_artwork(1, "two", at(2)).model_copy(update={"id": ArtworkId(3)}),
        ]

        # Act
        assignments = DisplayOrderService.compute_assignments(artworks)

        # Assert
        assert [(a.artwork_id, a.global_display_order) for a in assignments] == [
            (1, 1),
            (3, 2),
        ]

    def test_rejects_unsaved_artwork(self):
        """A visible artwork without an id cannot be ranked."""
        with pytest.raises(ValidationError):
            DisplayOrderService.compute_assignments([make_artwork(1, "new", at(0))])


class TestRecompute:
    """Tests for recompute method."""

    @pytest.mark.asyncio
    async def test_worked_example(self, unit_env):
        """Two artists with one hidden artwork get the documented ranks."""
        # Arrange
        service = await unit_env.get(DisplayOrderService)
        repo = await unit_env.get(ArtworkRepository)
        b1, a1, a_hidden, a2 = await _seed(
            repo,
            make_artwork(2, "b-one", at(0)),
            make_artwork(1, "a-one", at(1)),
            make_artwork(
                1,
                "a-hidden",
                at(2),
                is_visible=False,
                artist_display_order=7,
                global_display_order=9,
            ),
            make_artwork(1, "a-two", at(3)),
        )

        # Act
        assignments = await service.recompute()

        # Assert
        assert len(assignments) == 3

        stored_b1 = await repo.find_by_id(b1.id)
        stored_a1 = await repo.find_by_id(a1.id)
        stored_hidden = await repo.find_by_id(a_hidden.id)
        stored_a2 = await repo.find_by_id(a2.id)

        assert (stored_b1.artist_display_order, stored_b1.global_display_order) == (1, 1)
        assert (stored_a1.artist_display_order, stored_a1.global_display_order) == (1, 2)
        assert (stored_a2.artist_display_order, stored_a2.global_display_order) == (2, 3)

        # Hidden artwork keeps its stale values
        assert stored_hidden.artist_display_order == 7
        assert stored_hidden.global_display_order == 9

    @pytest.mark.asyncio
    async def test_ranks_form_contiguous_sequences(self, unit_env):
        """Global ranks are 1..n and each artist's ranks are 1..k."""
        # Arrange
        service = await unit_env.get(DisplayOrderService)
        repo = await unit_env.get(ArtworkRepository)
        await _seed(
            repo,
            make_artwork(3, "c-one", at(5)),
            make_artwork(1, "a-one", at(0)),
            make_artwork(2, "b-one", at(2)),
            make_artwork(1, "a-two", at(4)),
            make_artwork(3, "c-two", at(6)),
            make_artwork(2, "b-two", at(1), is_visible=False),
        )

        # Act
        await service.recompute()

        # Assert
        visible = [a for a in await repo.list_by_creation() if a.is_visible]
        assert sorted(a.global_display_order for a in visible) == list(
            range(1, len(visible) + 1)
        )
        for artist_id in {a.artist_id for a in visible}:
            ranks = sorted(
                a.artist_display_order for a in visible if a.artist_id == artist_id
            )
            assert ranks == list(range(1, len(ranks) + 1))

    @pytest.mark.asyncio
    async def test_is_idempotent(self, unit_env):
        """Running twice without changes yields the same state."""
        # Arrange
        service = await unit_env.get(DisplayOrderService)
        repo = await unit_env.get(ArtworkRepository)
        await _seed(
            repo,
            make_artwork(1, "one", at(0)),
            make_artwork(2, "two", at(1)),
            make_artwork(1, "three", at(2)),
        )

        # Act
        first = await service.recompute()
        state_after_first = await repo.list_by_creation()
        second = await service.recompute()
        state_after_second = await repo.list_by_creation()

        # Assert
        assert first == second
        assert state_after_first == state_after_second

    @pytest.mark.asyncio
    async def test_overwrites_manual_ordering(self, unit_env):
        """Recompute replaces ranks previously set by hand."""
        # Arrange
        service = await unit_env.get(DisplayOrderService)
        repo = await unit_env.get(ArtworkRepository)
        first, second = await _seed(
            repo,
            make_artwork(1, "one", at(0)),
            make_artwork(1, "two", at(1)),
        )
        await service.apply_artist_order([(first.id, 2), (second.id, 1)])

        # Act
        await service.recompute()

        # Assert
        assert (await repo.find_by_id(first.id)).artist_display_order == 1
        assert (await repo.find_by_id(second.id)).artist_display_order == 2

    @pytest.mark.asyncio
    async def test_failed_write_rolls_back_run(self, unit_env, monkeypatch):
        """A store failure part way through keeps none of the run's writes."""
        # Arrange
        service = await unit_env.get(DisplayOrderService)
        repo = await unit_env.get(ArtworkRepository)
        await _seed(
            repo,
            make_artwork(1, "one", at(0)),
            make_artwork(1, "two", at(1)),
            make_artwork(1, "three", at(2)),
        )

        original = repo.update_display_orders
        calls = []

        async def flaky_update(artwork_id, artist_order, global_order):
            calls.append(artwork_id)
            if len(calls) == 2:
                raise RuntimeError("connection lost")
            await original(artwork_id, artist_order, global_order)

        monkeypatch.setattr(repo, "update_display_orders", flaky_update)

        # Act & Assert
        with pytest.raises(RuntimeError, match="connection lost"):
            await service.recompute()

        stored = await repo.list_by_creation()
        assert all(a.artist_display_order == 0 for a in stored)
        assert all(a.global_display_order == 0 for a in stored)


class TestApplyArtistOrder:
    """Tests for apply_artist_order method."""

    @pytest.mark.asyncio
    async def test_updates_only_artist_order(self, unit_env):
        """Manual artist ordering leaves the global order alone."""
        # Arrange
        service = await unit_env.get(DisplayOrderService)
        repo = await unit_env.get(ArtworkRepository)
        (artwork,) = await _seed(
            repo, make_artwork(1, "one", at(0), global_display_order=4)
        )

        # Act
        count = await service.apply_artist_order([(artwork.id, 3)], owner_id=1)

        # Assert
        assert count == 1
        stored = await repo.find_by_id(artwork.id)
        assert stored.artist_display_order == 3
        assert stored.global_display_order == 4

    @pytest.mark.asyncio
    async def test_rejects_other_artists_artwork(self, unit_env):
        """An owner cannot reorder another artist's work; nothing is written."""
        # Arrange
        service = await unit_env.get(DisplayOrderService)
        repo = await unit_env.get(ArtworkRepository)
        mine, theirs = await _seed(
            repo,
            make_artwork(1, "mine", at(0)),
            make_artwork(2, "theirs", at(1)),
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError, match="your own artworks"):
            await service.apply_artist_order(
                [(mine.id, 5), (theirs.id, 6)], owner_id=1
            )

        assert (await repo.find_by_id(mine.id)).artist_display_order == 0

    @pytest.mark.asyncio
    async def test_unknown_artwork(self, unit_env):
        """Reordering a missing artwork raises NotFoundError."""
        service = await unit_env.get(DisplayOrderService)

        with pytest.raises(NotFoundError, match="Artwork not found: 404"):
            await service.apply_artist_order([(ArtworkId(404), 1)])

    @pytest.mark.asyncio
    async def test_empty_list(self, unit_env):
        """An empty ordering is rejected."""
        service = await unit_env.get(DisplayOrderService)

        with pytest.raises(ValidationError, match="No artworks to reorder"):
            await service.apply_artist_order([])


class TestApplyGlobalOrder:
    """Tests for apply_global_order method."""

    @pytest.mark.asyncio
    async def test_updates_global_order(self, unit_env):
        """Manual global ordering is written as given."""
        # Arrange
        service = await unit_env.get(DisplayOrderService)
        repo = await unit_env.get(ArtworkRepository)
        first, second = await _seed(
            repo,
            make_artwork(1, "one", at(0)),
            make_artwork(2, "two", at(1)),
        )

        # Act
        count = await service.apply_global_order([(first.id, 2), (second.id, 1)])

        # Assert
        assert count == 2
        assert (await repo.find_by_id(first.id)).global_display_order == 2
        assert (await repo.find_by_id(second.id)).global_display_order == 1

    @pytest.mark.asyncio
    async def test_missing_artwork_rolls_back(self, unit_env):
        """A missing artwork discards earlier writes of the same call."""
        # Arrange
        service = await unit_env.get(DisplayOrderService)
        repo = await unit_env.get(ArtworkRepository)
        (artwork,) = await _seed(repo, make_artwork(1, "one", at(0)))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.apply_global_order([(artwork.id, 8), (ArtworkId(999), 9)])

        assert (await repo.find_by_id(artwork.id)).global_display_order == 0
