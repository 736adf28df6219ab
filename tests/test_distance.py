"""Tests for the distance classifier."""

from __future__ import annotations

from conftest import APPLE, CLEARING, COIN_A, HUT, LAMP, NORTH, PLAYER, WOLF

from gloomwood.engine import classify
from gloomwood.models import Distance


class TestClassify:
    """Tests for classify()."""

    def test_self_is_player(self, world):
        assert classify(world, PLAYER, PLAYER) == Distance.PLAYER

    def test_every_entity_is_player_distance_from_itself(self, world):
        for entity in world.entities:
            assert classify(world, entity.id, entity.id) == Distance.PLAYER

    def test_carried_item_is_held(self, world):
        assert classify(world, PLAYER, APPLE) == Distance.HELD

    def test_containment_implies_held(self, world):
        """Whenever b sits directly in a, b is HELD from a."""
        for entity in world.entities:
            if entity.contained_in is not None:
                assert classify(world, entity.contained_in, entity.id) == Distance.HELD

    def test_own_room_is_location(self, world):
        assert classify(world, PLAYER, CLEARING) == Distance.LOCATION

    def test_container_of_item_is_location(self, world):
        assert classify(world, APPLE, PLAYER) == Distance.LOCATION

    def test_same_room_is_here(self, world):
        assert classify(world, PLAYER, COIN_A) == Distance.HERE
        assert classify(world, PLAYER, NORTH) == Distance.HERE

    def test_room_behind_passage_is_over_there(self, world):
        assert classify(world, PLAYER, HUT) == Distance.OVER_THERE

    def test_other_room_contents_are_not_here(self, world):
        assert classify(world, PLAYER, WOLF) == Distance.NOT_HERE

    def test_item_carried_by_someone_else_is_not_here(self, world):
        assert classify(world, PLAYER, LAMP) == Distance.NOT_HERE

    def test_missing_target_is_unknown(self, world):
        assert classify(world, PLAYER, None) == Distance.UNKNOWN
        assert classify(world, PLAYER, 999) == Distance.UNKNOWN

    def test_not_symmetric(self, world):
        """Only the PLAYER case gives the same answer both ways round."""
        for a in world.entities:
            for b in world.entities:
                if a.id == b.id:
                    continue
                forward = classify(world, a.id, b.id)
                backward = classify(world, b.id, a.id)
                if forward in (Distance.HELD, Distance.LOCATION):
                    assert forward != backward

    def test_moving_the_player_changes_distances(self, world):
        world.player.contained_in = HUT
        assert classify(world, PLAYER, WOLF) == Distance.HERE
        assert classify(world, PLAYER, CLEARING) == Distance.OVER_THERE
        assert classify(world, PLAYER, COIN_A) == Distance.NOT_HERE


class TestDistanceOrder:
    """The ordering is what handlers use to bound lookups."""

    def test_total_order(self):
        assert (
            Distance.PLAYER
            < Distance.HELD
            < Distance.LOCATION
            < Distance.HERE
            < Distance.OVER_THERE
            < Distance.NOT_HERE
            < Distance.UNKNOWN
        )
