"""Tests for the action handlers."""

from __future__ import annotations

import pytest
from conftest import APPLE, CLEARING, COIN_A, HUT, LAMP, PLAYER, RAT, STONE, SWORD, FixedRoll

from gloomwood.engine import ActionHandlers
from gloomwood.engine.actions import INVALID_COMMAND
from gloomwood.engine.reports import NOTHING_CARRIED, describe_move
from gloomwood.models import World, create_actor, create_passage, create_room


@pytest.fixture
def actions(world, port) -> ActionHandlers:
    return ActionHandlers(world, port, FixedRoll())


class TestLook:
    """Tests for look."""

    def test_describes_room(self, actions: ActionHandlers):
        report = actions.look()
        assert report.startswith("You are in the Clearing.\nA quiet clearing.")
        assert "You see:" in report

    def test_lists_items_and_passages(self, actions: ActionHandlers):
        report = actions.look()
        assert "A rusty sword lies here." in report
        assert "A trail leads north to a hut." in report
        assert "A copper coin." in report

    def test_skips_player_and_scenery(self, actions: ActionHandlers):
        report = actions.look()
        assert "It's you." not in report
        assert "Only brambles that way." not in report

    def test_looking_at_something_is_invalid(self, actions: ActionHandlers):
        assert actions.look("sword").startswith(INVALID_COMMAND)


class TestGo:
    """Tests for go."""

    def test_through_passage(self, actions: ActionHandlers, world: World):
        report = actions.go("north")
        assert world.player_location == HUT
        assert report.startswith("OK.")
        assert "A smoky hut." in report

    def test_to_room_by_name(self, actions: ActionHandlers, world: World):
        actions.go("hut")
        assert world.player_location == HUT

    def test_dead_end_shows_description(self, actions: ActionHandlers, world: World):
        assert actions.go("west") == "Only brambles that way."
        assert world.player_location == CLEARING

    def test_not_here(self, actions: ActionHandlers, world: World):
        assert actions.go("wolf") == "You don't see any wolf here."
        assert world.player_location == CLEARING

    def test_unknown_word(self, actions: ActionHandlers, world: World):
        assert actions.go("narnia") == "I don't understand where you want to go."
        assert world.player_location == CLEARING

    def test_self(self, actions: ActionHandlers, world: World):
        assert "yourself" in actions.go("me")
        assert world.player_location == CLEARING


class TestGoScenario:
    """Room A with a single passage north to room B."""

    @pytest.fixture
    def two_rooms(self, port) -> tuple[World, ActionHandlers]:
        world = World(
            entities=[
                create_room(0, "Meadow", "A wide meadow."),
                create_room(1, "Barn", "A draughty barn."),
                create_actor(2, ["me"], 0, health=100),
                create_passage(3, ["north"], 0, "A lane runs north.", 1),
            ],
            player_id=2,
        )
        return world, ActionHandlers(world, port, FixedRoll())

    def test_go_north_then_south(self, two_rooms):
        world, actions = two_rooms

        report = actions.go("north")
        assert world.player_location == 1
        assert "A draughty barn." in report

        report = actions.go("south")
        assert world.player_location == 1
        assert report == "I don't understand where you want to go."


class TestGetAndDrop:
    """Tests for get and drop."""

    def test_pick_up(self, actions: ActionHandlers, world: World):
        assert actions.get("rusty sword") == "You pick up the rusty sword."
        assert world.get(SWORD).contained_in == PLAYER

    def test_get_then_drop_round_trip(self, actions: ActionHandlers, world: World):
        actions.get("rusty sword")
        assert actions.drop("rusty sword") == "You drop the rusty sword."
        assert world.get(SWORD).contained_in == CLEARING

    def test_already_held(self, actions: ActionHandlers):
        assert actions.get("apple") == "You already have the apple."

    def test_too_far(self, actions: ActionHandlers):
        assert actions.get("hut") == "Too far away, move closer please."

    def test_not_an_item(self, actions: ActionHandlers, world: World):
        assert actions.get("north") == "You can't get the north."
        assert actions.get("rat") == "You can't get the rat."
        assert world.get(RAT).contained_in == CLEARING

    def test_self(self, actions: ActionHandlers):
        assert actions.get("me") == "You should not be doing that to yourself."

    def test_ambiguous(self, actions: ActionHandlers, world: World):
        assert "more specific" in actions.get("coin")
        assert world.get(COIN_A).contained_in == CLEARING

    def test_item_held_by_someone_else_is_not_visible(self, actions: ActionHandlers):
        assert actions.get("lamp") == "You don't see any lamp here."

    def test_drop_not_held(self, actions: ActionHandlers):
        assert actions.drop("rusty sword") == "You are not holding any rusty sword."


class TestMoveReports:
    """Tests for the wording of moves, which is decided before the move."""

    def test_every_move_reads_differently(self, world: World):
        world.player.contained_in = HUT
        assert describe_move(world, APPLE, HUT) == "You drop the apple."
        assert describe_move(world, STONE, PLAYER) == "You pick up the stone."
        assert describe_move(world, LAMP, PLAYER) == "You get the lamp from the hermit."
        assert world.get(LAMP).contained_in != PLAYER


class TestAskAndGive:
    """Tests for ask and give."""

    def test_ask_takes_from_actor(self, actions: ActionHandlers, world: World):
        world.player.contained_in = HUT
        assert actions.ask("lamp") == "You get the lamp from the hermit."
        assert world.get(LAMP).contained_in == PLAYER

    def test_give_also_moves_to_player(self, actions: ActionHandlers, world: World):
        world.player.contained_in = HUT
        actions.give("lamp")
        assert world.get(LAMP).contained_in == PLAYER

    def test_give_own_item_is_not_found_on_actor(self, actions: ActionHandlers, world: World):
        world.player.contained_in = HUT
        report = actions.give("apple")
        assert report == "There appears to be no apple you can get from hermit."
        assert world.get(APPLE).contained_in == PLAYER

    def test_nobody_here(self, actions: ActionHandlers, world: World):
        assert actions.ask("lamp") == "There is nobody here to ask."
        assert world.get(LAMP).contained_in != PLAYER

    def test_enemy_is_not_asked(self, actions: ActionHandlers, world: World):
        world.player.contained_in = HUT
        assert actions.ask("pelt") == "There appears to be no pelt you can get from hermit."


class TestInventoryAndConsume:
    """Tests for inventory and consume."""

    def test_inventory_lists_carried(self, actions: ActionHandlers):
        report = actions.inventory()
        assert report.startswith("You have:")
        assert "apple" in report

    def test_empty_inventory(self, actions: ActionHandlers, world: World):
        world.get(APPLE).contained_in = CLEARING
        assert actions.inventory() == NOTHING_CARRIED

    def test_consume_restores_health(self, actions: ActionHandlers, world: World):
        assert world.player.health == 80
        actions.consume("apple")
        assert world.player.health == 90
        assert world.get(APPLE).contained_in is None
        assert actions.inventory() == NOTHING_CARRIED

    def test_consumed_item_is_gone_for_good(self, actions: ActionHandlers):
        actions.consume("apple")
        assert actions.consume("apple") == "You are not holding any apple."

    def test_consume_non_consumable(self, actions: ActionHandlers, world: World):
        actions.get("rusty sword")
        assert actions.consume("rusty sword") == "You can't consume the rusty sword."
        assert world.get(SWORD).contained_in == PLAYER


class TestAttackPreconditions:
    """Attack checks that never start a fight."""

    def test_dead_enemy(self, actions: ActionHandlers, world: World, port):
        before = world.model_dump()
        assert actions.attack("rat") == "The rat is already dead."
        assert world.model_dump() == before
        assert port.prompts == []

    def test_not_an_enemy(self, actions: ActionHandlers):
        assert actions.attack("rusty sword") == "You can't attack the rusty sword."

    def test_enemy_elsewhere(self, actions: ActionHandlers):
        assert actions.attack("wolf") == "You don't see any wolf here."

    def test_self(self, actions: ActionHandlers):
        assert actions.attack("me") == "You should not attack yourself."


class TestMeta:
    """Tests for help, map, quit and unknown commands."""

    def test_map_marks_current_room(self, actions: ActionHandlers):
        report = actions.map()
        assert "* Clearing: north -> Hut" in report
        assert "  Hut: south -> Clearing" in report

    def test_help_lists_commands(self, actions: ActionHandlers):
        assert "attack <enemy>" in actions.help()

    def test_quit(self, actions: ActionHandlers):
        assert actions.quit() == "Quitting.\nThank you for playing!"

    def test_unknown_echoes_input(self, actions: ActionHandlers):
        report = actions.unknown("Dance Wildly")
        assert report.startswith(INVALID_COMMAND)
        assert "Dance Wildly" in report
