"""
Tests for rule sets and the standard Skirmish turn.
"""
import pytest

from skirmish.core.data import GRASS, Position
from skirmish.game.board import Board
from skirmish.game.game import Game, Level
from skirmish.game.players.scripted import ScriptedPlayer
from skirmish.game.rules import RuleSet, Skirmish


def game_with(width, height, players, *placements):
    game = Game([Level(Board.filled(width, height, GRASS))], players)
    for position, unit in placements:
        game.place_unit(position, unit)
    return game


class TestRuleSet:

    def test_base_rules_are_abstract(self, red):
        rules = RuleSet()
        with pytest.raises(NotImplementedError):
            rules.name
        with pytest.raises(NotImplementedError):
            rules.turn(None, red)

    def test_skirmish_name(self):
        assert Skirmish().name == "Skirmish"


class TestSkirmishTurn:

    def test_move_then_attack(self, blue, make_unit):
        red = ScriptedPlayer("Red", script=[
            ("Unit", 0, 0),
            ("Move", 2, 0),
            ("Action", "Slash"),
            ("Slash", 3, 0),
        ])
        bruna = make_unit(red, "Bruna", movement=2)
        fang = make_unit(blue, "Fang", health=10)
        game = game_with(4, 1, [red, blue], (Position(0, 0), bruna), (Position(3, 0), fang))

        Skirmish().turn(game, red)

        assert bruna.position == Position(2, 0)
        assert game.board.unit_at(Position(0, 0)) is None
        assert fang.health == 6
        assert not bruna.can_act

    def test_move_is_mandatory_when_possible(self, blue, make_unit):
        red = ScriptedPlayer("Red")
        bruna = make_unit(red, "Bruna", movement=1, actions=())
        game = game_with(3, 1, [red, blue], (Position(0, 0), bruna))

        Skirmish().turn(game, red)

        assert red.decisions == [("Unit", 0, 0), ("Move", 1, 0)]
        assert bruna.position == Position(1, 0)

    def test_action_may_be_declined(self, blue, make_unit):
        red = ScriptedPlayer("Red", script=[("Unit", 0, 0), ("Done",)])
        bruna = make_unit(red, "Bruna", movement=0)
        fang = make_unit(blue, "Fang")
        game = game_with(2, 1, [red, blue], (Position(0, 0), bruna), (Position(1, 0), fang))

        Skirmish().turn(game, red)

        assert fang.health == 10
        assert not bruna.can_act

    def test_kind_without_targets_does_nothing(self, blue, make_unit):
        red = ScriptedPlayer("Red")
        bruna = make_unit(red, "Bruna", movement=0)
        game = game_with(3, 1, [red, blue], (Position(0, 0), bruna), (Position(2, 0), make_unit(blue, "Far")))

        Skirmish().turn(game, red)

        assert red.decisions == [("Unit", 0, 0), ("Action", "Slash")]

    def test_every_unit_may_act_once(self, blue, make_unit):
        red = ScriptedPlayer("Red")
        first = make_unit(red, "First", movement=0, actions=())
        second = make_unit(red, "Second", movement=0, actions=())
        game = game_with(3, 1, [red, blue], (Position(0, 0), first), (Position(2, 0), second))

        Skirmish().turn(game, red)

        assert red.decisions == [("Unit", 0, 0), ("Unit", 2, 0)]
        assert not first.can_act and not second.can_act

    def test_player_may_stop_selecting_units(self, blue, make_unit):
        red = ScriptedPlayer("Red", pick=-1)
        bruna = make_unit(red, "Bruna", movement=0, actions=())
        game = game_with(1, 1, [red, blue], (Position(0, 0), bruna))

        Skirmish().turn(game, red)

        assert red.decisions == [("Done",)]
        assert bruna.can_act

    def test_new_turn_resets_units(self, blue, make_unit):
        red = ScriptedPlayer("Red")
        bruna = make_unit(red, "Bruna", movement=0, actions=())
        game = game_with(1, 1, [red, blue], (Position(0, 0), bruna))

        Skirmish().turn(game, red)
        Skirmish().turn(game, red)

        assert red.decisions == [("Unit", 0, 0), ("Unit", 0, 0)]

    def test_redraw_after_mutating_steps(self, blue, make_unit):
        red = ScriptedPlayer("Red", script=[("Unit", 0, 0), ("Move", 1, 0), ("Action", "Slash"), ("Slash", 2, 0)])
        bruna = make_unit(red, "Bruna", movement=1)
        game = game_with(3, 1, [red, blue], (Position(0, 0), bruna), (Position(2, 0), make_unit(blue, "Fang")))

        Skirmish().turn(game, red)

        assert red.renders == 2
        assert blue.renders == 2

    def test_turn_boundaries_are_broadcast(self, blue, make_unit):
        red = ScriptedPlayer("Red")
        game = game_with(1, 1, [red, blue], (Position(0, 0), make_unit(red, actions=())))

        Skirmish().turn(game, red)

        assert blue.messages == ["Red's turn is over."]
