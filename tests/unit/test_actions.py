"""
Unit tests for action kinds and action resolution.
"""
from types import SimpleNamespace

import pytest

from skirmish.core.data import ACTION, ACTION_DATA, EffectType, Position, TargetRule
from skirmish.core.events import UnitDamaged, UnitDefeated, UnitHealed
from skirmish.game.actions import Action, generate, target_choices
from skirmish.game.choices import ResolveAction


def fake_game(board):
    """Minimal stand-in exposing what resolution needs: a board and a publisher."""
    events = []
    return SimpleNamespace(board=board, publish=events.append, events=events)


class TestActionKinds:

    def test_rep(self):
        assert ACTION_DATA["Bite"].rep() == ("Action", "Bite")

    def test_base_kind_has_no_effect(self):
        assert ACTION.effect is None
        assert ACTION.range == 1
        assert ACTION.target == TargetRule.ENEMY

    def test_magnitude_adds_bonus(self, red, make_unit):
        unit = make_unit(red, power=4)
        assert ACTION_DATA["Slash"].magnitude(unit) == 4
        assert ACTION_DATA["Shoot"].magnitude(unit) == 3

    def test_accepts_by_allegiance(self, red, blue, make_unit):
        me = make_unit(red)
        friend = make_unit(red, "Friend")
        foe = make_unit(blue, "Foe")

        assert ACTION_DATA["Slash"].accepts(me, foe)
        assert not ACTION_DATA["Slash"].accepts(me, friend)
        assert ACTION_DATA["Mend"].accepts(me, friend)
        assert ACTION_DATA["Mend"].accepts(me, me)
        assert not ACTION_DATA["Mend"].accepts(me, foe)
        assert not ACTION_DATA["Slash"].accepts(me, None)


class TestGenerate:

    def test_targets_enemies_in_range(self, board, red, blue, make_unit):
        me = make_unit(red)
        near_foe = make_unit(blue, "Near")
        far_foe = make_unit(blue, "Far")
        board.place(Position(0, 0), me)
        board.place(Position(1, 0), near_foe)
        board.place(Position(3, 0), far_foe)

        actions = generate(ACTION_DATA["Slash"], me, board)
        assert [action.position for action in actions] == [Position(1, 0)]
        assert actions[0].actor is me

    def test_ranged_kind_reaches_further(self, board, red, blue, make_unit):
        me = make_unit(red, actions=("Shoot",))
        board.place(Position(0, 0), me)
        board.place(Position(3, 0), make_unit(blue, "Far"))
        board.place(Position(2, 2), make_unit(blue, "Too far"))

        reps = [choice.rep for choice in target_choices(ACTION_DATA["Shoot"], me, board)]
        assert reps == [("Shoot", 3, 0)]

    def test_friendly_kind_includes_self(self, board, red, blue, make_unit):
        me = make_unit(red, actions=("Mend",))
        board.place(Position(1, 1), me)
        board.place(Position(1, 2), make_unit(red, "Friend"))
        board.place(Position(2, 1), make_unit(blue, "Foe"))

        reps = [choice.rep for choice in target_choices(ACTION_DATA["Mend"], me, board)]
        assert reps == [("Mend", 1, 1), ("Mend", 1, 2)]

    def test_no_targets(self, board, red, make_unit):
        me = make_unit(red)
        board.place(Position(0, 0), me)
        assert target_choices(ACTION_DATA["Slash"], me, board) == []

    def test_unplaced_actor(self, board, red, make_unit):
        with pytest.raises(RuntimeError):
            generate(ACTION_DATA["Slash"], make_unit(red), board)

    def test_choice_wraps_action(self, board, red, blue, make_unit):
        me = make_unit(red)
        board.place(Position(0, 0), me)
        board.place(Position(0, 1), make_unit(blue, "Foe"))
        choice = target_choices(ACTION_DATA["Slash"], me, board)[0]
        assert isinstance(choice.effect, ResolveAction)
        assert choice.effect.action.rep() == ("Slash", 0, 1)


class TestResolve:

    def test_repeated_attacks_until_death(self, board, red, blue, make_unit):
        attacker = make_unit(red, power=4, actions=("Bite",))
        target = make_unit(blue, "Target", health=10)
        board.place(Position(0, 0), attacker)
        board.place(Position(1, 0), target)
        game = fake_game(board)
        action = Action(attacker, ACTION_DATA["Bite"], Position(1, 0))

        action.resolve(game)
        assert target.health == 6
        action.resolve(game)
        assert target.health == 2
        action.resolve(game)
        assert target.is_dead

        deaths = [event for event in game.events if isinstance(event, UnitDefeated)]
        assert len(deaths) == 1
        assert deaths[0].unit is target

    def test_damage_is_published_before_death(self, board, red, blue, make_unit):
        attacker = make_unit(red, "Bruna", power=4)
        target = make_unit(blue, "Fang", health=4)
        board.place(Position(0, 0), attacker)
        board.place(Position(1, 0), target)
        game = fake_game(board)

        Action(attacker, ACTION_DATA["Slash"], Position(1, 0)).resolve(game)

        assert [type(event) for event in game.events] == [UnitDamaged, UnitDefeated]
        assert game.events[0].describe() == "Bruna slashes Fang for 4 damage."

    def test_heal(self, board, red, make_unit):
        healer = make_unit(red, "Sela", power=3, actions=("Mend",))
        friend = make_unit(red, "Ivo", health=10)
        friend.hurt(5)
        board.place(Position(0, 0), healer)
        board.place(Position(0, 1), friend)
        game = fake_game(board)

        Action(healer, ACTION_DATA["Mend"], Position(0, 1)).resolve(game)

        assert friend.health == 8
        assert isinstance(game.events[0], UnitHealed)
        assert game.events[0].describe() == "Sela mends Ivo, restoring 3 health."

    def test_vacated_target_is_a_no_op(self, board, red, blue, make_unit):
        attacker = make_unit(red)
        board.place(Position(0, 0), attacker)
        game = fake_game(board)

        Action(attacker, ACTION_DATA["Slash"], Position(1, 0)).resolve(game)
        assert game.events == []

    def test_target_is_fetched_at_resolution(self, board, red, blue, make_unit):
        attacker = make_unit(red)
        first = make_unit(blue, "First")
        second = make_unit(blue, "Second")
        board.place(Position(0, 0), attacker)
        board.place(Position(1, 0), first)
        action = generate(ACTION_DATA["Slash"], attacker, board)[0]

        board.move(Position(1, 0), Position(3, 3))
        board.place(Position(1, 0), second)
        action.resolve(fake_game(board))

        assert first.health == 10
        assert second.health == 6

    def test_base_kind_cannot_resolve(self, board, red, blue, make_unit):
        attacker = make_unit(red)
        board.place(Position(0, 0), attacker)
        board.place(Position(1, 0), make_unit(blue, "Foe"))
        with pytest.raises(NotImplementedError):
            Action(attacker, ACTION, Position(1, 0)).resolve(fake_game(board))

    def test_effect_types(self):
        assert ACTION_DATA["Mend"].effect == EffectType.HEAL
        assert ACTION_DATA["Shoot"].effect == EffectType.DAMAGE
