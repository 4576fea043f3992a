"""
Tests for the reducer (state transitions).

Tests:
- Eligibility rule, including its literal boundary behaviour
- Removal and reset transitions
- Silent refusal of ineligible removals
- Win detection
"""

import pytest

from ..engine_core.state import PuzzleState, PuzzlePhase
from ..engine_core.action import Action, ActionType, ActionPayload, RefusalReason
from ..engine_core.reducer import Reducer, apply_action, can_remove
from ..engine_core.action_generator import legal_actions, is_legal
from ..puzzle_schema import PuzzleSpec


class TestEligibility:
    """Tests for can_remove."""

    def test_single_bolt_plank_never_blocks(self, single_bolt_spec):
        """A plank with exactly one bolt does not block it."""
        state = PuzzleState.initial(single_bolt_spec)
        assert can_remove(single_bolt_spec, state, "X1")

    def test_two_bolt_plank_blocks_both_bolts(self, pair_spec):
        """
        Plank p holds A and B, both in place: each is blocked.

        A counts as one of p's remaining bolts before its own removal,
        so the rule blocks it.
        """
        state = PuzzleState.initial(pair_spec)
        assert not can_remove(pair_spec, state, "A")
        assert not can_remove(pair_spec, state, "B")

    def test_other_bolt_removed_still_blocks(self, pair_spec):
        """With A gone, p still has B in place, so B stays blocked."""
        state = PuzzleState(puzzle_id="pair", planks=pair_spec.planks, removed_bolts=("A",))
        assert not can_remove(pair_spec, state, "B")

    def test_fully_detached_plank_does_not_block(self, pair_spec):
        """A plank with no bolts left blocks nothing."""
        state = PuzzleState(puzzle_id="pair", planks=pair_spec.planks, removed_bolts=("A", "B"))
        assert can_remove(pair_spec, state, "A")

    def test_multi_bolt_plank_wins_over_single(self):
        """A bolt held by a single-bolt and a two-bolt plank is blocked."""
        spec = PuzzleSpec.build(
            "mixed", "Mixed",
            grid=[["X", "Y"]],
            planks=[{"id": "s", "bolts": ["X"]}, {"id": "m", "bolts": ["X", "Y"]}],
        )
        reducer = Reducer(spec=spec)
        state = PuzzleState.initial(spec)
        assert not reducer.can_remove(state, "X")
        assert [p.id for p in reducer.blocking_planks(state, "X")] == ["m"]

    def test_no_wood_nuts_bolt_is_removable(self, wood_nuts_spec, wood_nuts_state):
        """Every built-in plank spans 2-3 bolts, so every bolt starts blocked."""
        reducer = Reducer(spec=wood_nuts_spec)
        for bolt_id in wood_nuts_spec.bolt_ids:
            assert not reducer.can_remove(wood_nuts_state, bolt_id)

    def test_bolt_held_by_nothing_is_eligible(self, wood_nuts_spec, wood_nuts_state):
        """The predicate alone only looks at planks."""
        assert can_remove(wood_nuts_spec, wood_nuts_state, "ZZ")


class TestRemoveBolt:
    """Tests for remove-bolt action."""

    def test_remove_eligible_bolt(self, single_bolt_spec):
        state = PuzzleState.initial(single_bolt_spec)
        result = apply_action(single_bolt_spec, state, Action.remove_bolt("X1"))

        assert result.success
        assert result.new_state.removed_bolts == ("X1",)
        assert result.new_state.log == ("Removed X1",)
        assert "Plank s fell" in result.state_changes

    def test_input_state_unchanged(self, single_bolt_spec):
        """Reducer returns new state; the old one is untouched."""
        state = PuzzleState.initial(single_bolt_spec)
        apply_action(single_bolt_spec, state, Action.remove_bolt("X1"))
        assert state.removed_bolts == ()
        assert state.log == ()

    def test_blocked_removal_refused(self, wood_nuts_spec, wood_nuts_state):
        result = apply_action(wood_nuts_spec, wood_nuts_state, Action.remove_bolt("1A"))

        assert not result.success
        assert result.new_state is None
        assert result.error_code == RefusalReason.BOLT_BLOCKED.value
        assert "r1" in result.error and "r3" in result.error

    def test_already_removed_refused(self, single_bolt_spec):
        state = PuzzleState.initial(single_bolt_spec)
        state = apply_action(single_bolt_spec, state, Action.remove_bolt("X1")).new_state

        result = apply_action(single_bolt_spec, state, Action.remove_bolt("X1"))
        assert not result.success
        assert result.error_code == RefusalReason.ALREADY_REMOVED.value

    def test_unknown_bolt_refused(self, wood_nuts_spec, wood_nuts_state):
        result = apply_action(wood_nuts_spec, wood_nuts_state, Action.remove_bolt("ZZ"))
        assert not result.success
        assert result.error_code == RefusalReason.UNKNOWN_BOLT.value

    def test_missing_bolt_id_refused(self, wood_nuts_spec, wood_nuts_state):
        action = Action(action_type=ActionType.REMOVE_BOLT, payload=ActionPayload())
        result = apply_action(wood_nuts_spec, wood_nuts_state, action)
        assert result.error_code == RefusalReason.UNKNOWN_BOLT.value

    def test_off_grid_bolt_still_removable(self, solvable_spec):
        """Bolts missing from the grid still take part in removal."""
        state = PuzzleState.initial(solvable_spec)
        result = apply_action(solvable_spec, state, Action.remove_bolt("Z9"))
        assert result.success
        assert result.new_state.is_removed("Z9")

    def test_log_follows_acceptance_order(self, solvable_spec):
        state = PuzzleState.initial(solvable_spec)
        for bolt_id in ["X3", "X1", "X2"]:
            state = apply_action(solvable_spec, state, Action.remove_bolt(bolt_id)).new_state

        assert state.log == ("Removed X3", "Removed X1", "Removed X2")
        assert state.removed_bolts == ("X3", "X1", "X2")


class TestReset:
    """Tests for reset action."""

    def test_reset_clears_everything(self, solvable_spec):
        state = PuzzleState.initial(solvable_spec)
        state = apply_action(solvable_spec, state, Action.remove_bolt("X1")).new_state

        result = apply_action(solvable_spec, state, Action.reset())
        assert result.success
        assert result.new_state.removed_bolts == ()
        assert result.new_state.log == ()
        assert not result.new_state.is_solved

    def test_reset_restores_planks(self, solvable_spec):
        state = PuzzleState(puzzle_id="solvable", planks=())
        result = apply_action(solvable_spec, state, Action.reset())
        assert result.new_state.planks == solvable_spec.planks


class TestWinCondition:
    """Tests for is_solved."""

    def test_solved_only_after_last_removal(self, solvable_spec):
        reducer = Reducer(spec=solvable_spec)
        state = PuzzleState.initial(solvable_spec)
        order = ["X2", "Z9", "X1", "X3"]

        for i, bolt_id in enumerate(order):
            assert not reducer.is_solved(state)
            assert reducer.can_remove(state, bolt_id)
            state = reducer.apply(state, Action.remove_bolt(bolt_id)).new_state
            assert reducer.is_solved(state) == (i == len(order) - 1)

        assert state.phase == PuzzlePhase.SOLVED

    def test_not_solved_with_partial_plank(self, pair_spec):
        state = PuzzleState(puzzle_id="pair", planks=pair_spec.planks, removed_bolts=("A",))
        assert not state.is_solved
        assert state.phase == PuzzlePhase.IN_PROGRESS

    def test_no_planks_is_solved(self):
        assert PuzzleState(puzzle_id="empty").is_solved

    def test_wood_nuts_starts_unsolved(self, wood_nuts_state):
        assert not wood_nuts_state.is_solved


class TestLegalActions:
    """Tests for the action generator."""

    def test_wood_nuts_only_reset(self, wood_nuts_spec, wood_nuts_state):
        actions = legal_actions(wood_nuts_spec, wood_nuts_state)
        assert [a.action_type for a in actions] == [ActionType.RESET]

    def test_removable_bolts_listed(self, solvable_spec):
        state = PuzzleState.initial(solvable_spec)
        bolts = [a.payload.bolt_id for a in legal_actions(solvable_spec, state)
                 if a.action_type == ActionType.REMOVE_BOLT]
        assert bolts == ["X1", "X2", "X3", "Z9"]

    def test_removed_bolts_not_listed(self, solvable_spec):
        state = apply_action(
            solvable_spec, PuzzleState.initial(solvable_spec), Action.remove_bolt("X2")
        ).new_state
        assert not is_legal(solvable_spec, state, Action.remove_bolt("X2"))
        assert is_legal(solvable_spec, state, Action.remove_bolt("X3"))
        assert is_legal(solvable_spec, state, Action.reset())


class TestActions:
    """Tests for the action objects."""

    def test_remove_bolt_carries_only_bolt_id(self):
        action = Action.remove_bolt("1A")
        assert action == Action(
            action_type=ActionType.REMOVE_BOLT, payload=ActionPayload(bolt_id="1A")
        )

    def test_payload_takes_only_bolt_id(self):
        with pytest.raises(TypeError):
            ActionPayload(bolt_id="1A", params={})

    def test_action_has_no_timestamp(self):
        with pytest.raises(TypeError):
            Action(action_type=ActionType.RESET, timestamp=1.0)
