"""Tests for proofs.state module."""

import unittest

from proofcraft.exceptions import UnknownLineError
from proofcraft.proofs.state import (
    AssumptionFrame, Line, ProofState, RuleKind, replay_scopes
)


class TestProofState(unittest.TestCase):
    """Test ProofState class."""

    def test_state_creation(self):
        """Test creating proof states."""
        state = ProofState()
        self.assertEqual(state.lines, [])
        self.assertEqual(state.frames, [])
        self.assertEqual(state.current_depth, 0)
        self.assertEqual(state.selection, set())
        self.assertEqual(state.next_id, 1)
        self.assertIsNone(state.last_line())

    def test_post_init_copies(self):
        """Test that __post_init__ creates mutable copies."""
        original = [Line(1, "P", 0, RuleKind.ASSERTION)]
        state = ProofState(lines=original)

        state.add_line("Q", RuleKind.ASSERTION)

        self.assertEqual(len(original), 1)
        self.assertEqual(len(state.lines), 2)

    def test_next_id_follows_existing_lines(self):
        state = ProofState(lines=[Line(7, "P", 0, RuleKind.ASSERTION)])
        self.assertEqual(state.add_line("Q", RuleKind.ASSERTION).id, 8)

    def test_add_line(self):
        """Lines are stored in display form at the current depth."""
        state = ProofState()
        state.current_depth = 2
        line = state.add_line("  P→Q ", RuleKind.ASSUMPTION)

        self.assertEqual(line.id, 1)
        self.assertEqual(line.text, "P → Q")
        self.assertEqual(line.indent, 2)
        self.assertEqual(line.rule, RuleKind.ASSUMPTION)
        self.assertIs(state.last_line(), line)

    def test_add_line_explicit_indent(self):
        state = ProofState()
        state.current_depth = 2
        self.assertEqual(state.add_line("P", RuleKind.RESTATEMENT, indent=1).indent, 1)

    def test_add_line_clears_selection(self):
        state = ProofState()
        first = state.add_line("P", RuleKind.ASSERTION)
        state.select(first.id)
        state.add_line("Q", RuleKind.ASSERTION)
        self.assertEqual(state.selection, set())

    def test_lines_are_immutable(self):
        line = Line(1, "P", 0, RuleKind.ASSERTION)
        with self.assertRaises(AttributeError):
            line.text = "Q"

    def test_lookup(self):
        state = ProofState()
        state.add_line("P", RuleKind.ASSERTION)
        second = state.add_line("Q", RuleKind.ASSERTION)

        self.assertEqual(state.index_of(second.id), 1)
        self.assertIs(state.get_line(second.id), second)
        with self.assertRaises(UnknownLineError):
            state.index_of(99)

    def test_remove_last_replays_scopes(self):
        state = ProofState()
        state.current_depth = 1
        assumption = state.add_line("P", RuleKind.ASSUMPTION)
        state.open_frame("P", assumption)
        state.add_line("Q", RuleKind.ASSERTION)

        removed = state.remove_last()
        self.assertEqual(removed.text, "Q")
        self.assertEqual(len(state.frames), 1)
        self.assertEqual(state.current_depth, 1)

        state.remove_last()
        self.assertEqual(state.frames, [])
        self.assertEqual(state.current_depth, 0)

    def test_remove_discharge_reopens_frame(self):
        state = ProofState()
        state.current_depth = 1
        state.open_frame("P", state.add_line("P", RuleKind.ASSUMPTION))
        state.frames.pop()
        state.current_depth = 0
        state.add_line("P → P", RuleKind.IMPLICATION_INTRO)

        state.remove_last()
        self.assertEqual([frame.text for frame in state.frames], ["P"])
        self.assertEqual(state.current_depth, 1)

    def test_reset_keeps_ids_increasing(self):
        state = ProofState()
        state.add_line("P", RuleKind.ASSERTION)
        state.reset()

        self.assertEqual(state.lines, [])
        self.assertEqual(state.current_depth, 0)
        self.assertEqual(state.add_line("Q", RuleKind.ASSERTION).id, 2)


class TestVisibility(unittest.TestCase):
    """Test scope visibility predicates."""

    def setUp(self):
        self.state = ProofState()
        self.global_line = self.state.add_line("R", RuleKind.ASSERTION)
        self.state.current_depth = 1
        self.assumption = self.state.add_line("P", RuleKind.ASSUMPTION)
        self.state.open_frame("P", self.assumption)
        self.deep = Line(99, "Q", 2, RuleKind.ASSERTION)

    def test_global_lines_always_visible(self):
        self.assertTrue(self.state.is_visible(self.global_line))
        self.state.frames.clear()
        self.assertTrue(self.state.is_visible(self.global_line))

    def test_scoped_line_visibility(self):
        self.assertTrue(self.state.is_visible(self.assumption))
        self.assertFalse(self.state.is_visible(self.deep))

    def test_shares_open_scope(self):
        self.assertTrue(self.state.shares_open_scope([self.global_line, self.assumption]))
        self.assertFalse(self.state.shares_open_scope([self.global_line, self.deep]))
        self.assertFalse(self.state.shares_open_scope([]))


class TestSelection(unittest.TestCase):
    """Test the line selection."""

    def setUp(self):
        self.state = ProofState()
        self.p = self.state.add_line("P", RuleKind.ASSERTION)
        self.q = self.state.add_line("Q", RuleKind.ASSERTION)

    def test_select_and_deselect(self):
        self.state.select(self.q.id, self.p.id)
        self.assertEqual(self.state.selection, {self.p.id, self.q.id})
        self.state.deselect(self.p.id)
        self.assertEqual(self.state.selection, {self.q.id})

    def test_selected_lines_in_proof_order(self):
        self.state.select(self.q.id)
        self.state.select(self.p.id)
        self.assertEqual(self.state.selected_lines(), [self.p, self.q])

    def test_toggle(self):
        self.state.toggle(self.p.id)
        self.assertIn(self.p.id, self.state.selection)
        self.state.toggle(self.p.id)
        self.assertNotIn(self.p.id, self.state.selection)

    def test_select_unknown_line(self):
        with self.assertRaises(UnknownLineError):
            self.state.select(42)
        self.assertEqual(self.state.selection, set())


class TestReplayScopes(unittest.TestCase):
    """Test rebuilding scopes from a line history."""

    def test_empty(self):
        self.assertEqual(replay_scopes([]), ([], 0))

    def test_nested_assumptions(self):
        lines = [
            Line(1, "P", 1, RuleKind.ASSUMPTION),
            Line(2, "Q", 2, RuleKind.ASSUMPTION),
            Line(3, "R", 2, RuleKind.ASSERTION),
        ]
        frames, depth = replay_scopes(lines)
        self.assertEqual(depth, 2)
        self.assertEqual(frames, [
            AssumptionFrame("P", 1, 0, 1),
            AssumptionFrame("Q", 2, 1, 2),
        ])

    def test_discharged_assumption(self):
        lines = [
            Line(1, "P", 1, RuleKind.ASSUMPTION),
            Line(2, "Q", 2, RuleKind.ASSUMPTION),
            Line(3, "Q → Q", 1, RuleKind.IMPLICATION_INTRO),
        ]
        frames, depth = replay_scopes(lines)
        self.assertEqual(depth, 1)
        self.assertEqual([f.text for f in frames], ["P"])

    def test_fully_discharged(self):
        lines = [
            Line(1, "P", 1, RuleKind.ASSUMPTION),
            Line(2, "P → P", 0, RuleKind.IMPLICATION_INTRO),
        ]
        self.assertEqual(replay_scopes(lines), ([], 0))


if __name__ == '__main__':
    unittest.main()
