"""Tests for core.formula module."""

import unittest

from proofcraft.core.formula import (
    Split,
    sanitize, translate_shorthand, normalize, format_spacing,
    parenthesize, strip_outer_parens, strip_outer_parens_repeated,
    split_top_level_conjunction, split_top_level_implication,
    canonical, strip_target_prefix, formulas_match
)


class TestSanitize(unittest.TestCase):
    """Test trimming and whitespace handling."""

    def test_sanitize(self):
        self.assertEqual(sanitize("  P ∧ Q \n"), "P ∧ Q")
        self.assertEqual(sanitize("   "), "")
        self.assertEqual(sanitize(None), "")

    def test_normalize_collapses_whitespace(self):
        self.assertEqual(normalize("  P   ∧\tQ "), "P ∧ Q")

    def test_format_spacing(self):
        self.assertEqual(format_spacing("P→(Q→Q)"), "P → ( Q → Q )")
        self.assertEqual(format_spacing("¬P∧Q"), "¬ P ∧ Q")
        self.assertEqual(format_spacing(""), "")

    def test_normalize_format_spacing_idempotent(self):
        """Re-applying the display and comparison forms changes nothing."""
        for f in ["P", "P→Q", "(P ∧ Q)  →R", "¬(P∨Q) ↔ ⊥", "((A))"]:
            once = normalize(format_spacing(f))
            self.assertEqual(normalize(format_spacing(once)), once)


class TestShorthand(unittest.TestCase):
    """Test shorthand translation."""

    def test_ascii_arrows(self):
        self.assertEqual(translate_shorthand("P -> Q"), "P → Q")
        self.assertEqual(translate_shorthand("P <-> Q"), "P ↔ Q")

    def test_conjunction(self):
        self.assertEqual(translate_shorthand("P & Q"), "P ∧ Q")
        self.assertEqual(translate_shorthand("P && Q"), "P ∧ Q")
        self.assertEqual(translate_shorthand("P and Q"), "P ∧ Q")

    def test_words(self):
        self.assertEqual(translate_shorthand("P implies Q"), "P → Q")
        self.assertEqual(translate_shorthand("P iff Q"), "P ↔ Q")
        self.assertEqual(translate_shorthand("P equivalent Q"), "P ↔ Q")
        self.assertEqual(translate_shorthand("P equivalent to Q"), "P ↔ Q")
        self.assertEqual(translate_shorthand("P if and only if Q"), "P ↔ Q")

    def test_falsum_and_negation(self):
        self.assertEqual(translate_shorthand("P → F"), "P → ⊥")
        self.assertEqual(translate_shorthand("not P"), "¬P")

    def test_word_boundaries(self):
        """Words inside identifiers are left alone."""
        self.assertEqual(translate_shorthand("Brand"), "Brand")
        self.assertEqual(translate_shorthand("notion"), "notion")
        self.assertEqual(translate_shorthand("FOO"), "FOO")

    def test_combined(self):
        self.assertEqual(translate_shorthand("P and Q implies not R"), "P ∧ Q → ¬R")


class TestParentheses(unittest.TestCase):
    """Test parenthesize and outer parenthesis stripping."""

    def test_parenthesize(self):
        self.assertEqual(parenthesize("P"), "P")
        self.assertEqual(parenthesize("⊥"), "⊥")
        self.assertEqual(parenthesize("P ∧ Q"), "(P ∧ Q)")
        self.assertEqual(parenthesize("¬P"), "(¬P)")

    def test_strip_outer_parens(self):
        self.assertEqual(strip_outer_parens("(P ∧ Q)"), "P ∧ Q")
        self.assertEqual(strip_outer_parens("((P))"), "(P)")
        self.assertEqual(strip_outer_parens("P ∧ Q"), "P ∧ Q")

    def test_local_parens_are_kept(self):
        self.assertEqual(strip_outer_parens("(P) ∧ (Q)"), "(P) ∧ (Q)")
        self.assertEqual(strip_outer_parens("(P → Q) → (Q → P)"), "(P → Q) → (Q → P)")

    def test_unbalanced_is_unchanged(self):
        self.assertEqual(strip_outer_parens("((P)"), "((P)")
        self.assertEqual(strip_outer_parens("(P))"), "(P))")

    def test_strip_repeated(self):
        self.assertEqual(strip_outer_parens_repeated("((P))"), "P")
        self.assertEqual(strip_outer_parens_repeated("(((P ∧ Q)))"), "P ∧ Q")

    def test_parenthesize_then_strip(self):
        for f in ["P ∧ Q", "(P) ∧ (Q)", "P → (Q → R)", "¬P"]:
            self.assertEqual(strip_outer_parens_repeated(parenthesize(f)), f)


class TestTopLevelSplit(unittest.TestCase):
    """Test splitting at top-level connectives."""

    def test_conjunction_nested_left(self):
        self.assertEqual(
            split_top_level_conjunction("(A ∧ B) ∧ C"),
            Split(left="(A ∧ B)", right="C")
        )

    def test_conjunction_first_occurrence(self):
        parts = split_top_level_conjunction("A ∧ B ∧ C")
        self.assertEqual(parts.left, "A")
        self.assertEqual(parts.right, "B ∧ C")

    def test_conjunction_ascii(self):
        self.assertEqual(split_top_level_conjunction("P & Q"), Split("P", "Q"))
        self.assertEqual(split_top_level_conjunction("P && Q"), Split("P", "Q"))

    def test_conjunction_outer_parens(self):
        self.assertEqual(split_top_level_conjunction("(P ∧ Q)"), Split("P", "Q"))

    def test_conjunction_only_nested(self):
        self.assertIsNone(split_top_level_conjunction("(P ∧ Q) → R"))
        self.assertIsNone(split_top_level_conjunction("P"))

    def test_implication_first_arrow(self):
        self.assertEqual(
            split_top_level_implication("A → (B → C)"),
            Split(left="A", right="(B → C)")
        )
        parts = split_top_level_implication("(A → B) → C")
        self.assertEqual(parts, Split("(A → B)", "C"))

    def test_implication_ascii(self):
        self.assertEqual(split_top_level_implication("P -> Q"), Split("P", "Q"))

    def test_implication_absent(self):
        self.assertIsNone(split_top_level_implication("(P → Q) ∧ R"))

    def test_unbalanced_does_not_raise(self):
        self.assertIsNone(split_top_level_implication("((P → Q)"))
        split_top_level_conjunction(")P ∧ Q(")

    def test_stray_close_paren_clamps_depth(self):
        self.assertEqual(split_top_level_conjunction("P) ∧ (Q"), Split("P)", "(Q"))


class TestComparison(unittest.TestCase):
    """Test target prefixes and formula equality."""

    def test_canonical(self):
        self.assertEqual(canonical("( P -> Q )"), "P→Q")
        self.assertEqual(canonical("P"), canonical(" (P) "))

    def test_strip_target_prefix(self):
        self.assertEqual(strip_target_prefix("Target: P ∧ Q"), "P ∧ Q")
        self.assertEqual(strip_target_prefix("target:P"), "P")
        self.assertEqual(strip_target_prefix("P ∧ Q"), "P ∧ Q")
        self.assertEqual(strip_target_prefix("Goal: P", prefix="Goal:"), "P")

    def test_formulas_match(self):
        self.assertTrue(formulas_match("P → ( Q → Q )", "P → (Q → Q)"))
        self.assertTrue(formulas_match("P∧Q", "P ∧ Q"))

    def test_no_commutativity(self):
        self.assertFalse(formulas_match("P ∧ Q", "Q ∧ P"))

    def test_no_associativity(self):
        self.assertFalse(formulas_match("(P ∧ Q) ∧ R", "P ∧ (Q ∧ R)"))


if __name__ == '__main__':
    unittest.main()
