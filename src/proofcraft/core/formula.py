"""String-level formula utilities.

Formulas are kept as text throughout the engine. These helpers translate user
shorthand into the canonical connective symbols, produce the display and
comparison forms, and split a formula at its top-level connective while
respecting parenthesis nesting.

All functions are pure and never raise on malformed input. Unbalanced text is
not stripped, and the split scans clamp depth at zero, so a stray closing
parenthesis does not hide a later connective.
"""

import re
from typing import NamedTuple, Optional


CONJUNCTION = "∧"
DISJUNCTION = "∨"
IMPLICATION = "→"
EQUIVALENCE = "↔"
NEGATION = "¬"
FALSUM = "⊥"

# Multi-word forms come before the single words they contain.
_SHORTHAND = [
    (re.compile(r"<->"), EQUIVALENCE),
    (re.compile(r"->"), IMPLICATION),
    (re.compile(r"\bif and only if\b", re.IGNORECASE), EQUIVALENCE),
    (re.compile(r"\bequivalent to\b", re.IGNORECASE), EQUIVALENCE),
    (re.compile(r"\bequivalent\b", re.IGNORECASE), EQUIVALENCE),
    (re.compile(r"\biff\b", re.IGNORECASE), EQUIVALENCE),
    (re.compile(r"\bimplies\b", re.IGNORECASE), IMPLICATION),
    (re.compile(r"&&?"), CONJUNCTION),
    (re.compile(r"\band\b", re.IGNORECASE), CONJUNCTION),
    (re.compile(r"\bF\b"), FALSUM),
    (re.compile(r"\bnot\b\s*", re.IGNORECASE), NEGATION),
]

_WHITESPACE = re.compile(r"\s+")
_OPERATOR_CHAR = re.compile(r"([∧∨→↔⊥¬()])")
_SINGLE_SYMBOL = re.compile(r"[A-Za-z⊥]")


class Split(NamedTuple):
    """The two operands of a top-level binary connective."""
    left: str
    right: str


def sanitize(text) -> str:
    """Trim surrounding whitespace; ``None`` becomes the empty string."""
    if text is None:
        return ""
    return str(text).strip()


def translate_shorthand(text) -> str:
    """Rewrite ASCII and English shorthand into connective symbols.

    >>> translate_shorthand("P and Q implies not R")
    'P ∧ Q → ¬R'
    """
    result = "" if text is None else str(text)
    for pattern, symbol in _SHORTHAND:
        result = pattern.sub(symbol, result)
    return result


def normalize(text) -> str:
    """Sanitize and collapse whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", sanitize(text))


def format_spacing(text) -> str:
    """Canonical display form: one space around every operator and parenthesis."""
    if not text:
        return ""
    spaced = _OPERATOR_CHAR.sub(r" \1 ", str(text))
    return _WHITESPACE.sub(" ", spaced).strip()


def parenthesize(text) -> str:
    """Wrap ``text`` in parentheses unless it is a single atom or ``⊥``."""
    t = sanitize(text)
    if _SINGLE_SYMBOL.fullmatch(t):
        return t
    return f"({t})"


def strip_outer_parens(text) -> str:
    """Remove one pair of parentheses if, and only if, it spans the whole string.

    ``(P ∧ Q)`` becomes ``P ∧ Q`` but ``(P) ∧ (Q)`` is returned unchanged,
    since its first group closes before the final character.
    """
    s = sanitize(text)
    if not (s.startswith("(") and s.endswith(")")):
        return s
    depth = 0
    for i, ch in enumerate(s):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth <= 0 and i < len(s) - 1:
                return s
    if depth != 0:
        return s
    return s[1:-1].strip()


def strip_outer_parens_repeated(text) -> str:
    """Apply :func:`strip_outer_parens` until nothing changes."""
    current = sanitize(text)
    while True:
        stripped = strip_outer_parens(current)
        if stripped == current:
            return current
        current = stripped


def _split_top_level(s: str, connective: str) -> Optional[Split]:
    depth = 0
    for i, ch in enumerate(s):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == connective and depth == 0:
            return Split(s[:i].strip(), s[i + 1:].strip())
    return None


def split_top_level_conjunction(text) -> Optional[Split]:
    """Split at the first ``∧`` outside all parentheses.

    >>> split_top_level_conjunction("(A ∧ B) ∧ C")
    Split(left='(A ∧ B)', right='C')
    """
    s = sanitize(text).replace("&&", CONJUNCTION).replace("&", CONJUNCTION)
    return _split_top_level(strip_outer_parens_repeated(s), CONJUNCTION)


def split_top_level_implication(text) -> Optional[Split]:
    """Split at the first ``→`` outside all parentheses.

    >>> split_top_level_implication("A → (B → C)")
    Split(left='A', right='(B → C)')
    """
    s = sanitize(text).replace("->", IMPLICATION)
    return _split_top_level(strip_outer_parens_repeated(s), IMPLICATION)


def canonical(text) -> str:
    """Comparison key for antecedent matching: arrows normalized, outer
    parentheses stripped and all whitespace removed."""
    s = strip_outer_parens_repeated(sanitize(text).replace("->", IMPLICATION))
    return _WHITESPACE.sub("", s)


def strip_target_prefix(text, prefix: str = "Target:") -> str:
    """Drop a leading label such as ``Target:`` (any case) from a target."""
    s = sanitize(text)
    if prefix and s.lower().startswith(prefix.lower()):
        s = s[len(prefix):]
    return s.strip()


def formulas_match(first, second) -> bool:
    """Spacing-insensitive equality of two formulas.

    Neither commutativity nor associativity is taken into account:
    ``P ∧ Q`` and ``Q ∧ P`` do not match.
    """
    return normalize(format_spacing(first)) == normalize(format_spacing(second))
