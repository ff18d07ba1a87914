"""Lark parser for propositional formulas.

The rule engine itself works on formula text; this parser is used where a
formula has to be known well formed up front, e.g. campaign targets.
"""

from dataclasses import dataclass

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from proofcraft.core.formula import translate_shorthand, format_spacing
from proofcraft.exceptions import FormulaSyntaxError


formula_parser = Lark(r"""
    %import common.WS
    %ignore WS

    ?formula : equivalence

    ?equivalence : implication
                 | implication "↔" equivalence   -> iff

    ?implication : disjunction
                 | disjunction "→" implication   -> implies

    ?disjunction : conjunction
                 | conjunction "∨" disjunction   -> or_

    ?conjunction : unary
                 | unary "∧" conjunction         -> and_

    ?unary : "¬" unary                           -> not_
           | "⊥"                                 -> falsum
           | atom
           | "(" formula ")"

    atom : ATOM
    ATOM : "A".."Z"
""", start="formula", parser="lalr")


class Formula:
    """Base class for parsed formulas."""

    def __str__(self):
        return format_spacing(self._text())

    def _text(self) -> str:
        raise NotImplementedError

    def _operand(self) -> str:
        return self._text()


@dataclass(frozen=True)
class Atom(Formula):
    name: str

    def _text(self):
        return self.name


@dataclass(frozen=True)
class Falsum(Formula):

    def _text(self):
        return "⊥"


@dataclass(frozen=True)
class Not(Formula):
    operand: Formula

    def _text(self):
        return f"¬{self.operand._operand()}"


@dataclass(frozen=True)
class BinaryFormula(Formula):
    left: Formula
    right: Formula
    symbol = ""

    def _text(self):
        return f"{self.left._operand()} {self.symbol} {self.right._operand()}"

    def _operand(self):
        return f"({self._text()})"


@dataclass(frozen=True)
class And(BinaryFormula):
    symbol = "∧"


@dataclass(frozen=True)
class Or(BinaryFormula):
    symbol = "∨"


@dataclass(frozen=True)
class Implies(BinaryFormula):
    symbol = "→"


@dataclass(frozen=True)
class Iff(BinaryFormula):
    symbol = "↔"


class FormulaBuilder(Transformer):
    def atom(self, children):
        return Atom(str(children[0]))

    def falsum(self, children):
        return Falsum()

    def not_(self, children):
        return Not(children[0])

    def and_(self, children):
        return And(children[0], children[1])

    def or_(self, children):
        return Or(children[0], children[1])

    def implies(self, children):
        return Implies(children[0], children[1])

    def iff(self, children):
        return Iff(children[0], children[1])


def parse_formula(text: str) -> Formula:
    """Parse ``text`` (shorthand allowed) into a formula tree.

    Raises:
        FormulaSyntaxError: if the text is not a well-formed formula
    """
    source = translate_shorthand(text or "")
    try:
        tree = formula_parser.parse(source)
    except UnexpectedInput as e:
        raise FormulaSyntaxError(text, getattr(e, "column", None)) from e
    return FormulaBuilder().transform(tree)


def is_well_formed(text: str) -> bool:
    try:
        parse_formula(text)
    except FormulaSyntaxError:
        return False
    return True
