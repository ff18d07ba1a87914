"""Formula handling: string utilities and the formula parser."""

from .formula import (
    Split,
    sanitize, translate_shorthand, normalize, format_spacing,
    parenthesize, strip_outer_parens, strip_outer_parens_repeated,
    split_top_level_conjunction, split_top_level_implication,
    canonical, strip_target_prefix, formulas_match
)
from .parser import (
    Formula, Atom, Falsum, Not, And, Or, Implies, Iff,
    parse_formula, is_well_formed
)

__all__ = [
    # Formula text
    'Split',
    'sanitize', 'translate_shorthand', 'normalize', 'format_spacing',
    'parenthesize', 'strip_outer_parens', 'strip_outer_parens_repeated',
    'split_top_level_conjunction', 'split_top_level_implication',
    'canonical', 'strip_target_prefix', 'formulas_match',
    # Parser
    'Formula', 'Atom', 'Falsum', 'Not', 'And', 'Or', 'Implies', 'Iff',
    'parse_formula', 'is_well_formed'
]
