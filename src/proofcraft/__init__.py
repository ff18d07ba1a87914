"""
ProofCraft: natural deduction proofs in propositional logic.

ProofCraft builds Fitch-style proofs one line at a time and checks them
against a target formula. It includes:

- Formula text utilities and a formula parser
- Proof lines with nested assumption scopes
- Inference rules (assumption, assertion, ∧-intro/elim, →-intro/elim, ⊥, restatement)
- A replayable proof script format
- Campaigns of targets with saved progress

Basic usage:
    >>> from proofcraft import ProofSession
    >>> session = ProofSession()
    >>> _ = session.assume("P")
    >>> _ = session.assume("Q")
    >>> _ = session.implication_intro()
    >>> _ = session.implication_intro()
    >>> session.check_against_target("Target: P → (Q → Q)").status.value
    'Reached'
"""

__version__ = "0.1.0"

# Formula handling
from proofcraft.core import (
    sanitize, translate_shorthand, normalize, format_spacing,
    strip_outer_parens, split_top_level_conjunction, split_top_level_implication,
    Formula, parse_formula, is_well_formed
)

# Proof structures
from proofcraft.proofs import (
    Line, ProofState, RuleKind,
    Status, RuleResult, CheckResult,
    save_state, load_state
)

# Inference rules
from proofcraft.rules import Rule, get_rule, list_rules

# Sessions
from proofcraft.session import ProofSession

# File formats
from proofcraft.fileformats import parse_script, read_script, run_script

# Campaigns
from proofcraft.campaigns import Campaign, CampaignRunner, ProgressStore

# Configuration
from proofcraft.utils.config import EngineConfig


def prove(script: str, config: EngineConfig = None) -> CheckResult:
    """
    Replay a proof script and return its final check.

    Args:
        script: Proof script text; it must end in a ``check``
        config: Engine settings (default: built-in defaults)

    Returns:
        CheckResult of the last ``check`` command

    Raises:
        ValueError: if the script never checks against a target
    """
    report = run_script(script, config=config)
    if report.check is None:
        raise ValueError("Script has no check command")
    return report.check


__all__ = [
    # Version
    "__version__",

    # Formulas
    "sanitize", "translate_shorthand", "normalize", "format_spacing",
    "strip_outer_parens", "split_top_level_conjunction", "split_top_level_implication",
    "Formula", "parse_formula", "is_well_formed",

    # Proofs
    "Line", "ProofState", "RuleKind",
    "Status", "RuleResult", "CheckResult",
    "save_state", "load_state",

    # Rules
    "Rule", "get_rule", "list_rules",

    # Sessions
    "ProofSession",

    # File formats
    "parse_script", "read_script", "run_script",

    # Campaigns
    "Campaign", "CampaignRunner", "ProgressStore",

    # Configuration
    "EngineConfig",

    # High-level API
    "prove"
]
