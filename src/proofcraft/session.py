"""Interactive proof session.

A :class:`ProofSession` owns one :class:`~proofcraft.proofs.state.ProofState`
and exposes one method per proof operation. Operations run to completion
synchronously; callers invoke them one at a time.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from proofcraft.core.formula import formulas_match, normalize, strip_target_prefix
from proofcraft.proofs.result import CheckResult, RuleResult, Status
from proofcraft.proofs.serialization import load_state, save_state
from proofcraft.proofs.state import Line, ProofState
from proofcraft.rules import Rule, get_rule
from proofcraft.utils.config import EngineConfig


logger = logging.getLogger(__name__)


class ProofSession:
    """One proof attempt: lines, open scopes and the current selection."""

    def __init__(self, config: Optional[EngineConfig] = None, state: Optional[ProofState] = None):
        self.config = config or EngineConfig()
        self.state = state if state is not None else ProofState()
        self.rules = {
            'assume': get_rule('assume', max_depth=self.config.max_depth),
            'assert': get_rule('assert', atoms=self.config.atoms),
        }
        for name in ('and_intro', 'and_elim', 'imp_intro', 'imp_elim', 'false', 'restate'):
            self.rules[name] = get_rule(name)

    # Convenience views

    @property
    def lines(self):
        return self.state.lines

    @property
    def frames(self):
        return self.state.frames

    @property
    def current_depth(self) -> int:
        return self.state.current_depth

    @property
    def selection(self):
        return self.state.selection

    def last_line(self) -> Optional[Line]:
        return self.state.last_line()

    # Selection

    def select(self, *line_ids: int):
        """Add lines to the selection.

        Raises:
            UnknownLineError: if an id does not belong to a line
        """
        self.state.select(*line_ids)

    def select_only(self, line_ids: Iterable[int]):
        """Replace the selection with ``line_ids``."""
        line_ids = list(line_ids)
        for line_id in line_ids:
            self.state.index_of(line_id)
        self.state.selection.clear()
        self.state.select(*line_ids)

    def deselect(self, *line_ids: int):
        self.state.deselect(*line_ids)

    def toggle(self, line_id: int):
        self.state.toggle(line_id)

    def clear_selection(self):
        self.state.selection.clear()

    # Operations

    def apply(self, rule_name: str, text: Optional[str] = None) -> RuleResult:
        """Apply a rule by name."""
        rule = self.rules.get(rule_name)
        if rule is None:
            raise ValueError(f"Unknown rule: {rule_name}")
        return self._run(rule, text)

    def assume(self, text: str) -> RuleResult:
        return self._run(self.rules['assume'], text)

    def assert_atom(self, text: str) -> RuleResult:
        return self._run(self.rules['assert'], text)

    def conjunction_intro(self) -> RuleResult:
        return self._run(self.rules['and_intro'])

    def conjunction_elim(self) -> RuleResult:
        return self._run(self.rules['and_elim'])

    def implication_intro(self) -> RuleResult:
        return self._run(self.rules['imp_intro'])

    def implication_elim(self) -> RuleResult:
        return self._run(self.rules['imp_elim'])

    modus_ponens = implication_elim

    def contradiction(self) -> RuleResult:
        return self._run(self.rules['false'])

    def restate(self) -> RuleResult:
        return self._run(self.rules['restate'])

    def delete_last(self) -> RuleResult:
        """Remove the final line and rebuild scopes from the remaining lines."""
        if not self.state.lines:
            result = RuleResult.failure('delete', Status.NOTHING_TO_DELETE, "No lines to delete.")
            logger.debug("delete rejected: %s", result.message)
            return result
        removed = self.state.remove_last()
        logger.debug("deleted line %d (%s); depth now %d", removed.id, removed.text, self.state.current_depth)
        return RuleResult.success('delete', "Deleted last line.", removed)

    def check_against_target(self, target: str) -> CheckResult:
        """Compare the last line with ``target``.

        The target may carry a ``Target:`` label. It is reached only when the
        formulas match and the last line is outside every assumption scope.
        """
        last = self.state.last_line()
        if last is None:
            return CheckResult(Status.EMPTY_PROOF, "No lines to check.")

        goal = normalize(strip_target_prefix(target, self.config.target_prefix))
        if formulas_match(last.text, goal):
            if last.indent == 0:
                result = CheckResult(Status.REACHED, "Target reached!", last.text, goal)
            else:
                result = CheckResult(
                    Status.STILL_SCOPED,
                    "The last line matches the target but is still inside an open assumption.",
                    last.text, goal
                )
        else:
            result = CheckResult(
                Status.MISMATCH,
                f'Last line: "{last.text}" ≠ Target: "{goal}"',
                last.text, goal
            )
        logger.debug("check against %r: %s", goal, result.status.value)
        return result

    def reset(self):
        """Start over with an empty proof."""
        self.state.reset()
        logger.info("proof session reset")

    # Persistence

    def save(self, file_path: Union[str, Path]):
        save_state(self.state, file_path)

    @classmethod
    def load(cls, file_path: Union[str, Path], config: Optional[EngineConfig] = None) -> 'ProofSession':
        return cls(config, load_state(file_path))

    def _run(self, rule: Rule, text: Optional[str] = None) -> RuleResult:
        result = rule.apply(self.state, text)
        if result.ok:
            for line in result.lines:
                logger.debug("line %d [%s] depth %d: %s", line.id, line.rule.value, line.indent, line.text)
        else:
            logger.debug("%s rejected (%s): %s", rule.name, result.status.value, result.message)
        return result

    def __repr__(self) -> str:
        return f"ProofSession(lines={len(self.state.lines)}, depth={self.state.current_depth})"
