"""Plain-text rendering of proofs for the terminal."""

from typing import Iterable, List, Optional, Set, Union

from proofcraft.proofs.result import CheckResult, RuleResult
from proofcraft.proofs.state import Line, ProofState


def format_line(line: Line, selected: bool = False, width: int = 40) -> str:
    """Format a proof line: id, formula indented by depth, then its rule."""
    marker = "*" if selected else " "
    body = "  " * line.indent + line.text
    return f"[{line.id:2d}]{marker}{body:<{width}} {line.rule.value}"


def format_proof(state: ProofState, selection: Optional[Set[int]] = None) -> str:
    if not state.lines:
        return "(empty proof)"
    selection = state.selection if selection is None else selection
    return "\n".join(format_line(line, line.id in selection) for line in state.lines)


def format_result(result: Union[RuleResult, CheckResult, None]) -> str:
    if result is None:
        return ""
    if isinstance(result, CheckResult):
        mark = "✓" if result.reached else "✗"
        return f"{mark} {result.message}"
    if result.ok:
        return result.message
    return f"✗ {result.message} ({result.status.value})"


def format_lines(lines: Iterable[Line]) -> List[str]:
    return [format_line(line) for line in lines]
