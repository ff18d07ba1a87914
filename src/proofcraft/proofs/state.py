"""Proof state: lines, open assumption scopes and the current selection."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Set, Tuple

from proofcraft.core.formula import format_spacing, sanitize
from proofcraft.exceptions import UnknownLineError


class RuleKind(Enum):
    """How a proof line was produced."""
    ASSUMPTION = "Assumption"
    ASSERTION = "Assertion"
    CONJUNCTION_INTRO = "∧-Intro"
    CONJUNCTION_ELIM_LEFT = "∧-ElimL"
    CONJUNCTION_ELIM_RIGHT = "∧-ElimR"
    IMPLICATION_INTRO = "→-Intro"
    IMPLICATION_ELIM = "→-Elim"
    CONTRADICTION = "Contradiction"
    RESTATEMENT = "Restatement"


@dataclass(frozen=True)
class Line:
    """A single row of the proof."""
    id: int
    text: str
    indent: int
    rule: RuleKind


@dataclass(frozen=True)
class AssumptionFrame:
    """An open assumption scope.

    ``open_index`` is the position of the opening Assumption line in the
    line sequence; lines after it with ``indent >= depth`` belong to the scope.
    """
    text: str
    depth: int
    open_index: int
    line_id: int


def replay_scopes(lines: Iterable[Line]) -> Tuple[List[AssumptionFrame], int]:
    """Recompute the frame stack and current depth from a line history."""
    frames: List[AssumptionFrame] = []
    depth = 0
    for i, line in enumerate(lines):
        if line.rule is RuleKind.ASSUMPTION:
            depth = line.indent
            frames.append(AssumptionFrame(line.text, line.indent, i, line.id))
        elif line.rule is RuleKind.IMPLICATION_INTRO:
            if frames:
                frames.pop()
            depth = frames[-1].depth if frames else 0
        else:
            depth = line.indent
    return frames, depth


@dataclass
class ProofState:
    """Lines of a proof together with its scope stack and selection."""
    lines: List[Line] = field(default_factory=list)
    frames: List[AssumptionFrame] = field(default_factory=list)
    current_depth: int = 0
    selection: Set[int] = field(default_factory=set)
    next_id: int = 1

    def __post_init__(self):
        self.lines = list(self.lines)
        self.frames = list(self.frames)
        self.selection = set(self.selection)
        if self.lines:
            self.next_id = max(self.next_id, max(line.id for line in self.lines) + 1)

    # Lines

    def add_line(self, text: str, rule: RuleKind, indent: Optional[int] = None) -> Line:
        """Append a line at ``indent`` (default: the current depth).

        The text is stored in display form and the selection is cleared.
        """
        if indent is None:
            indent = self.current_depth
        line = Line(
            id=self.next_id,
            text=format_spacing(sanitize(text)),
            indent=max(0, int(indent)),
            rule=rule
        )
        self.next_id += 1
        self.lines.append(line)
        self.selection.clear()
        return line

    def index_of(self, line_id: int) -> int:
        for i, line in enumerate(self.lines):
            if line.id == line_id:
                return i
        raise UnknownLineError(line_id)

    def get_line(self, line_id: int) -> Line:
        return self.lines[self.index_of(line_id)]

    def last_line(self) -> Optional[Line]:
        """Return the last line with non-empty text, if any."""
        for line in reversed(self.lines):
            if line.text:
                return line
        return None

    def remove_last(self) -> Line:
        """Pop the final line and rebuild the scopes from what remains."""
        removed = self.lines.pop()
        self.frames, self.current_depth = replay_scopes(self.lines)
        self.selection.discard(removed.id)
        return removed

    # Scopes

    def open_frame(self, text: str, line: Line) -> AssumptionFrame:
        frame = AssumptionFrame(text, line.indent, self.index_of(line.id), line.id)
        self.frames.append(frame)
        return frame

    def is_visible(self, line: Line) -> bool:
        """Global lines are always visible; scoped ones need an open frame
        at least as deep as their indent."""
        if line.indent == 0:
            return True
        return any(frame.depth >= line.indent for frame in self.frames)

    def shares_open_scope(self, lines: List[Line]) -> bool:
        """Check that ``lines`` all live in one currently open scope."""
        if not lines:
            return False
        deepest = max(line.indent for line in lines)
        if deepest == 0:
            return True
        return any(frame.depth >= deepest for frame in self.frames)

    # Selection

    def select(self, *line_ids: int):
        for line_id in line_ids:
            self.index_of(line_id)
        self.selection.update(line_ids)

    def deselect(self, *line_ids: int):
        for line_id in line_ids:
            self.selection.discard(line_id)

    def toggle(self, line_id: int):
        if line_id in self.selection:
            self.selection.discard(line_id)
        else:
            self.select(line_id)

    def selected_lines(self) -> List[Line]:
        """Selected lines in proof order, regardless of selection order."""
        return [line for line in self.lines if line.id in self.selection]

    def reset(self):
        """Clear lines, scopes and selection. Ids keep increasing."""
        self.lines.clear()
        self.frames.clear()
        self.current_depth = 0
        self.selection.clear()
