"""Outcomes of proof operations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .state import Line


class Status(Enum):
    OK = "Ok"

    # Input
    EMPTY_INPUT = "EmptyInput"
    INVALID_ATOM = "InvalidAtom"

    # Scope
    SCOPE_LIMIT_EXCEEDED = "ScopeLimitExceeded"
    NO_OPEN_SCOPE = "NoOpenScope"
    SCOPE_MISMATCH = "ScopeMismatch"
    NOT_VISIBLE = "NotVisible"
    EMPTY_SELECTION = "EmptySelection"
    WRONG_SELECTION_COUNT = "WrongSelectionCount"

    # Shape
    NOT_A_CONJUNCTION = "NotAConjunction"
    NO_IMPLICATION_FOUND = "NoImplicationFound"
    ANTECEDENT_MISMATCH = "AntecedentMismatch"

    # State
    NOTHING_TO_DELETE = "NothingToDelete"
    EMPTY_PROOF = "EmptyProof"

    # Target checks
    REACHED = "Reached"
    STILL_SCOPED = "StillScoped"
    MISMATCH = "Mismatch"


@dataclass
class RuleResult:
    """Result of a proof operation.

    ``lines`` holds the lines appended by a successful operation (or the
    removed line for a deletion); it is empty on failure.
    """
    operation: str
    status: Status
    message: str
    lines: List[Line] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @classmethod
    def success(cls, operation: str, message: str, *lines: Line) -> 'RuleResult':
        return cls(operation, Status.OK, message, list(lines))

    @classmethod
    def failure(cls, operation: str, status: Status, message: str) -> 'RuleResult':
        return cls(operation, status, message)


@dataclass
class CheckResult:
    """Result of comparing the last proof line against a target."""
    status: Status
    message: str
    last: Optional[str] = None
    target: Optional[str] = None

    @property
    def reached(self) -> bool:
        return self.status is Status.REACHED
