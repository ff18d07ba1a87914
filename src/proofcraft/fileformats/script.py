"""Proof scripts: a line-oriented text format that replays a proof.

Example::

    target: P → (Q → Q)
    assume P
    assume Q
    imp_intro
    imp_intro
    check

Rule commands (``and_intro``, ``and_elim``, ``imp_intro``, ``imp_elim``,
``false``, ``restate``) accept line ids, which replace the selection before
the rule runs. ``select 1 2`` sets the selection on its own.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from proofcraft.exceptions import ScriptSyntaxError
from proofcraft.proofs.result import CheckResult, RuleResult
from proofcraft.session import ProofSession
from proofcraft.utils.config import EngineConfig


RULE_COMMANDS = ("and_intro", "and_elim", "imp_intro", "imp_elim", "false", "restate")

script_parser = Lark(r"""
    %import common.WS_INLINE
    %import common.INT
    %ignore WS_INLINE
    %ignore COMMENT

    script : _item* command?
    _item : command? _NL

    ?command : target | assume | assert_ | select | rule | delete | check | reset

    target : "target"i ":" FORMULA
    assume : "assume"i FORMULA
    assert_ : "assert"i FORMULA
    select : "select"i INT*
    rule : RULE INT*
    delete : "delete"i
    check : "check"i FORMULA?
    reset : "reset"i

    RULE.2 : "and_intro"i | "and_elim"i | "imp_intro"i | "imp_elim"i | "false"i | "restate"i
    FORMULA : /[^\s#][^\n#]*/
    COMMENT : /#[^\n]*/
    _NL : /(\r?\n)+/
""", start="script", parser="lalr", propagate_positions=True)


@dataclass(frozen=True)
class Command:
    """One script command."""
    name: str
    argument: Optional[str] = None
    line_ids: Tuple[int, ...] = ()
    line: Optional[int] = None

    def __str__(self):
        parts = [self.name]
        if self.argument is not None:
            parts.append(self.argument)
        parts.extend(str(i) for i in self.line_ids)
        return " ".join(parts)


@v_args(meta=True)
class CommandBuilder(Transformer):
    def target(self, meta, children):
        return Command("target", str(children[0]).strip(), line=self._line(meta))

    def assume(self, meta, children):
        return Command("assume", str(children[0]).strip(), line=self._line(meta))

    def assert_(self, meta, children):
        return Command("assert", str(children[0]).strip(), line=self._line(meta))

    def select(self, meta, children):
        return Command("select", line_ids=tuple(int(c) for c in children), line=self._line(meta))

    def rule(self, meta, children):
        name, *ids = children
        return Command(str(name).lower(), line_ids=tuple(int(i) for i in ids), line=self._line(meta))

    def delete(self, meta, children):
        return Command("delete", line=self._line(meta))

    def check(self, meta, children):
        argument = str(children[0]).strip() if children else None
        return Command("check", argument, line=self._line(meta))

    def reset(self, meta, children):
        return Command("reset", line=self._line(meta))

    def script(self, meta, children):
        return list(children)

    @staticmethod
    def _line(meta):
        return None if meta.empty else meta.line


def parse_script(source: str) -> List[Command]:
    """Parse script text into commands.

    Raises:
        ScriptSyntaxError: on the first line that is not a valid command
    """
    try:
        tree = script_parser.parse(source)
    except UnexpectedInput as e:
        text = e.get_context(source).splitlines()[0] if source else ""
        raise ScriptSyntaxError(getattr(e, "line", "?"), getattr(e, "column", "?"), text) from e
    return CommandBuilder().transform(tree)


def read_script(file_path: Union[str, Path]) -> List[Command]:
    with open(file_path, 'r', encoding='utf-8') as f:
        return parse_script(f.read())


@dataclass
class ScriptStep:
    command: Command
    result: Union[RuleResult, CheckResult, None] = None

    @property
    def failed(self) -> bool:
        return isinstance(self.result, RuleResult) and not self.result.ok


@dataclass
class ScriptReport:
    """Outcome of replaying a script."""
    session: ProofSession
    target: Optional[str] = None
    steps: List[ScriptStep] = field(default_factory=list)
    check: Optional[CheckResult] = None

    @property
    def succeeded(self) -> bool:
        """True when the last check reached its target."""
        return self.check is not None and self.check.reached

    @property
    def failures(self) -> List[ScriptStep]:
        return [step for step in self.steps if step.failed]


def run_script(commands: Union[str, Sequence[Command]],
               session: Optional[ProofSession] = None,
               config: Optional[EngineConfig] = None,
               stop_on_failure: bool = False) -> ScriptReport:
    """
    Replay script commands against a proof session.

    Args:
        commands: Script text or already parsed commands
        session: Session to replay into (default: a fresh one)
        config: Engine settings for a fresh session
        stop_on_failure: Stop at the first rule that is rejected

    Returns:
        ScriptReport with one step per executed command

    Raises:
        UnknownLineError: if a command selects a line id that does not exist
        ValueError: if ``check`` runs with no target set
    """
    if isinstance(commands, str):
        commands = parse_script(commands)
    if session is None:
        session = ProofSession(config)

    report = ScriptReport(session)
    for command in commands:
        step = ScriptStep(command, _execute(command, session, report))
        report.steps.append(step)
        if isinstance(step.result, CheckResult):
            report.check = step.result
        if stop_on_failure and step.failed:
            break
    return report


def _execute(command: Command, session: ProofSession, report: ScriptReport):
    name = command.name
    if name == "target":
        report.target = command.argument
        return None
    if name == "assume":
        return session.assume(command.argument)
    if name == "assert":
        return session.assert_atom(command.argument)
    if name == "select":
        session.select_only(command.line_ids)
        return None
    if name in RULE_COMMANDS:
        if command.line_ids:
            session.select_only(command.line_ids)
        return session.apply(name)
    if name == "delete":
        return session.delete_last()
    if name == "check":
        target = command.argument or report.target
        if target is None:
            raise ValueError(f"check without a target (line {command.line})")
        return session.check_against_target(target)
    if name == "reset":
        session.reset()
        return None
    raise ValueError(f"Unknown command: {name}")
