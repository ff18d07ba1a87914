#!/usr/bin/env python3
"""
Interactive proof construction in the terminal.

Commands use the proof script syntax (assume, assert, select, and_intro,
and_elim, imp_intro, imp_elim, false, restate, delete, check, reset) plus
``show``, ``next``, ``help`` and ``quit``.

USAGE:
    proofcraft-repl
    proofcraft-repl --campaign campaigns/basics.yaml --user alice
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from proofcraft.campaigns import Campaign, CampaignRunner, ProgressStore
from proofcraft.cli.display import format_proof, format_result
from proofcraft.exceptions import ScriptSyntaxError, UnknownLineError
from proofcraft.fileformats.script import parse_script, run_script
from proofcraft.session import ProofSession
from proofcraft.utils.config import Config, EngineConfig


HELP = """\
assume <formula>      open an assumption (shorthand: ->, <->, &, and, implies, iff, not, F)
assert <atom>         state an atom
select <id> ...       choose operand lines
and_intro [ids]       X, Y ⊢ X ∧ Y
and_elim [id]         X ∧ Y ⊢ X, Y
imp_intro             close the innermost assumption
imp_elim [ids]        X, X → Y ⊢ Y
false                 add ⊥
restate [ids]         repeat visible lines
delete                remove the last line
target: <formula>     set the target
check [formula]       compare the last line with the target
show                  print the proof
next                  continue the campaign
reset                 clear the proof
quit                  leave"""


class Repl:
    """Line-at-a-time command handler around a proof session."""

    def __init__(self, config: Optional[EngineConfig] = None, runner: Optional[CampaignRunner] = None):
        self.runner = runner
        self.session = runner.session if runner is not None else ProofSession(config)
        self.target: Optional[str] = None
        self.done = False

    @property
    def current_target(self) -> Optional[str]:
        if self.runner is not None:
            return self.runner.target
        return self.target

    def handle(self, text: str) -> List[str]:
        """Execute one input line and return the lines to print."""
        word = text.strip().lower()
        if word in ("quit", "exit"):
            self.done = True
            return []
        if word == "help":
            return [HELP]
        if word == "show":
            return [format_proof(self.session.state)]
        if word == "next":
            return self._next()

        try:
            commands = parse_script(text)
        except ScriptSyntaxError as e:
            return [f"✗ {e}"]

        prepared = []
        for command in commands:
            if command.name == "target":
                self.target = command.argument
            elif command.name == "check" and command.argument is None:
                if self.current_target is None:
                    return ["✗ No target set. Use 'target: <formula>' or 'check <formula>'."]
                command = dataclasses.replace(command, argument=self.current_target)
            prepared.append(command)

        try:
            report = run_script(prepared, session=self.session)
        except UnknownLineError as e:
            return [f"✗ {e}"]

        output = []
        for step in report.steps:
            message = format_result(step.result)
            if message:
                output.append(message)
        if any(step.command.name not in ("check", "target", "select") for step in report.steps):
            output.append(format_proof(self.session.state))
        return output

    def _next(self) -> List[str]:
        if self.runner is None:
            return ["✗ No campaign loaded."]
        if self.runner.finished:
            return ["Campaign complete."]
        if self.runner.acknowledge():
            return self._describe_step()
        result = self.runner.next_problem()
        if result is not None and result.reached:
            return self._describe_step()
        return ["✗ Finish the current task before moving on."]

    def _describe_step(self) -> List[str]:
        if self.runner.finished:
            return [f"{self.runner.campaign.id} complete!"]
        step = self.runner.current_step
        if step.is_gameplay:
            return [f"New target: {step.goal}"]
        return [step.text.strip(), "(type 'next' to continue)"]

    def intro(self) -> List[str]:
        if self.runner is None:
            return ["Enter an assumption or assertion to begin. Type 'help' for commands."]
        return self._describe_step()


def main():
    parser = argparse.ArgumentParser(
        description="Build natural deduction proofs interactively",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--campaign", help="Campaign YAML file to play through")
    parser.add_argument("--user", help="Player name for saved progress")
    parser.add_argument("--progress", help="Progress file (default from config)")
    parser.add_argument("--verbose", action="store_true", help="Log engine activity")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = Config(args.config)

    runner = None
    if args.campaign:
        try:
            campaign = Campaign.from_yaml(args.campaign)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        store = ProgressStore(args.progress or config.get("progress.path"))
        runner = CampaignRunner(campaign, store, args.user or config.get("progress.user"), config.engine)

    repl = Repl(config.engine, runner)
    for line in repl.intro():
        print(line)
    while not repl.done:
        try:
            text = input("> ")
        except EOFError:
            break
        for line in repl.handle(text):
            print(line)


if __name__ == "__main__":
    main()
