#!/usr/bin/env python3
"""
Replay proof scripts and report whether they reach their targets.

USAGE:
    proofcraft-run proof.pf
    proofcraft-run proofs/*.pf --stop-on-failure
    proofcraft-run proof.pf --json final_state.json
"""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from proofcraft.cli.display import format_proof, format_result
from proofcraft.exceptions import ScriptSyntaxError, UnknownLineError
from proofcraft.fileformats.script import read_script, run_script
from proofcraft.utils.config import Config


def replay_file(path: Path, args, engine_config):
    """Replay one script. Returns (succeeded, output lines)."""
    output = [f"== {path}"]
    try:
        commands = read_script(path)
        report = run_script(commands, config=engine_config, stop_on_failure=args.stop_on_failure)
    except (OSError, ScriptSyntaxError, UnknownLineError, ValueError) as e:
        output.append(f"Error: {e}")
        return False, output

    if args.verbose:
        for step in report.steps:
            message = format_result(step.result)
            output.append(f"  {step.command}" + (f"  -> {message}" if message else ""))

    output.append(format_proof(report.session.state))
    for step in report.failures:
        output.append(f"  line {step.command.line}: {format_result(step.result)}")
    if report.check is not None:
        output.append(format_result(report.check))
    else:
        output.append("(no check)")

    if args.json_output:
        report.session.save(args.json_output)
    return report.succeeded, output


def main():
    parser = argparse.ArgumentParser(
        description="Replay natural deduction proof scripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("scripts", type=Path, nargs="+", help="Proof script files")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--stop-on-failure", action="store_true", help="Stop a script at its first rejected rule")
    parser.add_argument("--json", dest="json_output", help="Save the final proof state of the last script as JSON")
    parser.add_argument("--verbose", action="store_true", help="Show every command and its outcome")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    engine_config = Config(args.config).engine

    succeeded = 0
    scripts = args.scripts
    iterator = tqdm(scripts, desc="Replaying scripts") if len(scripts) > 1 else scripts
    for path in iterator:
        ok, output = replay_file(path, args, engine_config)
        succeeded += ok
        for line in output:
            tqdm.write(line)

    if len(scripts) > 1:
        print(f"{succeeded}/{len(scripts)} scripts reached their target")
    sys.exit(0 if succeeded == len(scripts) else 1)


if __name__ == "__main__":
    main()
