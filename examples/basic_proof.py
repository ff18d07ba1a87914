#!/usr/bin/env python3
"""
Basic proof session example.

This example builds a proof of ((P → Q) ∧ P) → Q step by step, shows a
rejected rule application, and checks the result against its target.
"""

from proofcraft import ProofSession
from proofcraft.cli.display import format_proof, format_result


TARGET = "Target: ((P → Q) ∧ P) → Q"


def build_proof(session):
    """Assume the conjunction, split it, apply Modus Ponens and discharge."""
    steps = []

    # 1. ((P → Q) ∧ P), opened as an assumption
    steps.append(session.assume("(P -> Q) & P"))

    # 2-3. split the conjunction into P → Q and P
    session.select(1)
    steps.append(session.conjunction_elim())

    # Modus Ponens needs two lines; this one is rejected
    session.select(2)
    steps.append(session.modus_ponens())

    # 4. Q from P → Q and P
    session.select(2, 3)
    steps.append(session.modus_ponens())

    # 5. discharge the assumption
    steps.append(session.implication_intro())
    return steps


def main():
    """Main example function."""
    print("=== Basic Proof Example ===\n")
    print(TARGET)
    print()

    session = ProofSession()
    for result in build_proof(session):
        print(f"  {result.operation}: {format_result(result)}")

    print("\n=== Final Proof ===")
    print(format_proof(session.state))

    check = session.check_against_target(TARGET)
    print()
    print(format_result(check))


if __name__ == "__main__":
    main()
