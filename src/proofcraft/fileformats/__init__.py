"""File formats for proofs."""

from .script import (
    Command, ScriptStep, ScriptReport,
    parse_script, read_script, run_script
)

__all__ = [
    'Command', 'ScriptStep', 'ScriptReport',
    'parse_script', 'read_script', 'run_script'
]
