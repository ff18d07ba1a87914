"""
Proof representation: lines, scopes, operation results and serialization.
"""

from .state import Line, AssumptionFrame, ProofState, RuleKind, replay_scopes
from .result import Status, RuleResult, CheckResult
from .serialization import (
    ProofJSONEncoder, decode_proof_object,
    state_to_json, state_from_json,
    save_state, load_state
)

__all__ = [
    'Line', 'AssumptionFrame', 'ProofState', 'RuleKind', 'replay_scopes',
    'Status', 'RuleResult', 'CheckResult',
    'ProofJSONEncoder', 'decode_proof_object',
    'state_to_json', 'state_from_json',
    'save_state', 'load_state'
]
