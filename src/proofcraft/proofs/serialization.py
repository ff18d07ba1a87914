"""JSON serialization for proof states."""

import json
from pathlib import Path
from typing import Any, Dict, Union

from .state import Line, ProofState, RuleKind, replay_scopes


class ProofJSONEncoder(json.JSONEncoder):
    """JSON encoder for proof lines and states."""

    def default(self, obj):
        if isinstance(obj, Line):
            return {
                "_type": "Line",
                "id": obj.id,
                "text": obj.text,
                "indent": obj.indent,
                "rule": obj.rule.name
            }

        elif isinstance(obj, ProofState):
            return {
                "_type": "ProofState",
                "lines": obj.lines,
                "next_id": obj.next_id
            }

        return super().default(obj)


def decode_proof_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to proof objects.

    Frames and depth are not stored; they are replayed from the lines.
    """
    if "_type" not in dct:
        return dct

    obj_type = dct["_type"]

    if obj_type == "Line":
        return Line(dct["id"], dct["text"], dct["indent"], RuleKind[dct["rule"]])

    elif obj_type == "ProofState":
        lines = dct["lines"]
        frames, depth = replay_scopes(lines)
        return ProofState(
            lines=lines,
            frames=frames,
            current_depth=depth,
            next_id=dct.get("next_id", 1)
        )

    return dct


# Convenience functions

def state_to_json(state: ProofState, indent: int = 2) -> str:
    """Convert a ProofState to a JSON string."""
    return json.dumps(state, cls=ProofJSONEncoder, indent=indent, ensure_ascii=False)


def state_from_json(json_str: str) -> ProofState:
    """Create a ProofState from a JSON string."""
    return json.loads(json_str, object_hook=decode_proof_object)


def save_state(state: ProofState, file_path: Union[str, Path]) -> None:
    """Save a ProofState to a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(state, f, cls=ProofJSONEncoder, indent=2, ensure_ascii=False)


def load_state(file_path: Union[str, Path]) -> ProofState:
    """Load a ProofState from a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f, object_hook=decode_proof_object)
