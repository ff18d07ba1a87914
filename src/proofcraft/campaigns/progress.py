"""Per-user campaign progress stored as JSON."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union


logger = logging.getLogger(__name__)


def progress_key(user: str, campaign_id: str) -> str:
    return f"{user}:{campaign_id}"


class ProgressStore:
    """Completion flags and current step indices, keyed by ``user:campaign``.

    The file is rewritten on every change. A missing or unreadable file
    counts as no progress.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()
        self.data = self._load()

    def _load(self) -> Dict[str, Any]:
        empty = {"completed": {}, "steps": {}}
        if not self.path.exists():
            return empty
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("ignoring unreadable progress file %s: %s", self.path, e)
            return empty
        if not isinstance(data, dict):
            return empty
        return {
            "completed": dict(data.get("completed") or {}),
            "steps": dict(data.get("steps") or {}),
        }

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self.data, f, indent=2)

    @property
    def completed(self) -> Dict[str, bool]:
        return self.data["completed"]

    def is_complete(self, key: str) -> bool:
        return bool(self.completed.get(key, False))

    def mark_complete(self, key: str):
        if not self.completed.get(key):
            self.completed[key] = True
            self.save()

    def step_index(self, key: str) -> int:
        return int(self.data["steps"].get(key, 0))

    def save_step_index(self, key: str, index: int):
        self.data["steps"][key] = index
        self.save()
