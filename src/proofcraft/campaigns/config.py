"""Campaign definitions."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from proofcraft.core.formula import strip_target_prefix
from proofcraft.core.parser import is_well_formed


DEFAULT_TARGETS = ["Target: P", "Target: A → ( P → A )"]


@dataclass
class CampaignStep:
    """One step of a campaign.

    ``gameplay`` steps carry a target formula; ``info`` steps carry text the
    player reads before moving on.
    """
    type: str
    id: str
    target: Optional[str] = None
    text: str = ""

    @property
    def is_gameplay(self) -> bool:
        return self.type == "gameplay"

    @property
    def goal(self) -> Optional[str]:
        """The target formula without its ``Target:`` label."""
        return strip_target_prefix(self.target) if self.target is not None else None


@dataclass
class Campaign:
    """An ordered sequence of steps."""
    id: str
    steps: List[CampaignStep] = field(default_factory=list)
    title: str = ""

    def __post_init__(self):
        if not self.steps:
            self.steps = [
                CampaignStep("gameplay", f"lvl{i + 1}", target)
                for i, target in enumerate(DEFAULT_TARGETS)
            ]
        for step in self.steps:
            if step.is_gameplay:
                if not step.goal or not is_well_formed(step.goal):
                    raise ValueError(f"Step '{step.id}' of campaign '{self.id}' has a malformed target: {step.target!r}")

    def __len__(self) -> int:
        return len(self.steps)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Campaign':
        steps = []
        for i, step_data in enumerate(data.get('steps', [])):
            if step_data.get('type') == 'gameplay':
                steps.append(CampaignStep(
                    type='gameplay',
                    id=step_data.get('id') or f"lvl{i + 1}",
                    target=step_data.get('target')
                ))
            else:
                steps.append(CampaignStep(
                    type='info',
                    id=step_data.get('id') or f"info{i + 1}",
                    text=step_data.get('text', '')
                ))

        return cls(
            id=data.get('id', 'campaign'),
            steps=steps,
            title=data.get('title', '')
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'Campaign':
        """Load a campaign from a YAML file; the id defaults to the file stem."""
        yaml_path = Path(yaml_path)
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        data.setdefault('id', yaml_path.stem)
        return cls.from_dict(data)

    def to_yaml(self, yaml_path: Union[str, Path]):
        """Save the campaign to a YAML file."""
        data = {
            'id': self.id,
            'title': self.title,
            'steps': []
        }

        for step in self.steps:
            if step.is_gameplay:
                data['steps'].append({'type': 'gameplay', 'id': step.id, 'target': step.target})
            else:
                data['steps'].append({'type': 'info', 'id': step.id, 'text': step.text})

        with open(yaml_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
