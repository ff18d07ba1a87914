import copy
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

import yaml
from dotenv import load_dotenv

from proofcraft.exceptions import InvalidConfigError


DEFAULTS: Dict[str, Any] = {
    "engine": {
        "max_depth": 3,
        "atoms": ["P", "Q", "R", "S"],
        "target_prefix": "Target:",
    },
    "progress": {
        "path": "~/.proofcraft/progress.json",
        "user": "Guest",
    },
}


@dataclass(frozen=True)
class EngineConfig:
    """Settings for a proof session."""
    max_depth: int = 3
    atoms: Sequence[str] = ("P", "Q", "R", "S")
    target_prefix: str = "Target:"

    def __post_init__(self):
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise InvalidConfigError("max_depth", self.max_depth)
        atoms = tuple(self.atoms or ())
        if not atoms or not all(isinstance(a, str) and len(a) == 1 and "A" <= a <= "Z" for a in atoms):
            raise InvalidConfigError("atoms", self.atoms)
        object.__setattr__(self, "atoms", atoms)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'EngineConfig':
        data = data or {}
        max_depth = data.get("max_depth", cls.max_depth)
        if isinstance(max_depth, str):
            try:
                max_depth = int(max_depth)
            except ValueError:
                raise InvalidConfigError("max_depth", max_depth) from None
        return cls(
            max_depth=max_depth,
            atoms=data.get("atoms", cls.atoms),
            target_prefix=data.get("target_prefix", cls.target_prefix)
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'EngineConfig':
        """Load engine settings from the ``engine`` section of a YAML file."""
        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data.get("engine", data))


class Config:
    def __init__(self, config_path: Optional[str] = None):
        load_dotenv()
        self.config_path = config_path or self._find_config_file()
        self.config = self._load_config()
        self._resolve_environment_variables()

    def _find_config_file(self) -> Optional[str]:
        """Find the default config file, if there is one."""
        possible_paths = [
            Path.cwd() / "configs" / "default.yaml",
            Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml",
            Path.home() / ".proofcraft" / "config.yaml",
        ]

        for path in possible_paths:
            if path.exists():
                return str(path)

        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML on top of the built-in defaults."""
        config = copy.deepcopy(DEFAULTS)
        if self.config_path is None:
            return config
        with open(self.config_path, 'r') as f:
            loaded = yaml.safe_load(f) or {}
        return self._deep_update(config, loaded)

    def _resolve_environment_variables(self):
        """Resolve ${VAR:default} values from the environment."""
        def resolve_value(value):
            if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
                var_default = value[2:-1].split(":", 1)
                var_name = var_default[0]
                default_value = var_default[1] if len(var_default) > 1 else ""
                return os.environ.get(var_name, default_value)
            elif isinstance(value, dict):
                return {k: resolve_value(v) for k, v in value.items()}
            elif isinstance(value, list):
                return [resolve_value(v) for v in value]
            return value

        self.config = resolve_value(self.config)

    @staticmethod
    def _deep_update(d, u):
        for k, v in u.items():
            if isinstance(v, dict):
                d[k] = Config._deep_update(d.get(k, {}) or {}, v)
            else:
                d[k] = v
        return d

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated key."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def __getitem__(self, key: str) -> Any:
        """Allow dictionary-style access."""
        return self.get(key)

    def update(self, updates: Dict[str, Any]):
        """Update configuration with new values."""
        self.config = self._deep_update(self.config, updates)

    @property
    def engine(self) -> EngineConfig:
        return EngineConfig.from_dict(self.get("engine"))
