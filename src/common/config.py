"""Shared configuration utilities.

Each stage reads its own top-level section from configs/<name>.yaml. The
name comes from the caller, then $PIPELINE_CONFIG, then "prod".
"""

import os
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar

import yaml
from dotenv import load_dotenv

load_dotenv()

T = TypeVar('T')

# Repository-level configs/ directory
CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"
CONFIG_ENV_VAR = "PIPELINE_CONFIG"


def find_config_path(
    config_name: str | None,
    config_dir: Path = CONFIG_DIR,
    default_name: str = "prod",
    env_var: str | None = CONFIG_ENV_VAR,
) -> Path:
    """Resolve a config name to configs/<name>.yaml.

    Raises:
        FileNotFoundError: If the resolved file is missing.
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    path = config_dir / f"{config_name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return path


def load_yaml(path: Path) -> dict:
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_section(
    section: str,
    config_name: str | None = None,
    config_dir: Path = CONFIG_DIR,
) -> dict[str, Any]:
    """Load one stage's section; a missing section yields {} so stage defaults apply."""
    value = load_yaml(find_config_path(config_name, config_dir)).get(section) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{section}' must be a mapping")
    return value


class ConfigSingleton(Generic[T]):
    """Process-wide holder for a stage config.

    The loader runs on first `get()`. Tests and CLIs can `set()` an
    explicit config, and `reset()` forces the next `get()` to reload.
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        self._config = config

    def reset(self) -> None:
        self._config = None
