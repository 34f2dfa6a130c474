"""Configuration management for ffexpr."""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Union

import yaml

logger = logging.getLogger("ffexpr")

ENV_VAR = "FFEXPR_CONFIG"


def default_path() -> Path:
    """``$FFEXPR_CONFIG`` if set, else ``~/.config/ffexpr/config.yaml``."""
    env = os.environ.get(ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".config" / "ffexpr" / "config.yaml"


@dataclass
class Config:
    """Main configuration container."""
    catalog_dirs: list[str] = field(default_factory=list)
    include_builtin_catalog: bool = True
    log_level: str = "WARNING"

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "Config":
        """Load configuration from YAML file; a missing file gives the defaults."""
        path = default_path() if path is None else Path(path)

        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            logger.warning("Invalid config %s: expected a mapping, using defaults", path)
            return cls()

        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in data.items() if k in known})
        if isinstance(config.catalog_dirs, str):
            config.catalog_dirs = [config.catalog_dirs]
        config.catalog_dirs = [str(d) for d in config.catalog_dirs or []]
        return config

    def save(self, path: Optional[Union[str, Path]] = None) -> None:
        """Save configuration to YAML file."""
        path = default_path() if path is None else Path(path)

        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "catalog_dirs": list(self.catalog_dirs),
            "include_builtin_catalog": self.include_builtin_catalog,
            "log_level": self.log_level,
        }

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)

    def apply_logging(self) -> None:
        """Set the level of the ``ffexpr`` logger."""
        logger.setLevel(self.log_level.upper())
