"""Configuration for term-deps."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from .injection.constants import CONFIG_FILENAME, DEFAULT_DEPS_DIR, DEFAULT_HTML_PATH
from .injection.tasks import DEFAULT_TASKS, InjectionTask


@dataclass
class InjectionConfig:
    """Where to read term.html and its dependencies from."""
    html_path: str = DEFAULT_HTML_PATH
    deps_dir: str = DEFAULT_DEPS_DIR
    dry_run: bool = False
    tasks: Tuple[InjectionTask, ...] = DEFAULT_TASKS
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def from_yml(cls, config_path: Optional[str] = None, **overrides) -> 'InjectionConfig':
        """Create configuration from term-deps.yml with command-line overrides.

        Only the ``paths`` section is read:

            paths:
              html: ../term.html
              deps_dir: ./node_modules

        Args:
            config_path: Explicit config file; defaults to ./term-deps.yml when present.
            **overrides: Command-line values; None means "not given".

        Returns:
            InjectionConfig: Defaults, then file values, then overrides.
        """
        config = cls()
        path = Path(config_path) if config_path else Path(CONFIG_FILENAME)

        if path.exists():
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
                if not isinstance(data, dict):
                    raise ValueError("top level must be a mapping")

                paths_config = data.get('paths') or {}
                if not isinstance(paths_config, dict):
                    raise ValueError("'paths' must be a mapping")
                if 'html' in paths_config:
                    config.html_path = str(paths_config['html'])
                if 'deps_dir' in paths_config:
                    config.deps_dir = str(paths_config['deps_dir'])
            except (OSError, yaml.YAMLError, ValueError) as e:
                # Fall back to defaults, the CLI reports it
                config = cls()
                config.warnings.append(f"Ignoring {path}: {e}")
        elif config_path:
            config.warnings.append(f"Config file {path} not found, using defaults")

        # Command-line overrides win
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)

        return config
