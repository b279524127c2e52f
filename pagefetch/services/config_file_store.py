import json
import os
from typing import Optional

import yaml

from pagefetch.exceptions import ConfigError


class ConfigFileStore:
    """Filesystem IO for run configuration files.

    Responsibility: locate, read, and decode JSON or YAML files on disk.
    It does NOT validate fields; see `FetchConfigParser`.
    """

    def __init__(self, *, base_dir: Optional[str] = None):
        self.base_dir = base_dir

    def _resolve_path(self, config_path: str) -> str:
        if self.base_dir is None or os.path.isabs(config_path):
            return config_path
        return os.path.join(self.base_dir, config_path)

    def _is_yaml(self, full_path: str) -> bool:
        return full_path.endswith(".yml") or full_path.endswith(".yaml")

    def read_raw(self, config_path: str) -> str:
        """Return raw file contents for `config_path`."""
        full_path = self._resolve_path(config_path)
        if not os.path.isfile(full_path):
            raise ConfigError(config_path, "not found")
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(config_path, f"could not be read: {e}") from e

    def load_dict(self, config_path: str) -> dict:
        """Return the decoded mapping stored in `config_path`."""
        raw = self.read_raw(config_path)
        full_path = self._resolve_path(config_path)
        try:
            if self._is_yaml(full_path):
                data = yaml.safe_load(raw)
            else:
                data = json.loads(raw)
        except (ValueError, yaml.YAMLError) as e:
            raise ConfigError(config_path, f"is malformed: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(config_path, "must contain an object at the top level")
        return data
