import numbers
from typing import Optional

from pagefetch.domain.config import FetchConfig
from pagefetch.exceptions import ConfigError

REQUIRED_FIELDS = ("baseUrl", "indexUrl", "outputDir")


class FetchConfigParser:
    """Parse a decoded config dict into a FetchConfig.

    Responsibility: schema/validation for config files.
    It does NOT perform filesystem IO and does NOT touch the network.
    """

    def parse(self, *, config_path: str, data: dict) -> FetchConfig:
        for name in REQUIRED_FIELDS:
            value = data.get(name)
            if not isinstance(value, str) or value.strip() == "":
                raise ConfigError(config_path, f"is missing required field '{name}'")

        return FetchConfig(
            base_url=data["baseUrl"],
            index_url=data["indexUrl"],
            output_dir=data["outputDir"],
            filters=self._string_list(config_path, data, "filters"),
            skip_patterns=self._string_list(config_path, data, "skipPatterns"),
            delay_ms=self._non_negative_number(config_path, data, "delay") or 0,
            timeout_ms=self._non_negative_number(config_path, data, "timeout"),
            config_path=config_path,
        )

    def _string_list(self, config_path: str, data: dict, name: str) -> tuple[str, ...]:
        value = data.get(name)
        if value is None:
            return ()
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(config_path, f"field '{name}' must be a list of strings")
        return tuple(value)

    def _non_negative_number(self, config_path: str, data: dict, name: str) -> Optional[float]:
        value = data.get(name)
        if value is None:
            return None
        # bool is a Number subclass; "delay": true is a typo, not a delay
        if isinstance(value, bool) or not isinstance(value, numbers.Real) or value < 0:
            raise ConfigError(config_path, f"field '{name}' must be a non-negative number")
        return value
