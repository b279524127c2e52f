from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class FetchConfig:
    """Settings for a single fetch run, loaded once and never mutated.

    `delay_ms` and `timeout_ms` keep the millisecond units of the config file;
    use the `*_seconds` properties when talking to `time.sleep` or requests.
    """

    base_url: str
    index_url: str
    output_dir: str
    filters: tuple[str, ...] = ()
    skip_patterns: tuple[str, ...] = ()
    delay_ms: float = 0
    timeout_ms: Optional[float] = None
    config_path: Optional[str] = field(default=None, compare=False)

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000

    @property
    def timeout_seconds(self) -> Optional[float]:
        if self.timeout_ms is None:
            return None
        return self.timeout_ms / 1000

    def page_url(self, page_path: str) -> str:
        return f"{self.base_url}{page_path}"

    def should_skip(self, page_path: str) -> bool:
        return any(page_path.startswith(pattern) for pattern in self.skip_patterns)

    def __repr__(self):
        return f"<FetchConfig base_url={self.base_url} index_url={self.index_url} output_dir={self.output_dir}>"
