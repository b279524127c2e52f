"""Crawl result data model."""
from enum import Enum
from typing import NamedTuple, Optional, Sequence


class PageStatus(str, Enum):
    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"


class PageResult(NamedTuple):
    """Outcome of processing a single index entry."""
    page_path: str
    status: PageStatus
    error: Optional[str] = None


class CrawlSummary(NamedTuple):
    """Counts reported at the end of a run."""
    total: int
    successful: int
    skipped: int
    failed: int

    @classmethod
    def from_results(cls, results: Sequence[PageResult], total: Optional[int] = None) -> "CrawlSummary":
        return cls(
            total=len(results) if total is None else total,
            successful=sum(1 for r in results if r.status == PageStatus.SUCCESS),
            skipped=sum(1 for r in results if r.status == PageStatus.SKIPPED),
            failed=sum(1 for r in results if r.status == PageStatus.ERROR),
        )


class CrawlReport(NamedTuple):
    """Result of a crawl run.

    `results` keeps the index order, one entry per descriptor.
    """
    results: list[PageResult]
    summary: CrawlSummary
