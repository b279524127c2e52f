"""Domain objects for pagefetch - explicit re-exports to satisfy linters."""
from .config import FetchConfig as FetchConfig
from .crawl_result import CrawlReport as CrawlReport
from .crawl_result import CrawlSummary as CrawlSummary
from .crawl_result import PageResult as PageResult
from .crawl_result import PageStatus as PageStatus
from .http_response import HttpResponse as HttpResponse
from .index_entry import IndexEntry as IndexEntry

__all__ = [
    "FetchConfig",
    "CrawlReport",
    "CrawlSummary",
    "PageResult",
    "PageStatus",
    "HttpResponse",
    "IndexEntry",
]
