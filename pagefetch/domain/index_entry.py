from typing import Any, NamedTuple


class IndexEntry(NamedTuple):
    """One page descriptor from the site's page index."""
    path: str
    last_modified: Any
    """Unix seconds as delivered by the index (NaN when absent); validated when the page is annotated"""
