import json
import logging
from typing import Optional

from pagefetch.domain.index_entry import IndexEntry
from pagefetch.exceptions import IndexFormatError
from pagefetch.services.http_service import HttpService

logger = logging.getLogger(__name__)


class IndexService:
    """Fetch and validate the site's page index.

    The index is `{"data": [{"path": ..., "lastModified": ...}, ...]}`; extra
    fields on the document or its entries are ignored. HTTP errors from
    `HttpService` propagate unchanged.
    """

    def __init__(self, http_service: HttpService):
        self.http_service = http_service

    def load(self, index_url: str, timeout: Optional[float] = None) -> list[IndexEntry]:
        response = self.http_service.fetch(index_url, timeout=timeout)
        try:
            document = json.loads(response.text)
        except ValueError as e:
            raise IndexFormatError(index_url, f"invalid JSON: {e}") from e

        data = document.get("data") if isinstance(document, dict) else None
        if not isinstance(data, list):
            raise IndexFormatError(index_url, "'data' must be an array")

        entries = []
        for position, item in enumerate(data):
            if not isinstance(item, dict) or not isinstance(item.get("path"), str):
                raise IndexFormatError(index_url, f"entry {position} has no string 'path'")
            # an absent timestamp is NaN, not null, so the page fails instead of dating to 1970
            last_modified = item["lastModified"] if "lastModified" in item else float("nan")
            entries.append(IndexEntry(path=item["path"], last_modified=last_modified))

        logger.debug("Index %s lists %d pages", index_url, len(entries))
        return entries
