from typing import Callable, Optional

import requests

from pagefetch.domain.http_response import HttpResponse
from pagefetch.exceptions import HttpFetchError, HttpStatusError


class HttpService:
    """
    HTTP client wrapper for fetching pages and the page index.

    Requires http_client callable for dependency injection, so tests can pass
    a Mock instead of patching `requests`. One GET per call, no retries.
    `timeout=None` waits indefinitely.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: Optional[float] = None):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str, timeout: Optional[float] = None) -> HttpResponse:
        """Fetch URL and return the response; raise on transport errors or non-2xx status."""
        headers = {"User-Agent": self.user_agent}
        effective_timeout = timeout if timeout is not None else self.timeout
        try:
            resp = self.http_client(url, headers=headers, timeout=effective_timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        status = int(resp.status_code)
        if status < 200 or status >= 300:
            raise HttpStatusError(url, status, getattr(resp, "reason", None) or "")

        return HttpResponse(status, self._decode_body(resp))

    def _decode_body(self, resp) -> str:
        # requests falls back to ISO-8859-1 for text/* without a charset; pages are UTF-8
        content = getattr(resp, "content", None)
        if isinstance(content, bytes):
            return content.decode("utf-8", errors="replace")
        return resp.text
