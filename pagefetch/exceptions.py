"""Custom exceptions for pagefetch services."""


class ConfigError(Exception):
    """Raised when the run configuration cannot be loaded or is invalid."""

    def __init__(self, config_path: str, reason: str):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Config '{config_path}' {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class HttpStatusError(Exception):
    """Raised when a response arrives with a status outside [200, 300)."""

    def __init__(self, url: str, status_code: int, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code}: {reason}")


class IndexFormatError(Exception):
    """Raised when the page index is not the expected `{"data": [...]}` shape."""

    def __init__(self, index_url: str, reason: str):
        self.index_url = index_url
        self.reason = reason
        super().__init__(f"Unexpected index format at {index_url}: {reason}")
