"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from pagefetch import config as env
from pagefetch.services.config_file_store import ConfigFileStore
from pagefetch.services.config_loader import ConfigLoader
from pagefetch.services.crawl_executor import CrawlExecutor
from pagefetch.services.fetch_config_parser import FetchConfigParser
from pagefetch.services.html_annotator import HtmlAnnotator
from pagefetch.services.http_service import HttpService
from pagefetch.services.index_service import IndexService
from pagefetch.services.page_writer import PageWriter
from pagefetch.services.summary_reporter import SummaryReporter


# Environment variables used by the container (read via `pagefetch.config` helpers).
#
# USER_AGENT (str, default: "pagefetch/0.1")
#   User-Agent header for the index request and every page request.
#
# HTTP_TIMEOUT (float seconds | optional)
#   Request timeout used when the run config sets no `timeout`. Unset means
#   requests wait indefinitely.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "pagefetch/0.1"),
    "HTTP_TIMEOUT": env.get_optional_float_env("HTTP_TIMEOUT"),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for pagefetch."""

    config = providers.Configuration(default=ENV)

    # Overridden in tests with a Mock returning canned responses
    http_client = providers.Object(requests.get)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=http_client,
        timeout=config.HTTP_TIMEOUT,
    )

    index_service = providers.Singleton(
        IndexService,
        http_service=http_service,
    )

    config_loader = providers.Singleton(
        ConfigLoader,
        store=providers.Factory(ConfigFileStore),
        parser=providers.Factory(FetchConfigParser),
    )

    html_annotator = providers.Singleton(HtmlAnnotator)

    page_writer = providers.Singleton(PageWriter)

    summary_reporter = providers.Singleton(SummaryReporter)

    crawl_executor = providers.Factory(
        CrawlExecutor,
        http_service=http_service,
        index_service=index_service,
        annotator=html_annotator,
        page_writer=page_writer,
        summary_reporter=summary_reporter,
    )
