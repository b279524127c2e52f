import logging
import os
import time
from typing import Callable

from pagefetch.domain.config import FetchConfig
from pagefetch.domain.crawl_result import CrawlReport, CrawlSummary, PageResult, PageStatus
from pagefetch.domain.index_entry import IndexEntry
from pagefetch.exceptions import HttpFetchError, HttpStatusError
from pagefetch.services.html_annotator import HtmlAnnotator
from pagefetch.services.http_service import HttpService
from pagefetch.services.index_service import IndexService
from pagefetch.services.page_writer import PageWriter
from pagefetch.services.summary_reporter import SummaryReporter
from pagefetch.utils.datetime_utils import epoch_to_iso_z

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Runs one fetch pass over the page index.

    This class owns the control-flow (index load, skip checks, fetch/annotate/write
    per page, politeness delay, summary). It does NOT construct dependencies
    (that stays in the DI layer).

    Pages are processed strictly one at a time in index order. A page failure is
    recorded as a `PageResult` and never aborts the run; failures while loading
    the index propagate to the caller.
    """

    def __init__(
        self,
        *,
        http_service: HttpService,
        index_service: IndexService,
        annotator: HtmlAnnotator,
        page_writer: PageWriter,
        summary_reporter: SummaryReporter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.http_service = http_service
        self.index_service = index_service
        self.annotator = annotator
        self.page_writer = page_writer
        self.summary_reporter = summary_reporter
        self._sleep = sleep

    def run(self, config: FetchConfig) -> CrawlReport:
        if config is None:
            raise ValueError("config is required for run")

        entries = self.index_service.load(config.index_url, timeout=config.timeout_seconds)
        logger.info("Found %d pages to process", len(entries))

        self.page_writer.ensure_output_dir(config.output_dir)

        total = len(entries)
        results: list[PageResult] = []
        for i, entry in enumerate(entries):
            result = self.process_page(entry, config, position=i + 1, total=total)
            results.append(result)
            if result.status == PageStatus.SUCCESS and i < total - 1:
                self._sleep(config.delay_seconds)

        summary = CrawlSummary.from_results(results, total=total)
        self.summary_reporter.report(summary)
        return CrawlReport(results=results, summary=summary)

    def process_page(self, entry: IndexEntry, config: FetchConfig, position: int, total: int) -> PageResult:
        """Fetch, annotate and write one page; return its outcome instead of raising."""
        page_path = entry.path
        if config.should_skip(page_path):
            logger.info("Skipping page: %s", page_path)
            return PageResult(page_path, PageStatus.SKIPPED)

        progress = position / total * 100
        logger.info("[%d/%d] (%.1f%%) Fetching: %s", position, total, progress, page_path)

        try:
            response = self.http_service.fetch(config.page_url(page_path), timeout=config.timeout_seconds)
            html = self.annotator.annotate(response.text, page_path, entry.last_modified, config)
            file_path = self.page_writer.write(config.output_dir, page_path, html)
        except HttpFetchError as e:
            logger.warning("Error fetching %s: %s", page_path, e)
            return PageResult(page_path, PageStatus.ERROR, str(e.original))
        except HttpStatusError as e:
            logger.warning("Error fetching %s: %s", page_path, e)
            return PageResult(page_path, PageStatus.ERROR, str(e))
        except Exception as e:
            logger.error("Error processing %s: %s", page_path, e, exc_info=True)
            return PageResult(page_path, PageStatus.ERROR, str(e))

        logger.info(
            "Saved: %s (last modified: %s)",
            os.path.basename(file_path),
            epoch_to_iso_z(entry.last_modified),
        )
        return PageResult(page_path, PageStatus.SUCCESS)
