import logging

from pagefetch.domain.crawl_result import CrawlSummary

logger = logging.getLogger(__name__)


class SummaryReporter:
    def report(self, summary: CrawlSummary) -> None:
        logger.info("Fetch Summary:")
        logger.info("  Total pages: %d", summary.total)
        logger.info("  Successful: %d", summary.successful)
        logger.info("  Skipped: %d", summary.skipped)
        logger.info("  Failed: %d", summary.failed)
