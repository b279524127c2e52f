import logging

from pagefetch.domain.crawl_result import CrawlSummary, PageResult, PageStatus
from pagefetch.services.summary_reporter import SummaryReporter


def test_summary_from_results_counts_each_status():
    results = [
        PageResult("/a", PageStatus.SKIPPED),
        PageResult("/b", PageStatus.SUCCESS),
        PageResult("/c", PageStatus.ERROR, "HTTP 500: Server Error"),
        PageResult("/d", PageStatus.SUCCESS),
    ]
    summary = CrawlSummary.from_results(results)
    assert summary == CrawlSummary(total=4, successful=2, skipped=1, failed=1)


def test_summary_total_can_be_given_explicitly():
    assert CrawlSummary.from_results([], total=3).total == 3


def test_report_logs_counts(caplog):
    caplog.set_level(logging.INFO, logger="pagefetch")
    SummaryReporter().report(CrawlSummary(total=2, successful=1, skipped=1, failed=0))
    assert "Fetch Summary:" in caplog.text
    assert "Total pages: 2" in caplog.text
    assert "Successful: 1" in caplog.text
    assert "Skipped: 1" in caplog.text
    assert "Failed: 0" in caplog.text
