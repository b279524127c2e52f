"""Inject Pagefind metadata into fetched page HTML.

Plain string/regex rewriting on the raw document: Pagefind reads the
`data-pagefind-*` attributes, so nothing else in the page may change.
Every rewrite touches only the first matching tag.
"""
import re
from typing import Any

from pagefetch.domain.config import FetchConfig
from pagefetch.utils.datetime_utils import epoch_to_iso_z

HEAD_END = "</head>"

LAST_MODIFIED_RE = re.compile(
    r'<meta name="last-modified" content="[^"]*" data-pagefind-sort="date\[content\]">'
)
# matches both the page's own tag and one we already annotated
CANONICAL_RE = re.compile(
    r'<link rel="canonical" href="[^"]*"(?: data-pagefind-meta="url\[href\]")?>'
)


def last_modified_tag(iso_date: str) -> str:
    return f'<meta name="last-modified" content="{iso_date}" data-pagefind-sort="date[content]">'


def canonical_tag(url: str) -> str:
    return f'<link rel="canonical" href="{url}" data-pagefind-meta="url[href]">'


def _filter_meta_re(name: str) -> re.Pattern:
    return re.compile(r'<meta name="' + re.escape(name) + r'" content="([^"]*)">')


def insert_before_head_end(html: str, fragment: str) -> str:
    """Insert `fragment` before the first `</head>`; return `html` unchanged if there is none."""
    idx = html.find(HEAD_END)
    if idx == -1:
        return html
    return html[:idx] + fragment + html[idx:]


class HtmlAnnotator:
    def annotate(self, html: str, page_path: str, last_modified: Any, config: FetchConfig) -> str:
        """Return `html` with last-modified, filter and canonical annotations.

        Raises ValueError if `last_modified` is not a usable unix timestamp.
        """
        html = self.apply_last_modified(html, epoch_to_iso_z(last_modified))
        for name in config.filters:
            html = self.apply_filter(html, name)
        return self.apply_canonical(html, config.page_url(page_path))

    def apply_last_modified(self, html: str, iso_date: str) -> str:
        tag = last_modified_tag(iso_date)
        if LAST_MODIFIED_RE.search(html):
            return LAST_MODIFIED_RE.sub(lambda m: tag, html, count=1)
        return insert_before_head_end(html, f" {tag}\n")

    def apply_filter(self, html: str, name: str) -> str:
        pattern = _filter_meta_re(name)
        return pattern.sub(
            lambda m: f'<meta name="{name}" content="{m.group(1)}" data-pagefind-filter="{name}[content]">',
            html,
            count=1,
        )

    def apply_canonical(self, html: str, url: str) -> str:
        tag = canonical_tag(url)
        if CANONICAL_RE.search(html):
            return CANONICAL_RE.sub(lambda m: tag, html, count=1)
        return insert_before_head_end(html, f" {tag}\n")
