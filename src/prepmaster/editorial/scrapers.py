"""Newspaper editorial scrapers.

Two outlets share one implementation, driven by ``SiteConfig`` data:
  - 매일경제 (mk)
  - 한국경제 (hankyung)

``compute_list`` and ``parse_detail`` are pure functions over HTML text;
``EditorialSource`` adds the network fetch on top of them.
"""

import logging
import re
from datetime import date, datetime
from html import unescape

import requests
from bs4 import BeautifulSoup, Tag

from prepmaster.config import DEFAULT_SITE, FETCH_TIMEOUT
from prepmaster.editorial import Editorial, EditorialListItem
from prepmaster.editorial.sites import SiteConfig, get_site

logger = logging.getLogger(__name__)

_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "ko-KR,ko;q=0.9,en-US;q=0.8,en;q=0.7",
}

EDITORIAL_TAG = "[사설]"
TITLE_NOT_FOUND = "제목을 찾을 수 없습니다"
BODY_NOT_FOUND = "본문을 찾을 수 없습니다"

_MIN_TITLE_LEN = 5
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")


class EditorialFetchError(Exception):
    """Upstream returned a non-success HTTP status."""


def format_date(d: date) -> str:
    return f"{d.year}.{d.month:02d}.{d.day:02d}"


def fetch_page(
    url: str,
    what: str = "page",
    headers: dict[str, str] | None = None,
    timeout: float | None = FETCH_TIMEOUT,
) -> str:
    """GET a page and return its decoded HTML.

    Raises EditorialFetchError on a non-2xx status. Transport errors
    (connection refused, DNS, timeout) propagate as requests exceptions.
    """
    resp = requests.get(url, headers={**_HEADERS, **(headers or {})}, timeout=timeout)
    if not resp.ok:
        raise EditorialFetchError(f"Failed to fetch {what} (HTTP {resp.status_code})")
    resp.encoding = resp.apparent_encoding or "utf-8"
    return resp.text


# ---------------------------------------------------------------------------
# List page
# ---------------------------------------------------------------------------


def _select_text(node: Tag, selector: str) -> str:
    return "".join(el.get_text() for el in node.select(selector)).strip()


def _closest(node: Tag, names: tuple[str, ...]) -> Tag | None:
    for parent in node.parents:
        if parent.name in names:
            return parent
    return None


def compute_list(
    html: str,
    site: SiteConfig,
    today: date | None = None,
) -> list[EditorialListItem]:
    """Extract editorial links from a list page.

    The seen-link set lives only for this call. Links whose href does
    not match the outlet's article pattern, or whose title cannot be
    found, are skipped.
    """
    soup = BeautifulSoup(html, "lxml")
    list_date = format_date(today or date.today())
    pattern = re.compile(site.link_pattern)

    editorials: list[EditorialListItem] = []
    seen_links: set[str] = set()

    for link in soup.select(site.link_selector):
        href = link.get("href", "")
        if not href or href in seen_links:
            continue
        if not pattern.search(href):
            continue
        seen_links.add(href)

        # Title: link text, then headings inside the link, then the
        # headings of the enclosing list item / card
        title = link.get_text().strip()
        if len(title) < _MIN_TITLE_LEN:
            title = _select_text(link, site.list_title_selectors)
        if len(title) < _MIN_TITLE_LEN:
            container = _closest(link, ("li", "div"))
            if container is not None:
                title = _select_text(container, site.list_title_selectors)
        if len(title) < _MIN_TITLE_LEN:
            continue

        editorials.append(
            EditorialListItem(
                title=title if EDITORIAL_TAG in title else f"{EDITORIAL_TAG} {title}",
                link=site.absolute_url(href),
                date=list_date,
            )
        )

    return editorials


# ---------------------------------------------------------------------------
# Detail page
# ---------------------------------------------------------------------------


def _meta_content(soup: BeautifulSoup, prop: str) -> str:
    meta = soup.select_one(f'meta[property="{prop}"]')
    if meta is None:
        return ""
    return (meta.get("content") or "").strip()


def _extract_title(soup: BeautifulSoup, site: SiteConfig) -> str:
    for selector in site.title_selectors:
        el = soup.select_one(selector)
        if el is not None:
            title = el.get_text().strip()
            if title:
                return title

    og_title = _meta_content(soup, "og:title")
    if og_title:
        return og_title.replace(site.title_suffix, "").strip() if site.title_suffix else og_title

    if soup.title is not None:
        title = soup.title.get_text()
        if site.title_suffix:
            title = title.replace(site.title_suffix, "")
        return title.strip()
    return ""


def _extract_body(soup: BeautifulSoup, site: SiteConfig) -> str:
    for selector in site.body_selectors:
        el = soup.select_one(selector)
        if el is None:
            continue
        # <br> becomes a line break, every other tag is dropped
        inner = el.decode_contents()
        text = unescape(_TAG_RE.sub("", _BR_RE.sub("\n", inner))).strip()
        if text:
            return text

    return _meta_content(soup, "og:description")


def parse_date(html: str, soup: BeautifulSoup, site: SiteConfig, today: date | None = None) -> str:
    """Find the publication date of an article page.

    Order: inline script value, article:published_time meta, today.
    """
    if site.date_script_pattern:
        match = re.search(site.date_script_pattern, html)
        if match:
            return match.group(1).replace("-", ".")

    published = _meta_content(soup, "article:published_time")
    if published:
        try:
            return format_date(datetime.fromisoformat(published.replace("Z", "+00:00")).date())
        except ValueError:
            logger.warning("Unparseable published_time %r", published)

    return format_date(today or date.today())


def parse_detail(
    html: str,
    url: str,
    site: SiteConfig,
    today: date | None = None,
) -> Editorial:
    """Build an Editorial from an article page, with placeholders for missing parts."""
    soup = BeautifulSoup(html, "lxml")
    title = _extract_title(soup, site)
    content = _extract_body(soup, site)

    return Editorial(
        title=title or TITLE_NOT_FOUND,
        content=content or BODY_NOT_FOUND,
        date=parse_date(html, soup, site, today),
        link=url,
    )


# ---------------------------------------------------------------------------
# Capability
# ---------------------------------------------------------------------------


class EditorialSource:
    """List and detail fetching for one outlet."""

    def __init__(self, site: SiteConfig) -> None:
        self.site = site

    def fetch_list(self) -> list[EditorialListItem]:
        html = fetch_page(self.site.list_url, "editorial list", self.site.extra_headers)
        editorials = compute_list(html, self.site)
        logger.info("Scraped %d editorials from %s", len(editorials), self.site.name)
        return editorials

    def fetch_detail(self, url: str) -> Editorial:
        html = fetch_page(url, "article", self.site.extra_headers)
        editorial = parse_detail(html, url, self.site)
        logger.info("Fetched editorial %r from %s", editorial.title, self.site.name)
        return editorial


def get_source(key: str | None = None) -> EditorialSource:
    """Return the scraper for an outlet key (default from config)."""
    return EditorialSource(get_site(key or DEFAULT_SITE))
