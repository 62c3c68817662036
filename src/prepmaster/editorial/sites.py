"""Per-outlet selector configuration.

Each outlet is described as data; the scraping logic in
``prepmaster.editorial.scrapers`` is shared.
"""

from dataclasses import dataclass, field


class UnknownSiteError(LookupError):
    """Raised when an outlet key has no configuration."""


@dataclass(frozen=True)
class SiteConfig:
    """Selectors and URLs for one newspaper's editorial section."""

    key: str
    name: str
    base_url: str
    list_url: str
    link_selector: str  # CSS selector for candidate links on the list page
    link_pattern: str  # regex an href must contain to count as an article
    title_selectors: tuple[str, ...] = ()
    title_suffix: str = ""  # stripped from og:title / <title>
    body_selectors: tuple[str, ...] = ()
    date_script_pattern: str | None = None  # regex with one YYYY-MM-DD group
    list_title_selectors: str = "h3, h2, .news_ttl"
    extra_headers: dict[str, str] = field(default_factory=dict)

    def absolute_url(self, href: str) -> str:
        if href.startswith("http"):
            return href
        return f"{self.base_url}{href}"


SITES: dict[str, SiteConfig] = {
    "mk": SiteConfig(
        key="mk",
        name="매일경제",
        base_url="https://www.mk.co.kr",
        list_url="https://www.mk.co.kr/opinion/editorial/",
        link_selector='a[href*="/news/editorial/"]',
        link_pattern=r"/news/editorial/(\d+)",
        title_selectors=("h2.news_ttl",),
        title_suffix=" - 매일경제",
        body_selectors=('[itemprop="articleBody"]',),
        date_script_pattern=r"'paper_date':\s*'(\d{4}-\d{2}-\d{2})'",
    ),
    "hankyung": SiteConfig(
        key="hankyung",
        name="한국경제",
        base_url="https://www.hankyung.com",
        list_url="https://www.hankyung.com/opinion/editorial",
        link_selector='a[href*="/article/"]',
        link_pattern=r"/article/(\d+[a-z]?)",
        title_selectors=("h1.headline", "h1.article-tit"),
        title_suffix=" | 한국경제",
        body_selectors=("#articletxt", ".article-body"),
        list_title_selectors="h3, h2, .news-tit",
    ),
}


def get_site(key: str) -> SiteConfig:
    """Look up an outlet by key."""
    try:
        return SITES[key]
    except KeyError:
        raise UnknownSiteError(f"Unknown site: {key!r} (known: {', '.join(SITES)})") from None
