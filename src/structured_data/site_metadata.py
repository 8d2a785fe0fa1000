"""
Site metadata resolution.

Turns page slugs and asset paths into absolute URLs and fills the
site-level fields of a PageDescriptor.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin

from src.config import Config
from src.normalization.date_normalizer import DateInput
from src.structured_data.records import PageDescriptor, PageType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteMetadata:
    """Site-wide fields shared by every page"""
    site_url: str
    title: str
    description: str
    logo_path: str

    @classmethod
    def from_config(cls) -> "SiteMetadata":
        """Site metadata from Config"""
        return cls(
            site_url=Config.SITE_URL,
            title=Config.SITE_TITLE,
            description=Config.SITE_DESCRIPTION,
            logo_path=Config.SITE_LOGO_PATH,
        )

    def page_url(self, slug: str = "") -> str:
        """
        Absolute URL of a page.

        Example:
            >>> SiteMetadata("https://example.com/", "t", "d", "/logo.png").page_url("my-post")
            'https://example.com/my-post'
        """
        return urljoin(self.site_url, slug)

    @property
    def logo_url(self) -> str:
        return urljoin(self.site_url, self.logo_path)

    def resolve_description(
        self,
        description: Optional[str] = None,
        excerpt: Optional[str] = None
    ) -> str:
        """
        Description for a page.

        Precedence: frontmatter description, then content excerpt,
        then the site description.
        """
        for candidate in (description, excerpt):
            if candidate and candidate.strip():
                return candidate.strip()
        return self.description

    def page_descriptor(
        self,
        slug: str = "",
        title: Optional[str] = None,
        page_type: PageType = PageType.DEFAULT,
        description: Optional[str] = None,
        excerpt: Optional[str] = None,
        publish_date: DateInput = None,
        modified_date: DateInput = None
    ) -> PageDescriptor:
        """
        PageDescriptor for the page at slug, with site fields filled in.

        Args:
            slug: Page path relative to the site URL
            title: Page title from frontmatter
            page_type: Kind of page
            description: Frontmatter description
            excerpt: Content excerpt used when there is no description
            publish_date: Frontmatter publish date
            modified_date: Frontmatter update date

        Returns:
            PageDescriptor
        """
        url = self.page_url(slug)
        logger.debug(f"Resolved page {slug!r} -> {url}")

        return PageDescriptor(
            page_type=page_type,
            title=title,
            url=url,
            description=self.resolve_description(description, excerpt),
            publish_date=publish_date,
            modified_date=modified_date,
            site_name=self.title,
            logo_url=self.logo_url,
        )
