"""
Tests for site metadata resolution.
"""

import pytest
from src.config import Config
from src.structured_data.records import PageType
from src.structured_data.site_metadata import SiteMetadata
from src.structured_data.structured_data_builder import StructuredDataBuilder


class TestSiteMetadata:
    """Test suite for SiteMetadata"""

    @pytest.fixture
    def site(self):
        """Create site metadata for a test site"""
        return SiteMetadata(
            site_url="https://example.com/",
            title="Example Blog",
            description="Site description",
            logo_path="/assets/logo.png",
        )

    @pytest.mark.parametrize("slug,expected", [
        ("", "https://example.com/"),
        ("my-post", "https://example.com/my-post"),
        ("/about", "https://example.com/about"),
        ("posts/hello/", "https://example.com/posts/hello/"),
    ])
    def test_page_url(self, site, slug, expected):
        """Slugs resolve against the site URL"""
        assert site.page_url(slug) == expected

    def test_logo_url(self, site):
        assert site.logo_url == "https://example.com/assets/logo.png"

    def test_description_precedence(self, site):
        """Frontmatter description, then excerpt, then site description"""
        assert site.resolve_description("Own", "Excerpt") == "Own"
        assert site.resolve_description(None, "Excerpt") == "Excerpt"
        assert site.resolve_description("   ", "Excerpt") == "Excerpt"
        assert site.resolve_description() == "Site description"

    def test_page_descriptor(self, site):
        """Descriptor gets URL, site name, logo and description filled in"""
        descriptor = site.page_descriptor(
            slug="event-loops",
            title="Event loops",
            page_type=PageType.BLOG,
            excerpt="How work gets scheduled",
            publish_date="2024-01-15",
        )

        assert descriptor.url == "https://example.com/event-loops"
        assert descriptor.site_name == "Example Blog"
        assert descriptor.logo_url == "https://example.com/assets/logo.png"
        assert descriptor.description == "How work gets scheduled"
        assert descriptor.modified_date is None

    def test_descriptor_feeds_builder(self, site):
        """A resolved descriptor builds a complete blog record"""
        descriptor = site.page_descriptor(
            slug="event-loops",
            title="Event loops",
            page_type=PageType.BLOG,
            publish_date="2024-01-15",
            modified_date="2024-02-01T09:00:00Z",
        )
        record = StructuredDataBuilder().build_page_record(descriptor)

        assert record["mainEntityOfPage"]["@id"] == "https://example.com/event-loops"
        assert record["publisher"]["name"] == "Example Blog"
        assert record["dateModified"] == "2024-02-01T09:00:00.000Z"
        assert record["description"] == "Site description"

    def test_from_config(self):
        """Site metadata mirrors Config"""
        site = SiteMetadata.from_config()
        assert site.site_url == Config.SITE_URL
        assert site.title == Config.SITE_TITLE
        assert site.logo_path == Config.SITE_LOGO_PATH


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
