"""
Structured data (schema.org JSON-LD) assembly for the site and its pages.

Records are plain nested dicts tagged with "@type". Date fields are
delegated to DateNormalizer; the only failure mode is InvalidDateError.
"""

import json
import logging
from typing import Any, Dict, Optional

from src.config import Config
from src.normalization.date_normalizer import DateInput, DateNormalizer, get_date_normalizer
from src.structured_data.records import (
    AuthorProfile,
    CredentialInfo,
    EducationalOrganizationInfo,
    PageDescriptor,
    PageType,
    PostalAddressInfo,
)

logger = logging.getLogger(__name__)


def postal_address_record(address: PostalAddressInfo) -> Dict[str, Any]:
    return {
        "@type": "PostalAddress",
        "postalCode": address.postal_code,
        "streetAddress": address.street_address,
        "addressLocality": address.city,
        "addressCountry": address.country,
    }


def educational_organization_record(organization: EducationalOrganizationInfo) -> Dict[str, Any]:
    return {
        "@type": "EducationalOrganization",
        "address": postal_address_record(organization.address) if organization.address else None,
        "name": organization.name,
    }


def credential_record(credential: CredentialInfo) -> Dict[str, Any]:
    return {
        "@type": "EducationalOccupationalCredential",
        "credentialCategory": credential.degree_name,
        "educationalLevel": credential.degree_level,
        "about": credential.field,
    }


def organization_record(name: Optional[str], logo_url: Optional[str]) -> Dict[str, Any]:
    """Publisher organization with its logo image"""
    return {
        "@type": "Organization",
        "name": name,
        "logo": {
            "@type": "ImageObject",
            "url": logo_url,
        },
    }


def _drop_empty(value: Any) -> Any:
    # Absent fields are omitted from the output rather than written as null
    if isinstance(value, dict):
        return {key: _drop_empty(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [_drop_empty(item) for item in value if item is not None]
    return value


def to_json_ld(record: Dict[str, Any]) -> str:
    """
    Serialize a structured data record for embedding in page output.

    Adds the schema.org "@context" and omits fields whose value is None.

    Args:
        record: Record returned by StructuredDataBuilder

    Returns:
        JSON string
    """
    document = {"@context": Config.SCHEMA_ORG_CONTEXT}
    document.update(_drop_empty(record))
    return json.dumps(
        document,
        indent=Config.JSON_INDENT,
        ensure_ascii=Config.JSON_ENSURE_ASCII
    )


class StructuredDataBuilder:
    """Builds schema.org records describing the site, its author and its pages"""

    def __init__(
        self,
        author: Optional[AuthorProfile] = None,
        date_normalizer: Optional[DateNormalizer] = None
    ):
        """
        Initialize builder.

        Args:
            author: Site author, defaults to the profile in Config.AUTHOR_PROFILE
            date_normalizer: Normalizer for date fields, defaults to the shared instance
        """
        self.author = author or AuthorProfile.from_config()
        self.date_normalizer = date_normalizer or get_date_normalizer()

    def build_author(self) -> Dict[str, Any]:
        """
        Person record for the site author.

        Returns:
            Person record with nested alumni organization and credential
        """
        author = self.author
        return {
            "@type": "Person",
            "name": author.name,
            "familyName": author.family_name,
            "givenName": author.given_name,
            "alumniOf": educational_organization_record(author.alumni_of) if author.alumni_of else None,
            "jobTitle": author.job_title,
            "hasCredential": credential_record(author.credential) if author.credential else None,
        }

    def build_website_record(
        self,
        site_name: Optional[str],
        url: Optional[str],
        description: Optional[str],
        logo_url: Optional[str]
    ) -> Dict[str, Any]:
        """
        WebSite record for the whole site.

        Args:
            site_name: Site title, also used as publisher name
            url: Site root URL
            description: Site description
            logo_url: Absolute URL of the publisher logo

        Returns:
            WebSite record
        """
        return {
            "@type": "WebSite",
            "url": url,
            "name": site_name,
            "description": description,
            "author": self.build_author(),
            "publisher": organization_record(site_name, logo_url),
        }

    @staticmethod
    def resolve_modified_date(descriptor: PageDescriptor) -> DateInput:
        """
        Date reported as dateModified.

        Precedence: explicit modification date, then publish date, then absent.
        """
        if not DateNormalizer.is_absent(descriptor.modified_date):
            return descriptor.modified_date
        return descriptor.publish_date

    def build_page_record(self, descriptor: PageDescriptor) -> Dict[str, Any]:
        """
        Record for a single page (blog post, about, contact or generic page).

        Missing title or url are passed through as-is and only logged.

        Args:
            descriptor: Page fields from frontmatter and site metadata

        Returns:
            Page record tagged with the page type

        Raises:
            InvalidDateError: if a publish or modification date cannot be parsed
        """
        missing = [name for name in ("title", "url") if not getattr(descriptor, name)]
        if missing:
            logger.warning(f"Page record built without: {', '.join(missing)}")

        page_type = descriptor.page_type or PageType.DEFAULT

        return {
            "@type": page_type.value,
            "mainEntityOfPage": {
                "@type": "WebPage",
                "@id": descriptor.url,
            },
            "headline": descriptor.title,
            "datePublished": self.date_normalizer.to_iso_string(descriptor.publish_date),
            "dateModified": self.date_normalizer.to_iso_string(self.resolve_modified_date(descriptor)),
            "author": self.build_author(),
            "publisher": organization_record(descriptor.site_name, descriptor.logo_url),
            "description": descriptor.description,
        }


# Global instance (singleton)
_structured_data_builder_instance = None


def get_structured_data_builder() -> StructuredDataBuilder:
    """Get global StructuredDataBuilder instance"""
    global _structured_data_builder_instance
    if _structured_data_builder_instance is None:
        _structured_data_builder_instance = StructuredDataBuilder()
        logger.info(f"Initialized StructuredDataBuilder for author: {_structured_data_builder_instance.author.name}")
    return _structured_data_builder_instance
