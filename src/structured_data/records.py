"""
Value records consumed by the structured data builder.

Identity records describe the site's author and are usually loaded from
Config.AUTHOR_PROFILE. PageDescriptor carries the frontmatter-derived
fields of a single page.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from src.config import Config
from src.normalization.date_normalizer import DateInput


class PageType(Enum):
    """schema.org type emitted for each kind of page"""
    BLOG = "BlogPosting"
    ABOUT = "AboutPage"
    CONTACT = "ContactPage"
    DEFAULT = "WebPage"


@dataclass(frozen=True)
class PostalAddressInfo:
    country: Optional[str] = None
    city: Optional[str] = None
    street_address: Optional[str] = None
    postal_code: Optional[str] = None


@dataclass(frozen=True)
class EducationalOrganizationInfo:
    name: Optional[str] = None
    address: Optional[PostalAddressInfo] = None


@dataclass(frozen=True)
class CredentialInfo:
    degree_name: Optional[str] = None
    degree_level: Optional[str] = None
    field: Optional[str] = None


@dataclass(frozen=True)
class AuthorProfile:
    """Identity of the person credited as author on every page"""
    name: str
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    job_title: Optional[str] = None
    alumni_of: Optional[EducationalOrganizationInfo] = None
    credential: Optional[CredentialInfo] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthorProfile":
        """
        Build a profile from a nested mapping shaped like Config.AUTHOR_PROFILE.

        Args:
            data: Mapping with "name" and optional "alumni_of"/"credential" sub-mappings

        Returns:
            AuthorProfile
        """
        alumni_of = None
        if data.get("alumni_of"):
            organization = dict(data["alumni_of"])
            address = organization.pop("address", None)
            alumni_of = EducationalOrganizationInfo(
                address=PostalAddressInfo(**address) if address else None,
                **organization
            )

        credential = CredentialInfo(**data["credential"]) if data.get("credential") else None

        return cls(
            name=data["name"],
            given_name=data.get("given_name"),
            family_name=data.get("family_name"),
            job_title=data.get("job_title"),
            alumni_of=alumni_of,
            credential=credential,
        )

    @classmethod
    def from_config(cls) -> "AuthorProfile":
        """Profile of the configured site author"""
        return cls.from_dict(Config.AUTHOR_PROFILE)


@dataclass(frozen=True)
class PageDescriptor:
    """Frontmatter-derived description of one page"""
    page_type: PageType = PageType.DEFAULT
    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    publish_date: DateInput = None
    modified_date: DateInput = None
    site_name: Optional[str] = None
    logo_url: Optional[str] = None
