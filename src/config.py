"""
Central configuration for the blog metadata core.

This module contains site identity, author profile, formatting and logging
settings. All other modules import configuration from here to maintain consistency.
"""

import logging
import os
from typing import Any, Dict
from urllib.parse import urlparse
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

_DEFAULT_DESCRIPTION = (
    "This blog is a deep dive into a full-stack JavaScript ecosystem. "
    "Topics ranging from frontend development through the backend, DevOps, "
    "and finally remote work and productivity."
)


class Config:
    """Application configuration and constants"""

    # ==========================================
    # Site Identity
    # ==========================================
    SITE_URL = os.getenv("SITE_URL", "https://tomekkolasa.com/")
    SITE_TITLE = os.getenv("SITE_TITLE", "Tomek Kolasa | Deep dive into a full-stack JavaScript")
    SITE_DESCRIPTION = os.getenv("SITE_DESCRIPTION", _DEFAULT_DESCRIPTION)
    SITE_LOGO_PATH = os.getenv("SITE_LOGO_PATH", "/logo-dark-rounded.png")

    # ==========================================
    # Author Profile
    # ==========================================
    # The blog has exactly one author; builders receive this as an AuthorProfile
    AUTHOR_PROFILE: Dict[str, Any] = {
        "name": "Tomek Kolasa",
        "given_name": "Tomasz",
        "family_name": "Kolasa",
        "job_title": "Senior Software Engineer",
        "alumni_of": {
            "name": "Wrocław University of Science and Technology",
            "address": {
                "country": "Poland",
                "city": "Wrocław",
                "street_address": "wybrzeże Stanisława Wyspiańskiego 27",
                "postal_code": "50-370",
            },
        },
        "credential": {
            "degree_name": "Master of Science",
            "degree_level": "Masters",
            "field": "Computer Science",
        },
    }

    # ==========================================
    # Date Formatting
    # ==========================================
    # Only US English long-form dates are rendered ("January 5, 2024")
    DISPLAY_LOCALE = os.getenv("DISPLAY_LOCALE", "en_US")
    UPDATED_LABEL = "Updated:"

    # Delimiters accepted between components of non-ISO date strings
    DATE_DELIMITER_PATTERN = r"[-/:.\s]"

    # ==========================================
    # Structured Data
    # ==========================================
    SCHEMA_ORG_CONTEXT = "https://schema.org"

    # JSON output settings
    JSON_INDENT = 2
    JSON_ENSURE_ASCII = False

    # ==========================================
    # Logging Configuration
    # ==========================================
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")          # DEBUG, INFO, WARNING, ERROR
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # ==========================================
    # Class Methods
    # ==========================================
    @classmethod
    def configure_logging(cls) -> None:
        """
        Apply the configured log format and level to the root logger.

        Build scripts embedding this core call this once at startup.
        """
        logging.basicConfig(
            level=getattr(logging, cls.LOG_LEVEL.upper(), logging.INFO),
            format=cls.LOG_FORMAT,
            datefmt=cls.LOG_DATE_FORMAT
        )

    @classmethod
    def validate_environment(cls) -> bool:
        """
        Validate that the site identity settings are usable.

        Returns:
            bool: True if environment is valid, False otherwise
        """
        parsed = urlparse(cls.SITE_URL or "")
        if not parsed.scheme or not parsed.netloc:
            logger.error(f"SITE_URL must be an absolute URL, got: {cls.SITE_URL!r}")
            return False

        if cls.DISPLAY_LOCALE != "en_US":
            logger.error(f"Unsupported DISPLAY_LOCALE: {cls.DISPLAY_LOCALE!r} (only en_US)")
            return False

        return True

    @classmethod
    def print_config_summary(cls) -> None:
        """Print configuration summary for debugging"""
        print("=" * 60)
        print("Blog Metadata - Configuration Summary")
        print("=" * 60)
        print(f"Site URL:             {cls.SITE_URL}")
        print(f"Site Title:           {cls.SITE_TITLE}")
        print(f"Logo Path:            {cls.SITE_LOGO_PATH}")
        print(f"Author:               {cls.AUTHOR_PROFILE['name']}")
        print(f"Display Locale:       {cls.DISPLAY_LOCALE}")
        print(f"Log Level:            {cls.LOG_LEVEL}")
        print("=" * 60)
