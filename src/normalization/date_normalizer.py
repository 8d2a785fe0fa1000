"""
Date normalization module for frontmatter dates.

Parses loosely typed dates (ISO strings, delimited strings, epoch
milliseconds, datetime objects) into a canonical UTC datetime and renders
them as ISO-8601 or long-form display strings.
"""

import logging
import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional, Union

import ciso8601

from src.config import Config

logger = logging.getLogger(__name__)

DateInput = Union[str, int, float, date, datetime, None]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
)

_DELIMITERS = re.compile(Config.DATE_DELIMITER_PATTERN)
_INTEGER = re.compile(r"[0-9]+")


class InvalidDateError(ValueError):
    """Raised when a date input does not resolve to a valid calendar date"""

    def __init__(self, value, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid date {value!r}: {reason}")


class DateNormalizer:
    """Normalizes frontmatter dates to a canonical UTC datetime"""

    def __init__(self, locale: str = Config.DISPLAY_LOCALE):
        """
        Initialize date normalizer.

        Args:
            locale: Display locale, only "en_US" is supported
        """
        if locale != "en_US":
            raise ValueError(f"Unsupported display locale: {locale!r}")
        self.locale = locale

    @staticmethod
    def is_absent(value: DateInput) -> bool:
        """Absent dates (None or empty string) are valid and mean "no date" """
        return value is None or (isinstance(value, str) and value == "")

    def parse(self, value: DateInput) -> Optional[datetime]:
        """
        Parse a date input into a canonical datetime.

        Args:
            value: ISO string, delimited string, epoch milliseconds,
                   date/datetime, or None

        Returns:
            datetime, or None when the input is absent

        Raises:
            InvalidDateError: if the input is not a valid calendar date

        Example:
            >>> DateNormalizer().parse("2024-01-15")
            datetime.datetime(2024, 1, 15, 0, 0, tzinfo=datetime.timezone.utc)
        """
        if self.is_absent(value):
            return None

        # bool is an int subclass, but True is not a timestamp
        if isinstance(value, bool):
            raise InvalidDateError(value, "booleans are not dates")

        if isinstance(value, str):
            if "T" in value:
                return self._parse_iso(value)
            return self._parse_delimited(value)

        if isinstance(value, (int, float)):
            return self._parse_epoch_millis(value)

        if isinstance(value, datetime):
            return value

        if isinstance(value, date):
            return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

        raise InvalidDateError(value, f"unsupported type {type(value).__name__}")

    def to_iso_string(self, value: DateInput) -> Optional[str]:
        """
        Render a date input as ISO-8601 in UTC with millisecond precision.

        Returns:
            e.g. "2024-01-15T00:00:00.000Z", or None when the input is absent
        """
        parsed = self.parse(value)
        if parsed is None:
            return None

        utc = self._to_utc(parsed)
        return utc.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"

    def to_display_string(self, value: DateInput) -> Optional[str]:
        """
        Render a date input in long form, e.g. "January 5, 2024".

        Returns:
            Display string, or None when the input is absent
        """
        parsed = self.parse(value)
        if parsed is None:
            return None

        utc = self._to_utc(parsed)
        return f"{MONTH_NAMES[utc.month - 1]} {utc.day}, {utc.year}"

    def _parse_iso(self, value: str) -> datetime:
        try:
            parsed = ciso8601.parse_datetime(value)
        except ValueError as e:
            raise InvalidDateError(value, str(e)) from e

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)

        logger.debug(f"Parsed ISO date {value!r} -> {parsed.isoformat()}")
        return parsed

    def _parse_delimited(self, value: str) -> datetime:
        """
        Parse a delimited string positionally as
        [year, month, day, hour, minute, second, millisecond].

        The field order is fixed; day-first strings are misread.
        """
        components = self._split_components(value)
        if len(components) < 2:
            raise InvalidDateError(value, "expected at least year and month")

        year, month = components[0], components[1]
        day = components[2] if len(components) > 2 else 1
        hour, minute, second, millis = (components[3:7] + [0, 0, 0, 0])[:4]

        if millis > 999:
            raise InvalidDateError(value, f"millisecond out of range: {millis}")

        # Month stays 1-based: datetime numbers months 1-12 like the input does
        try:
            parsed = datetime(
                year, month, day, hour, minute, second, millis * 1000,
                tzinfo=timezone.utc
            )
        except ValueError as e:
            raise InvalidDateError(value, str(e)) from e

        logger.debug(f"Parsed delimited date {value!r} -> {parsed.isoformat()}")
        return parsed

    def _split_components(self, value: str) -> List[int]:
        fragments = [fragment for fragment in _DELIMITERS.split(value) if fragment]

        for fragment in fragments:
            if not _INTEGER.fullmatch(fragment):
                raise InvalidDateError(value, f"non-numeric component {fragment!r}")

        return [int(fragment) for fragment in fragments]

    def _parse_epoch_millis(self, value: Union[int, float]) -> datetime:
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidDateError(value, "timestamp is not finite")

        try:
            return EPOCH + timedelta(milliseconds=value)
        except OverflowError as e:
            raise InvalidDateError(value, "timestamp out of range") from e

    @staticmethod
    def _to_utc(value: datetime) -> datetime:
        # Naive datetimes are taken to already be UTC
        if value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc)


def post_date_label(
    published: DateInput,
    updated: DateInput = None,
    normalizer: Optional[DateNormalizer] = None
) -> Optional[str]:
    """
    Byline shown next to a post: the update date when there is one,
    otherwise the publish date.

    Example:
        >>> post_date_label("2024-01-15", "2024/03/05")
        'Updated: March 5, 2024'
    """
    normalizer = normalizer or get_date_normalizer()

    if not DateNormalizer.is_absent(updated):
        return f"{Config.UPDATED_LABEL} {normalizer.to_display_string(updated)}"

    return normalizer.to_display_string(published)


# Global instance (singleton)
_date_normalizer_instance = None


def get_date_normalizer() -> DateNormalizer:
    """Get global DateNormalizer instance"""
    global _date_normalizer_instance
    if _date_normalizer_instance is None:
        _date_normalizer_instance = DateNormalizer()
        logger.info(f"Initialized DateNormalizer with locale: {_date_normalizer_instance.locale}")
    return _date_normalizer_instance
