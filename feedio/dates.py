"""Date parsing and formatting for feed documents."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from email.utils import format_datetime, parsedate_to_datetime

RFC822 = "rfc822"
RFC3339 = "rfc3339"

# Fallback formats tried after RFC 822 and ISO 8601 parsing
DEFAULT_DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%d %b %Y %H:%M:%S %z",
    "%a, %d %b %Y %H:%M %z",
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y",
)


class DateTimeBuilder:
    """Converts the many date spellings found in feeds to aware datetimes.

    Parsing order is RFC 822 (RSS), then ISO 8601 / RFC 3339 (Atom), then
    each of ``date_formats``. Naive results are given ``default_timezone``
    so dates from different dialects stay comparable.
    """

    def __init__(
        self,
        default_timezone: tzinfo = timezone.utc,
        date_formats: tuple[str, ...] = DEFAULT_DATE_FORMATS,
    ) -> None:
        self.default_timezone = default_timezone
        self.date_formats = date_formats

    def convert_to_datetime(self, value: str) -> datetime:
        """Parse a date string.

        Args:
            value: Date as found in the document

        Returns:
            Timezone-aware datetime

        Raises:
            ValueError: If no known format matches
        """
        cleaned = value.strip() if value else ""
        if not cleaned:
            raise ValueError("Unable to parse an empty date")

        for parse in (self._parse_rfc822, self._parse_iso):
            parsed = parse(cleaned)
            if parsed is not None:
                return self.normalize(parsed)

        for date_format in self.date_formats:
            try:
                return self.normalize(datetime.strptime(cleaned, date_format))
            except ValueError:
                continue

        raise ValueError(f"Unable to parse date: '{value}'")

    def normalize(self, value: datetime) -> datetime:
        """Attach the default timezone to naive datetimes."""
        if value.tzinfo is None:
            return value.replace(tzinfo=self.default_timezone)
        return value

    def format(self, value: datetime, date_format: str = RFC3339) -> str:
        """Format a datetime as RFC 822 or RFC 3339.

        Any other ``date_format`` is handed to ``strftime``.
        """
        value = self.normalize(value)
        if date_format == RFC822:
            return format_datetime(value)
        if date_format == RFC3339:
            return value.isoformat(timespec="seconds")
        return value.strftime(date_format)

    @staticmethod
    def _parse_rfc822(value: str) -> datetime | None:
        try:
            return parsedate_to_datetime(value)
        except (TypeError, ValueError, IndexError):
            return None

    @staticmethod
    def _parse_iso(value: str) -> datetime | None:
        # fromisoformat only accepts a trailing "Z" from Python 3.11 on
        if value[-1] in ("Z", "z"):
            value = value[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
