"""Second-resolution instants used for interval endpoints and annotation keys."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse


@dataclass(frozen=True, order=True)
class Datetime:
    """A UTC instant stored as whole seconds since the Unix epoch.

    Epoch ``0`` doubles as "unset": an interval whose start or end is
    ``Datetime(0)`` has not started or has not ended.
    """

    epoch: int = 0

    @classmethod
    def coerce(cls, value: Any) -> "Datetime":
        """Convert a supported time value to a Datetime.

        Accepts:
        - Datetime: Returned as-is
        - int: Unix timestamp in seconds
        - datetime: Must be timezone-aware

        Raises:
            TypeError: If value is an unsupported type or naive datetime
        """
        if isinstance(value, Datetime):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, datetime):
            if value.tzinfo is None:
                raise TypeError(
                    f"Time value must be a timezone-aware datetime.\n"
                    f"Got naive datetime: {value!r}\n"
                    f"Hint: Add timezone info:\n"
                    f"  from zoneinfo import ZoneInfo\n"
                    f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                    f"# or 'US/Pacific', etc."
                )
            return cls(int(value.timestamp()))
        raise TypeError(
            f"Time value must be Datetime, int, or datetime.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Examples:\n"
            f"  Datetime(1704067200)  # Unix seconds\n"
            f"  datetime(2024, 1, 1, tzinfo=timezone.utc)  # aware datetime"
        )

    @classmethod
    def parse(cls, text: str) -> "Datetime":
        """Parse ISO-8601 text; a missing offset is read as UTC."""
        dt = isoparse(text)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls(int(dt.timestamp()))

    def to_epoch(self) -> int:
        return self.epoch

    def to_datetime(self, tz: str | None = None) -> datetime:
        """Return an aware datetime in UTC, or in the named IANA zone."""
        zone = ZoneInfo(tz) if tz is not None else timezone.utc
        return datetime.fromtimestamp(self.epoch, tz=zone)

    def to_iso(self) -> str:
        """Extended ISO form in UTC, e.g. ``2024-01-01T00:00:00Z``."""
        naive = self.to_datetime().replace(tzinfo=None)
        return naive.isoformat(timespec="seconds") + "Z"

    def to_iso_local_extended(self, tz: str | None = None) -> str:
        """Extended ISO form in local time, without a zone suffix.

        Uses the process local zone unless ``tz`` names one.
        """
        if tz is None:
            local = datetime.fromtimestamp(self.epoch, tz=timezone.utc).astimezone()
        else:
            local = self.to_datetime(tz)
        return local.replace(tzinfo=None).isoformat(timespec="seconds")

    def __str__(self) -> str:
        return self.to_iso()
