from dataclasses import dataclass, field
from typing import Any

from timetrack.moment import Datetime


@dataclass(kw_only=True)
class Range:
    """A start/end pair; either endpoint may be unset (epoch 0).

    Endpoints are coerced to Datetime on every assignment. Their order is
    not checked: a range ending before it starts is kept as given.
    """

    start: Datetime = field(default_factory=Datetime)
    end: Datetime = field(default_factory=Datetime)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("start", "end"):
            value = Datetime.coerce(value)
        super().__setattr__(name, value)

    def is_started(self) -> bool:
        return self.start.to_epoch() != 0

    def is_ended(self) -> bool:
        return self.end.to_epoch() != 0

    def is_open(self) -> bool:
        """True if the range has started but not ended."""
        return self.is_started() and not self.is_ended()

    def total(self) -> int:
        """Seconds covered by the range, or 0 unless both endpoints are set."""
        if not (self.is_started() and self.is_ended()):
            return 0
        return self.end.to_epoch() - self.start.to_epoch()

    def set_range(self, start: "Range | Any", end: Any = None) -> None:
        """Replace both endpoints, from another Range or from two time values."""
        if isinstance(start, Range):
            start, end = start.start, start.end
        start = Datetime.coerce(start)
        end = Datetime.coerce(end if end is not None else Datetime())
        self.start = start
        self.end = end

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        start_str = self.start.to_iso() if self.is_started() else "-"
        end_str = self.end.to_iso() if self.is_ended() else "open"
        return f"Range({start_str}→{end_str}, {self.total()}s)"
