"""The Interval record: one tracked time span with its tags and annotations."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from typing_extensions import override

from timetrack.lexer import escape, json_encode, quote_if_needed
from timetrack.moment import Datetime
from timetrack.range import Range

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class Interval(Range):
    """A tracked time span plus its tags and timestamped annotations.

    Attributes:
        id: Identity assigned by a storage layer (0 = not yet persisted)
        synthetic: True for generated intervals; only shown by dump()

    Tags and annotations are kept private and reached through the mutators.
    Both are read back in sorted order (tags lexicographically, annotations
    by timestamp) no matter the order they were added in.
    """

    id: int = 0
    synthetic: bool = False
    _tags: set[str] = field(default_factory=set, init=False, repr=False)
    _annotations: dict[Datetime, str] = field(
        default_factory=dict, init=False, repr=False
    )

    def empty(self) -> bool:
        return (
            self.start.to_epoch() == 0
            and self.end.to_epoch() == 0
            and not self._tags
            and not self._annotations
        )

    # Tags

    def has_tag(self, tag: str) -> bool:
        return tag in self._tags

    def tags(self) -> tuple[str, ...]:
        return tuple(sorted(self._tags))

    def tag(self, tags: str | Iterable[str]) -> None:
        """Add one tag, or every tag of an iterable."""
        if isinstance(tags, str):
            self._tags.add(tags)
        else:
            self._tags.update(tags)

    def untag(self, tags: str | Iterable[str]) -> None:
        """Remove one tag, or every tag of an iterable; absent tags are ignored."""
        if isinstance(tags, str):
            self._tags.discard(tags)
        else:
            self._tags.difference_update(tags)

    def clear_tags(self) -> None:
        self._tags.clear()

    # Annotations

    def add_annotation(self, time: Any, annotation: str) -> None:
        """Annotate ``time`` unless it already carries an annotation."""
        key = Datetime.coerce(time)
        if key in self._annotations:
            logger.debug("Annotation already present at %s, ignoring add", key)
            return
        self._annotations[key] = annotation

    def set_annotation(self, time: Any, annotation: str) -> None:
        """Replace the annotation at ``time``; does nothing if there is none."""
        key = Datetime.coerce(time)
        if key not in self._annotations:
            logger.debug("No annotation at %s, ignoring set", key)
            return
        self._annotations[key] = annotation

    def remove_annotation(self, time: Any) -> None:
        self._annotations.pop(Datetime.coerce(time), None)

    def get_annotation(self, time: Any) -> str:
        return self._annotations.get(Datetime.coerce(time), "")

    def get_annotations(self) -> dict[Datetime, str]:
        """Return a copy of the annotations in ascending timestamp order."""
        return dict(sorted(self._annotations.items()))

    # Serialization

    def _tag_clause(self) -> str:
        return " #" + "".join(" " + quote_if_needed(tag) for tag in self.tags())

    def serialize(self) -> str:
        """Encode as a single ``inc`` line.

        Example:
            inc 2024-01-01T09:00:00Z - 2024-01-01T10:00:00Z # work # 2024-01-01T09:30:00Z - "call"
        """
        parts = ["inc"]

        if self.start.to_epoch():
            parts.append(" " + self.start.to_iso())

        if self.end.to_epoch():
            parts.append(" - " + self.end.to_iso())

        marker_written = False
        if self._tags:
            parts.append(self._tag_clause())
            marker_written = True

        if self._annotations:
            if not marker_written:
                parts.append(" #")
            for time, text in self.get_annotations().items():
                escaped = escape(text, '"')
                parts.append(f' # {time.to_iso()} - "{escaped}"')

        return "".join(parts)

    def json(self) -> str:
        """Encode as a JSON object with a fixed member order.

        An empty interval encodes as ``{}``.
        """
        if self.empty():
            return "{}"

        members = [f'"id":{self.id}']

        if self.is_started():
            members.append(f'"start":"{self.start.to_iso()}"')

        if self.is_ended():
            members.append(f'"end":"{self.end.to_iso()}"')

        if self._tags:
            tags = ",".join(f'"{json_encode(tag)}"' for tag in self.tags())
            members.append(f'"tags":[{tags}]')

        if self._annotations:
            annotations = ", ".join(
                f'"{time.to_iso()}": "{json_encode(text)}"'
                for time, text in self.get_annotations().items()
            )
            members.append(f'"annotations": {{{annotations}}}')

        return "{" + ",".join(members) + "}"

    def dump(self, tz: str | None = None) -> str:
        """Describe the interval for debugging, with endpoints in local time."""
        parts = ["interval"]

        if self.id:
            parts.append(f" @{self.id}")

        if self.start.to_epoch():
            parts.append(" " + self.start.to_iso_local_extended(tz))

        if self.end.to_epoch():
            parts.append(" - " + self.end.to_iso_local_extended(tz))

        if self._tags:
            parts.append(self._tag_clause())

        if self.synthetic:
            parts.append(" synthetic")

        return "".join(parts)

    @override
    def __str__(self) -> str:
        return self.dump()
