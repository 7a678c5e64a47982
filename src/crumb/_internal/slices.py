"""Offset table over a single serialized buffer.

``SliceIndex`` owns the text of a ``Set-Cookie`` value and, for every
populated field, the range of its segment inside that text. Reads are
plain slices. Writes splice the text and shift the ranges of every later
segment, so the table never goes stale.

Segments are laid out back to back and cover the whole buffer::

    id=42; Secure; Path=/
    ^^ ^^^ ^^^^^^^^ ^^^^^^^^
    |  |   |        Path    (head 7: value starts after "; Path=")
    |  |   Secure           (flag: empty value range at segment end)
    |  value                (head 1: value starts after "=")
    name                    (head 0)
"""

from collections.abc import Hashable, Iterator
from dataclasses import dataclass

from crumb.errors import InvalidOperation

NAME = "name"
VALUE = "value"
MANDATORY_FIELDS = frozenset({NAME, VALUE})


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` range of a field's value in the buffer."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(slots=True)
class _Slot:
    field: Hashable
    start: int
    end: int
    value_start: int

    def shift(self, delta: int) -> None:
        self.start += delta
        self.end += delta
        self.value_start += delta


class SliceIndex:
    """One text buffer plus the ordered segment table that describes it.

    Not thread-safe; callers that share a cookie take a ``copy()``.
    """

    __slots__ = ("_slots", "_text")

    def __init__(self) -> None:
        self._text = ""
        self._slots: list[_Slot] = []

    @property
    def text(self) -> str:
        return self._text

    def __contains__(self, field: object) -> bool:
        return self._find(field) is not None

    def __len__(self) -> int:
        return len(self._slots)

    def fields(self) -> Iterator[Hashable]:
        """Fields in buffer order."""
        for slot in self._slots:
            yield slot.field

    def get(self, field: Hashable) -> Span | None:
        """Current value range of *field*, or ``None`` if it is absent."""
        slot = self._find(field)
        if slot is None:
            return None
        return Span(slot.value_start, slot.end)

    def slice(self, span: Span) -> str:
        return self._text[span.start : span.end]

    def set(self, field: Hashable, segment: str, head: int) -> Span:
        """Write *segment* as the text of *field*.

        An existing field is replaced where it stands; a new one is appended
        after the last segment. *head* is the offset of the value inside
        *segment*. Returns the new value range.
        """
        if not 0 <= head <= len(segment):
            msg = f"head {head} outside segment of length {len(segment)}"
            raise ValueError(msg)

        position = self._position(field)
        if position is None:
            start = len(self._text)
            self._text += segment
            slot = _Slot(field, start, len(self._text), start + head)
            self._slots.append(slot)
            return Span(slot.value_start, slot.end)

        slot = self._slots[position]
        delta = len(segment) - (slot.end - slot.start)
        self._text = self._text[: slot.start] + segment + self._text[slot.end :]
        slot.end = slot.start + len(segment)
        slot.value_start = slot.start + head
        self._shift_after(position, delta)
        return Span(slot.value_start, slot.end)

    def remove(self, field: Hashable) -> bool:
        """Delete *field*'s segment. Returns ``False`` if it was absent.

        Raises:
            InvalidOperation: *field* is ``name`` or ``value``.
        """
        if field in MANDATORY_FIELDS:
            msg = f"cannot remove mandatory field {field!r}"
            raise InvalidOperation(msg)
        position = self._position(field)
        if position is None:
            return False
        slot = self._slots.pop(position)
        self._text = self._text[: slot.start] + self._text[slot.end :]
        self._shift_after(position - 1, slot.start - slot.end)
        return True

    def copy(self) -> "SliceIndex":
        clone = SliceIndex()
        clone._text = self._text
        clone._slots = [_Slot(s.field, s.start, s.end, s.value_start) for s in self._slots]
        return clone

    # -- internals ---------------------------------------------------------

    def _find(self, field: object) -> _Slot | None:
        position = self._position(field)
        return None if position is None else self._slots[position]

    def _position(self, field: object) -> int | None:
        for i, slot in enumerate(self._slots):
            if slot.field == field:
                return i
        return None

    def _shift_after(self, position: int, delta: int) -> None:
        if not delta:
            return
        for slot in self._slots[position + 1 :]:
            slot.shift(delta)
