from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterator, Optional, Union


class ValueKind(IntEnum):
    """Record type tags. The integer values are the tag bytes on the wire."""

    BOOL = 0
    INT8 = 1
    UINT8 = 2
    INT32 = 3
    UINT32 = 4
    FLOAT32 = 5
    STRING = 6
    LIST = 7
    MODIFICATION = 8


@dataclass(frozen=True)
class RecordHeader:
    kind: ValueKind
    record_id: int

    @property
    def key(self) -> str:
        return str(self.record_id)


@dataclass(frozen=True)
class ModificationRecord:
    """
    A decoded modification record.

    Attributes:
        insert: Maps the inserted text to its identifier as a decimal string.
            The wire stores ``id -> text``; the decoded form is reversed so a
            caller can look up an identifier by its text.
        remove: Identifiers to remove, as decimal strings, in wire order.
    """
    insert: dict[str, str] = field(default_factory=dict)
    remove: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {"insert": dict(self.insert), "remove": list(self.remove)}


Value = Union[bool, int, float, str, list[int], ModificationRecord]


@dataclass(frozen=True)
class DecodedValue:
    kind: ValueKind
    value: Value

    def plain(self) -> Any:
        if self.kind is ValueKind.MODIFICATION:
            return self.value.as_dict()
        if self.kind is ValueKind.LIST:
            return list(self.value)
        return self.value


@dataclass
class DecodedDatabase:
    """
    Result of decoding a binary database.

    Keys are record identifiers in decimal string form, in the order they first
    appear in the buffer. A repeated identifier keeps the last decoded value.

    Attributes:
        entries: Identifier -> decoded value.
        size: Number of bytes consumed, which is always the full buffer length.
    """
    entries: dict[str, DecodedValue] = field(default_factory=dict)
    size: int = 0

    def __getitem__(self, key: str) -> DecodedValue:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the plain value stored under ``key``, or ``default``."""
        entry = self.entries.get(key)
        if entry is None:
            return default
        return entry.value

    def kind_of(self, key: str) -> Optional[ValueKind]:
        entry = self.entries.get(key)
        return entry.kind if entry is not None else None

    def as_dict(self) -> dict[str, Any]:
        """Plain, JSON-serialisable view of the database."""
        return {key: entry.plain() for key, entry in self.entries.items()}
