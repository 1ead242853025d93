"""Metadata data model.

Metadata is the record handed to emitters: one per document or embedded
sub-part of a document. Every field holds one or more string values.

A batch is an ordered, non-empty sequence of Metadata. The first record
routes the whole batch; embedded records ride along in the same output.
"""

from __future__ import annotations
from typing import Dict, List, Mapping, Optional, Sequence, Union

SOURCE_PATH = "X-TIKA:sourcePath"

FieldValue = Union[str, List[str]]


class Metadata:
    """Multi-valued string mapping for a single extracted document."""

    def __init__(self, fields: Optional[Mapping[str, FieldValue]] = None):
        self._fields: Dict[str, List[str]] = {}
        for name, value in (fields or {}).items():
            self.set(name, value)

    def get(self, name: str) -> Optional[str]:
        values = self._fields.get(name)
        if not values:
            return None
        return values[0]

    def get_values(self, name: str) -> List[str]:
        return list(self._fields.get(name, []))

    def set(self, name: str, value: FieldValue) -> None:
        if isinstance(value, (list, tuple)):
            self._fields[name] = [str(v) for v in value]
        else:
            self._fields[name] = [str(value)]

    def add(self, name: str, value: str) -> None:
        self._fields.setdefault(name, []).append(str(value))

    def names(self) -> List[str]:
        return list(self._fields)

    def to_dict(self) -> Dict[str, FieldValue]:
        """Single values collapse to str, multiple values stay a list."""
        out: Dict[str, FieldValue] = {}
        for name, values in self._fields.items():
            out[name] = values[0] if len(values) == 1 else list(values)
        return out

    @classmethod
    def from_dict(cls, fields: Mapping[str, FieldValue]) -> "Metadata":
        return cls(fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metadata):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"Metadata({self.to_dict()!r})"


MetadataBatch = Sequence[Metadata]
