"""JSON metadata list serialization.

Wire format: a JSON array with one object per record, in batch order.
Single-valued fields are JSON strings, multi-valued fields are arrays of
strings. Field order follows insertion order, so the same batch always
serializes to the same bytes.

    [{"X-TIKA:sourcePath": "a/b.txt", "dc:creator": ["x", "y"]}, {...}]
"""

from __future__ import annotations
import json
from typing import Any, Dict, List, Sequence, TextIO
from .metadata import Metadata


class SerializationError(ValueError):
    """Record cannot be converted to or from the JSON metadata list format."""


def _record_to_obj(idx: int, record: Any) -> Dict[str, Any]:
    if not isinstance(record, Metadata):
        raise SerializationError(
            f"record {idx} must be Metadata, got {type(record).__name__}"
        )
    return record.to_dict()


def to_json(batch: Sequence[Metadata], sink: TextIO) -> None:
    """Write `batch` to the text stream `sink`."""
    objs = [_record_to_obj(i, r) for i, r in enumerate(batch)]
    json.dump(objs, sink, ensure_ascii=False)


def _obj_to_record(idx: int, obj: Any) -> Metadata:
    if not isinstance(obj, dict):
        raise SerializationError(f"record {idx} must be a JSON object")
    md = Metadata()
    for name, value in obj.items():
        if isinstance(value, str):
            md.set(name, value)
        elif isinstance(value, list) and all(isinstance(v, str) for v in value):
            md.set(name, value)
        else:
            raise SerializationError(
                f"record {idx} field '{name}' must be a string or list of strings"
            )
    return md


def from_json(source: TextIO) -> List[Metadata]:
    """Read a JSON metadata list from the text stream `source`."""
    try:
        data = json.load(source)
    except json.JSONDecodeError as e:
        raise SerializationError(f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise SerializationError("metadata list must be a JSON array")
    return [_obj_to_record(i, obj) for i, obj in enumerate(data)]
