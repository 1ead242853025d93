"""Filesystem emitter.

Writes each batch to a file whose path is derived from the first record's
SOURCE_PATH:

    output = join(base_path, source_path + "." + file_extension)

- the extension is appended by plain string concatenation, so "a/b.txt"
  becomes "a/b.txt.json"; an empty extension disables the suffix
- without base_path the path is relative to the working directory
- with base_path, absolute or ".."-escaping source paths are rejected
- missing parent directories are created; a directory created concurrently
  by another worker is not an error

Example config:

    emitters:
      - name: fs
        kind: fs
        base_path: /path/to/output
        file_extension: json
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence
from .base import Emitter, require_batch
from ..errors import (
    DirectoryCreationFailure,
    MissingRoutingKey,
    UnsafeRoutingKey,
    WriteFailure,
)
from ..metadata import SOURCE_PATH, Metadata
from ..serialization import to_json

logger = logging.getLogger("meta_emit.emitters.fs")

# config key -> accepted spellings
_PARAM_ALIASES: Dict[str, tuple] = {
    "name": ("name",),
    "base_path": ("base_path", "basePath"),
    "file_extension": ("file_extension", "fileExtension"),
}


@dataclass(frozen=True)
class FileSystemEmitterConfig:
    name: str
    base_path: Optional[str] = None
    file_extension: str = "json"

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("FileSystemEmitter requires a non-empty string 'name'")
        if self.base_path is not None and not isinstance(self.base_path, str):
            raise ValueError(f"'base_path' must be a string, got {self.base_path!r}")
        # stored resolved; the directory does not need to exist yet
        if self.base_path:
            object.__setattr__(self, "base_path", os.path.abspath(self.base_path))
        else:
            object.__setattr__(self, "base_path", None)
        if self.file_extension is None:
            object.__setattr__(self, "file_extension", "")
        elif not isinstance(self.file_extension, str):
            raise ValueError(f"'file_extension' must be a string, got {self.file_extension!r}")

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "FileSystemEmitterConfig":
        """Build from a config mapping; `kind` is ignored, other unknown keys fail."""
        known = {alias for aliases in _PARAM_ALIASES.values() for alias in aliases}
        unknown = sorted(k for k in params if k not in known and k != "kind")
        if unknown:
            raise ValueError(f"Unknown FileSystemEmitter params: {unknown}")
        kwargs: Dict[str, Any] = {}
        for field_name, aliases in _PARAM_ALIASES.items():
            for alias in aliases:
                if alias in params:
                    kwargs[field_name] = params[alias]
                    break
        if "name" not in kwargs:
            raise ValueError("FileSystemEmitter requires a non-empty 'name'")
        return cls(**kwargs)


class FileSystemEmitter(Emitter):
    kind = "fs"

    def __init__(self, config: FileSystemEmitterConfig):
        self.config = config

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "FileSystemEmitter":
        return cls(FileSystemEmitterConfig.from_params(params))

    @property
    def name(self) -> str:
        return self.config.name

    def output_path(self, batch: Optional[Sequence[Metadata]]) -> str:
        """Derive the output path for `batch` without touching the filesystem."""
        batch = require_batch(batch)
        rel_path = batch[0].get(SOURCE_PATH)
        if rel_path is None:
            raise MissingRoutingKey(
                f"Must specify a {SOURCE_PATH} in the metadata in order for "
                f"emitter '{self.name}' to generate the output file path."
            )
        if self.config.file_extension:
            rel_path += "." + self.config.file_extension

        base = self.config.base_path
        if base is None:
            return rel_path
        if os.path.isabs(rel_path):
            raise UnsafeRoutingKey(
                f"Absolute source path '{rel_path}' not allowed under base path '{base}'"
            )
        output = os.path.normpath(os.path.join(base, rel_path))
        if os.path.commonpath([base, output]) != base:
            raise UnsafeRoutingKey(
                f"Source path '{rel_path}' escapes base path '{base}'"
            )
        return output

    def emit(self, batch: Optional[Sequence[Metadata]]) -> None:
        output = self.output_path(batch)

        parent = os.path.dirname(output)
        if parent and not os.path.isdir(parent):
            try:
                os.makedirs(parent, exist_ok=True)
            except (OSError, ValueError) as e:
                raise DirectoryCreationFailure(
                    f"Could not create directory '{parent}': {e}"
                ) from e

        try:
            with open(output, "w", encoding="utf-8") as f:
                to_json(batch, f)
        except (OSError, ValueError) as e:
            raise WriteFailure(f"Could not write '{output}': {e}") from e

        logger.debug(f"Emitted {len(batch)} record(s) to {output}")
