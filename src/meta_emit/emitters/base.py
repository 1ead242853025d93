"""Emitter contract.

An emitter accepts a batch of Metadata and persists it somewhere:
- FileSystemEmitter: one JSON file per batch, path derived from SOURCE_PATH
- other backends (search index, queue, object store) plug in via the registry

Emitters are built once from configuration and reused for many `emit`
calls. They keep no per-call state, so one instance may be shared by
concurrent workers.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from ..errors import InvalidBatch
from ..metadata import Metadata


class Emitter(ABC):
    """Persists metadata batches; looked up by `name`."""

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def emit(self, batch: Sequence[Metadata]) -> None:
        """Persist the whole batch or raise an EmissionError."""
        raise NotImplementedError


def require_batch(batch: Optional[Sequence[Metadata]]) -> Sequence[Metadata]:
    if batch is None or len(batch) == 0:
        raise InvalidBatch("metadata batch must not be None or empty")
    return batch
