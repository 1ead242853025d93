"""Emitter manager.

Holds the configured emitters of a deployment, keyed by name, so
orchestration code can route a batch with `manager.emit("fs", batch)`.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence
from .base import Emitter
from .registry import make_emitter
from ..metadata import Metadata

logger = logging.getLogger("meta_emit.emitters.manager")


class EmitterManager:
    def __init__(self, emitters: Iterable[Emitter] = ()):
        self._emitters: Dict[str, Emitter] = {}
        for emitter in emitters:
            self.add(emitter)

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]]) -> "EmitterManager":
        """Build every entry of cfg["emitters"]."""
        entries = (cfg or {}).get("emitters") or []
        if not isinstance(entries, list):
            raise ValueError("'emitters' must be a list of emitter params")
        manager = cls()
        for params in entries:
            if not isinstance(params, Mapping):
                raise ValueError(f"Emitter params must be a mapping, got {params!r}")
            manager.add(make_emitter(params))
        logger.info(f"Configured emitters: {manager.names()}")
        return manager

    def add(self, emitter: Emitter) -> None:
        if emitter.name in self._emitters:
            raise ValueError(f"Emitter '{emitter.name}' already configured")
        self._emitters[emitter.name] = emitter

    def names(self) -> List[str]:
        return list(self._emitters)

    def get(self, name: str) -> Emitter:
        if name not in self._emitters:
            raise KeyError(
                f"Unknown emitter: {name}. Available: {self.names()}"
            )
        return self._emitters[name]

    def emit(self, name: str, batch: Sequence[Metadata]) -> None:
        self.get(name).emit(batch)
