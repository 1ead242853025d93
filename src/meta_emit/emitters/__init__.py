"""Emitters: contract, filesystem backend, registry and manager."""

from .base import Emitter, require_batch
from .fs import FileSystemEmitter, FileSystemEmitterConfig
from .manager import EmitterManager
from .registry import list_emitter_kinds, make_emitter, register_emitter, unregister_emitter

__all__ = [
    "Emitter",
    "require_batch",
    "FileSystemEmitter",
    "FileSystemEmitterConfig",
    "EmitterManager",
    "list_emitter_kinds",
    "make_emitter",
    "register_emitter",
    "unregister_emitter",
]
