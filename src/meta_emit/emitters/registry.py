"""Emitter registry.

Adding a new backend:
1) implement an Emitter subclass
2) register a factory under a new `kind` with register_emitter() (dynamic)
   or add it to _STATIC_REGISTRY (built-in)
3) reference the kind in emitters.yaml

A factory takes the emitter's params mapping (as read from YAML) and
returns a ready Emitter.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Mapping
from .base import Emitter
from .fs import FileSystemEmitter

EmitterFactory = Callable[[Mapping[str, Any]], Emitter]

DEFAULT_KIND = "fs"

_STATIC_REGISTRY: Dict[str, EmitterFactory] = {
    FileSystemEmitter.kind: FileSystemEmitter.from_params,
}

_DYNAMIC_REGISTRY: Dict[str, EmitterFactory] = {}


def register_emitter(kind: str, factory: EmitterFactory) -> None:
    """Register a new emitter kind at runtime.

    Example:
        from meta_emit.emitters.registry import register_emitter

        register_emitter("opensearch", lambda params: OpenSearchEmitter(**params))
    """
    if kind in _STATIC_REGISTRY or kind in _DYNAMIC_REGISTRY:
        raise ValueError(f"Emitter kind '{kind}' already registered")
    _DYNAMIC_REGISTRY[kind] = factory


def unregister_emitter(kind: str) -> None:
    """Unregister a dynamically registered kind."""
    _DYNAMIC_REGISTRY.pop(kind, None)


def list_emitter_kinds() -> Dict[str, str]:
    """List all registered kinds (static + dynamic)."""
    kinds = {kind: "static" for kind in _STATIC_REGISTRY}
    for kind in _DYNAMIC_REGISTRY:
        kinds[kind] = "dynamic"
    return kinds


def make_emitter(params: Mapping[str, Any]) -> Emitter:
    """Create an emitter from its params; `kind` defaults to "fs"."""
    kind = params.get("kind", DEFAULT_KIND)
    if kind in _STATIC_REGISTRY:
        return _STATIC_REGISTRY[kind](params)
    if kind in _DYNAMIC_REGISTRY:
        return _DYNAMIC_REGISTRY[kind](params)
    available = list(_STATIC_REGISTRY) + list(_DYNAMIC_REGISTRY)
    raise ValueError(
        f"Unknown emitter kind: {kind}. "
        f"Available: {available}. "
        f"Register with register_emitter()"
    )
