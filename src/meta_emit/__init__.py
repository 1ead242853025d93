"""meta_emit

Path-derived emission of extracted-document metadata batches.

Public API surface:
- meta_emit.metadata : Metadata record and the SOURCE_PATH routing field
- meta_emit.emitters : Emitter contract, filesystem emitter, registry/manager
- meta_emit.serialization : JSON metadata list reader/writer
- meta_emit.cli.main : CLI entrypoint

New backends register a factory in `meta_emit.emitters.registry`.
"""
__all__ = ["__version__"]
__version__ = "0.1.0"
