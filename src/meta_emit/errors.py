"""Emission errors.

Every failure inside an emitter surfaces as an EmissionError subclass.
`retryable` tells the caller whether trying again (after operator action)
can help; emitters never retry on their own.
"""

from __future__ import annotations


class EmissionError(Exception):
    """Base class for all emission failures."""
    retryable: bool = False


class InvalidBatch(EmissionError):
    """Batch was None or empty."""


class MissingRoutingKey(EmissionError):
    """First record has no source path, so no output path can be derived."""


class UnsafeRoutingKey(EmissionError):
    """Source path would place output outside the configured base path."""


class DirectoryCreationFailure(EmissionError):
    retryable = True


class WriteFailure(EmissionError):
    """I/O or serialization failed while writing the output file."""
    retryable = True
