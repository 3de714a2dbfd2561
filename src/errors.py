"""Exception types raised by the C2PA removal pipeline.

``has_c2pa`` never raises; ``remove_c2pa`` surfaces only
``UnsupportedFormatError`` and ``RemovalFailedError``.
``DecodeFailureError`` is raised by the re-encode step and always
recovered inside the orchestrator.
"""

from __future__ import annotations


class C2PARemoverError(Exception):
    """Base class for all errors raised by this package."""


class UnsupportedFormatError(C2PARemoverError, ValueError):
    """Input is empty, missing, or neither JPEG nor PNG."""


class DecodeFailureError(C2PARemoverError):
    """The image codec could not decode or re-encode the input."""


class RemovalFailedError(C2PARemoverError, RuntimeError):
    """Segment-level removal could not produce a verified clean image."""
