"""Exceptions raised by json_encoders."""

from __future__ import annotations


class JsonEncodersError(Exception):
    """Base class for errors raised by this package."""


class EncoderDefinitionError(JsonEncodersError, ValueError):
    """An encoder was assembled from invalid parts.

    Only raised while building encoders, never while encoding a value.
    """


def require_callable(candidate: object, role: str) -> None:
    """Raise EncoderDefinitionError unless *candidate* can be called."""
    if not callable(candidate):
        raise EncoderDefinitionError(
            f"{role} must be callable, got {type(candidate).__name__}"
        )
