"""Primitive encoders for JSON scalars.

The builtin scalars already are JSON values, so these are identity adapters.
Nothing is validated here: a non-finite float, for instance, is handed on
as-is and it is up to ``json`` to accept or reject it when rendering.
"""

from __future__ import annotations

from .model import JsonValue


def string(value: str) -> JsonValue:
    return value


def int_(value: int) -> JsonValue:
    return value


def float_(value: float) -> JsonValue:
    return value


def bool_(value: bool) -> JsonValue:
    return value


def null(_value: object = None) -> JsonValue:
    """Always encode as JSON null, whatever the input."""
    return None
