"""Auxiliary combinators: mappings, optional values and input projection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Optional, TypeVar

from .errors import require_callable
from .model import Encoder, JsonValue, T, U, is_absent

K = TypeVar("K")


def dict_object(encoder: Encoder[T]) -> Encoder[Mapping[str, T]]:
    """Encode a str-keyed mapping as a JSON object, one member per key.

    Unlike ``object_`` there is no omission: every key is written, even if
    its value encodes to null.
    """
    require_callable(encoder, "value encoder")

    def encode_dict(mapping: Mapping[str, T]) -> JsonValue:
        return {key: encoder(item) for key, item in mapping.items()}

    return encode_dict


def dict_(key: Callable[[K], str], encoder: Encoder[T]) -> Encoder[Mapping[K, T]]:
    """Encode a mapping with arbitrary keys, turning each key into a string with *key*.

    If two keys map to the same string the later one wins, as with ``dict``.
    """
    require_callable(key, "key function")
    require_callable(encoder, "value encoder")

    def encode_dict(mapping: Mapping[K, T]) -> JsonValue:
        return {key(k): encoder(v) for k, v in mapping.items()}

    return encode_dict


def nullable(encoder: Encoder[T]) -> Encoder[Optional[T]]:
    """Encode ``None`` (or ``Absent``) as JSON null, anything else with *encoder*."""
    require_callable(encoder, "encoder")

    def encode_nullable(value: Optional[T]) -> JsonValue:
        if is_absent(value):
            return None
        return encoder(value)

    return encode_nullable


def adapt(transform: Callable[[T], U], encoder: Encoder[U]) -> Encoder[T]:
    """Reuse *encoder* for another type by projecting values through *transform* first.

    *transform* is expected to be total.  A projection that may fail should
    return ``None`` and be combined with ``nullable`` (or used as a
    ``maybe_entry`` accessor).
    """
    require_callable(transform, "transform")
    require_callable(encoder, "encoder")

    def encode_adapted(value: T) -> JsonValue:
        return encoder(transform(value))

    return encode_adapted
