"""Render encoded values to JSON text.

Serialization itself is left entirely to the standard ``json`` module;
this module only applies an encoder and forwards the formatting options.
Whatever ``json.dumps`` raises (``ValueError`` for NaN with
``allow_nan=False``, ``TypeError`` for a value that is not JSON) reaches
the caller unchanged.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from .model import Encoder, JsonValue, T

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """Formatting options forwarded to ``json.dumps``."""

    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = True
    allow_nan: bool = True
    separators: tuple[str, str] | None = None

    @classmethod
    def compact(cls, **kwargs) -> RenderOptions:
        """Options for the shortest output: no whitespace after separators."""
        kwargs.setdefault("separators", (",", ":"))
        return cls(**kwargs)

    @classmethod
    def pretty(cls, indent: int = 2, **kwargs) -> RenderOptions:
        return cls(indent=indent, **kwargs)


_DEFAULT_OPTIONS = RenderOptions()


def dumps(document: JsonValue, options: RenderOptions | None = None) -> str:
    """Serialize an already encoded JSON value."""
    opts = options or _DEFAULT_OPTIONS
    return json.dumps(
        document,
        indent=opts.indent,
        sort_keys=opts.sort_keys,
        ensure_ascii=opts.ensure_ascii,
        allow_nan=opts.allow_nan,
        separators=opts.separators,
    )


def encode(encoder: Encoder[T], value: T, options: RenderOptions | None = None) -> str:
    """Apply *encoder* to *value* and return the JSON text."""
    document = encoder(value)
    text = dumps(document, options)
    logger.debug("rendered %s to %d characters", type(value).__name__, len(text))
    return text


def encode_bytes(
    encoder: Encoder[T],
    value: T,
    options: RenderOptions | None = None,
) -> bytes:
    """Like ``encode`` but returns UTF-8 bytes."""
    return encode(encoder, value, options).encode("utf-8")
