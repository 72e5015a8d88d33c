"""Container combinators: lift an element encoder to a JSON array encoder."""

from __future__ import annotations

from collections.abc import Iterable, Sequence, Set

from .errors import require_callable
from .model import Encoder, JsonValue, T


def list_(encoder: Encoder[T]) -> Encoder[Iterable[T]]:
    """Encode any ordered iterable element-wise, keeping iteration order.

    Generators are accepted; they are consumed once.
    """
    require_callable(encoder, "element encoder")

    def encode_list(items: Iterable[T]) -> JsonValue:
        return [encoder(item) for item in items]

    return encode_list


def array(encoder: Encoder[T]) -> Encoder[Sequence[T]]:
    """Encode an indexed sequence (list, tuple, range, ...) element-wise."""
    require_callable(encoder, "element encoder")

    def encode_array(items: Sequence[T]) -> JsonValue:
        return [encoder(items[i]) for i in range(len(items))]

    return encode_array


def set_(encoder: Encoder[T]) -> Encoder[Set[T]]:
    """Encode a set as a JSON array.

    Member order is the set's iteration order, which carries no meaning.
    """
    require_callable(encoder, "element encoder")

    def encode_set(members: Set[T]) -> JsonValue:
        return [encoder(member) for member in members]

    return encode_set
