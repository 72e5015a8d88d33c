"""Object combinators: named field entries and the object encoder that assembles them.

An entry is evaluated against the whole domain value and either yields a
JSON value for its field or ``Absent``, in which case the field is dropped
from the resulting object.  Which fields appear is therefore decided value
by value, so one ``object_`` encoder covers every shape of a record with
optional fields::

    person = object_([
        entry("name", lambda p: p.name, string),
        maybe_entry("email", lambda p: p.email, string),
    ])
    person(Person("Ann", None))         # {"name": "Ann"}
    person(Person("Bob", "b@x.org"))    # {"name": "Bob", "email": "b@x.org"}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable

from .errors import EncoderDefinitionError, require_callable
from .model import Absent, Encoder, JsonValue, ObjectEntry, T, U, _AbsentType, is_absent

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

def _check_name(name: object) -> None:
    if not isinstance(name, str):
        raise EncoderDefinitionError(
            f"field name must be a str, got {type(name).__name__}"
        )


def entry(name: str, accessor: Callable[[T], U], encoder: Encoder[U]) -> ObjectEntry[T]:
    """A field that is always present in the encoded object."""
    _check_name(name)
    require_callable(accessor, f"accessor for field {name!r}")
    require_callable(encoder, f"encoder for field {name!r}")

    def evaluate(value: T) -> JsonValue:
        return encoder(accessor(value))

    return ObjectEntry(name, evaluate, always_present=True)


def maybe_entry(
    name: str,
    accessor: Callable[[T], U | None],
    encoder: Encoder[U],
) -> ObjectEntry[T]:
    """A field omitted whenever *accessor* yields ``None`` or ``Absent``.

    To write an explicit ``null`` instead of omitting the field, use
    ``entry(name, accessor, nullable(encoder))``.
    """
    _check_name(name)
    require_callable(accessor, f"accessor for field {name!r}")
    require_callable(encoder, f"encoder for field {name!r}")

    def evaluate(value: T) -> JsonValue | _AbsentType:
        inner = accessor(value)
        if is_absent(inner):
            return Absent
        return encoder(inner)

    return ObjectEntry(name, evaluate)


# ---------------------------------------------------------------------------
# Object
# ---------------------------------------------------------------------------

def object_(entries: Iterable[ObjectEntry[T]]) -> Encoder[T]:
    """Build an encoder producing a JSON object from *entries*.

    Fields keep the order of *entries*; absent ones are skipped.  With no
    entries, or none present for a given value, the result is ``{}``.

    Entries may share a name.  When several of them are present for the
    same value, the later one wins, in the position of the first.  This
    lets mutually exclusive entries encode the variants of a tagged value.
    """
    fields = tuple(entries)
    for field in fields:
        if not isinstance(field, ObjectEntry):
            raise EncoderDefinitionError(
                f"object entries must be ObjectEntry, got {type(field).__name__}"
            )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("object encoder with fields %r", [f.name for f in fields])

    def encode_object(value: T) -> JsonValue:
        result: dict[str, JsonValue] = {}
        for field in fields:
            encoded = field.evaluate(value)
            if encoded is Absent and not field.always_present:
                continue
            result[field.name] = encoded
        return result

    return encode_object
