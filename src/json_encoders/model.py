"""Data model shared by all encoders: JSON value aliases, Encoder, Absent, ObjectEntry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


# ---------------------------------------------------------------------------
# JSON values — the builtin data model understood by ``json``
# ---------------------------------------------------------------------------

JsonScalar = Union[str, int, float, bool, None]
JsonValue = Union[JsonScalar, "list[JsonValue]", "dict[str, JsonValue]"]
JsonArray = list[JsonValue]
JsonObject = dict[str, JsonValue]

Encoder = Callable[[T], JsonValue]


# ---------------------------------------------------------------------------
# Absent — singleton for an omitted object field
# ---------------------------------------------------------------------------

class _AbsentType:
    """Marker returned by an ObjectEntry whose field must be left out.

    ``None`` is a present JSON null, so it cannot play this role.
    """

    _instance: _AbsentType | None = None

    def __new__(cls) -> _AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Absent"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _AbsentType:
        return self

    def __deepcopy__(self, memo: dict) -> _AbsentType:
        return self

    def __reduce__(self) -> str:
        return "Absent"


Absent = _AbsentType()


def is_absent(value: object) -> bool:
    """True for ``None`` and ``Absent``, the two spellings of a missing optional."""
    return value is None or value is Absent


# ---------------------------------------------------------------------------
# ObjectEntry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ObjectEntry(Generic[T]):
    """A named field whose presence is decided per value.

    ``evaluate`` returns the field's JSON value, or ``Absent`` to omit it.
    An ``always_present`` entry is written whatever ``evaluate`` returns.
    """

    name: str
    evaluate: Callable[[T], JsonValue | _AbsentType]
    always_present: bool = False

    def __call__(self, value: T) -> JsonValue | _AbsentType:
        return self.evaluate(value)
