"""json_encoders — composable encoders from Python values to JSON."""

from .model import (
    Absent,
    Encoder,
    JsonArray,
    JsonObject,
    JsonScalar,
    JsonValue,
    ObjectEntry,
    is_absent,
)
from .primitives import string, int_, float_, bool_, null
from .containers import list_, array, set_
from .objects import entry, maybe_entry, object_
from .combinators import dict_object, dict_, nullable, adapt
from .render import RenderOptions, dumps, encode, encode_bytes
from .errors import JsonEncodersError, EncoderDefinitionError

__all__ = [
    "Absent",
    "Encoder",
    "JsonArray",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "ObjectEntry",
    "is_absent",
    "string",
    "int_",
    "float_",
    "bool_",
    "null",
    "list_",
    "array",
    "set_",
    "entry",
    "maybe_entry",
    "object_",
    "dict_object",
    "dict_",
    "nullable",
    "adapt",
    "RenderOptions",
    "dumps",
    "encode",
    "encode_bytes",
    "JsonEncodersError",
    "EncoderDefinitionError",
]
