"""Tests for rendering encoded values to text."""

import json
import math

import pytest

from json_encoders import (
    RenderOptions,
    dict_object,
    dumps,
    encode,
    encode_bytes,
    entry,
    float_,
    int_,
    list_,
    object_,
    string,
)


def test_encode_default():
    assert encode(list_(int_), [1, 2]) == "[1, 2]"


def test_encode_compact():
    enc = object_([entry("a", lambda v: v, int_)])
    assert encode(enc, 1, RenderOptions.compact()) == '{"a":1}'


def test_encode_pretty():
    text = encode(dict_object(int_), {"a": 1}, RenderOptions.pretty())
    assert text == '{\n  "a": 1\n}'


def test_sort_keys():
    text = encode(dict_object(int_), {"b": 2, "a": 1}, RenderOptions.compact(sort_keys=True))
    assert text == '{"a":1,"b":2}'


def test_field_order_follows_entries():
    enc = object_([
        entry("z", lambda v: v, int_),
        entry("a", lambda v: v, int_),
    ])
    assert encode(enc, 0, RenderOptions.compact()) == '{"z":0,"a":0}'


def test_ensure_ascii():
    assert encode(string, "é") == '"\\u00e9"'
    assert encode(string, "é", RenderOptions(ensure_ascii=False)) == '"é"'


def test_encode_bytes():
    assert encode_bytes(string, "é", RenderOptions(ensure_ascii=False)) == '"é"'.encode("utf-8")


def test_nan_allowed_by_default():
    assert encode(float_, math.nan) == "NaN"


def test_nan_rejected_error_propagates():
    with pytest.raises(ValueError):
        encode(float_, math.nan, RenderOptions(allow_nan=False))


def test_non_json_value_error_propagates():
    with pytest.raises(TypeError):
        encode(string, object())


def test_dumps_matches_json():
    doc = {"a": [1, None, True]}
    assert dumps(doc) == json.dumps(doc)


def test_compact_with_explicit_separators():
    opts = RenderOptions.compact(separators=(", ", ":"))
    assert opts.separators == (", ", ":")
    assert encode(list_(int_), [1, 2], opts) == "[1, 2]"


def test_compact_default_separators():
    assert RenderOptions.compact().separators == (",", ":")
