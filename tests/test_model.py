"""Tests for json_encoders.model."""

import copy
import pickle

import pytest

from json_encoders.model import Absent, ObjectEntry, _AbsentType, is_absent


class TestAbsent:
    def test_singleton(self):
        assert Absent is _AbsentType()

    def test_falsy(self):
        assert not Absent

    def test_repr(self):
        assert repr(Absent) == "Absent"

    def test_distinct_from_none(self):
        assert Absent is not None
        assert Absent != None  # noqa: E711

    def test_copy_keeps_identity(self):
        assert copy.copy(Absent) is Absent
        assert copy.deepcopy({"x": Absent})["x"] is Absent

    def test_pickle_keeps_identity(self):
        assert pickle.loads(pickle.dumps(Absent)) is Absent


class TestIsAbsent:
    def test_none(self):
        assert is_absent(None)

    def test_absent(self):
        assert is_absent(Absent)

    def test_falsy_values_are_present(self):
        assert not is_absent(0)
        assert not is_absent("")
        assert not is_absent([])
        assert not is_absent(False)


class TestObjectEntry:
    def test_name_and_call(self):
        e = ObjectEntry("n", lambda v: v * 2)
        assert e.name == "n"
        assert e(21) == 42

    def test_frozen(self):
        e = ObjectEntry("n", lambda v: v)
        with pytest.raises(AttributeError):
            e.name = "m"
