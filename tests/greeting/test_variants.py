"""Tests for greeting targets"""

import dataclasses

import pytest

from exercises_app.errors import MalformedDataError
from exercises_app.greeting import Many, Single, greeting_for


class TestVariants:
    """Test Single and Many records"""

    def test_many_stores_tuple(self):
        """Many copies its names into a tuple"""
        names = ["Sam", "Lee"]
        target = Many(names)
        names.append("Kim")

        assert target.names == ("Sam", "Lee")

    def test_many_default_empty(self):
        """Many defaults to no names"""
        assert Many().names == ()

    def test_frozen(self):
        """Variants cannot be changed after construction"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Single("Sam").name = "Lee"

    def test_equality(self):
        """Variants compare by value"""
        assert Many(["a"]) == Many(("a",))
        assert Single("a") != Many(("a",))


class TestGreetingFor:
    """Test building variants from raw values"""

    def test_string(self):
        """A string becomes Single"""
        assert greeting_for("Sam") == Single("Sam")

    def test_list(self):
        """A list becomes Many"""
        assert greeting_for(["Sam", "Lee"]) == Many(("Sam", "Lee"))

    def test_empty_list(self):
        """An empty list becomes an empty Many"""
        assert greeting_for([]) == Many(())

    def test_rejects_non_strings(self):
        """Mixed lists are rejected"""
        with pytest.raises(MalformedDataError):
            greeting_for(["Sam", 3])

    def test_rejects_other_types(self):
        """Numbers are neither a name nor a list of names"""
        with pytest.raises(MalformedDataError):
            greeting_for(42)

    def test_rejects_mapping(self):
        """A mapping is not a list of names"""
        with pytest.raises(MalformedDataError) as exc_info:
            greeting_for({"Sam": 1})

        assert exc_info.value.expected_format == "str | list[str]"

    def test_rejects_bytes(self):
        """Bytes are not a name"""
        with pytest.raises(MalformedDataError) as exc_info:
            greeting_for(b"Sam")

        assert "bytes" in str(exc_info.value)
