from dataclasses import dataclass

import pytest

from daggerkit.parser import to_any_type


@dataclass
class Sample:
    field1: str
    field2: int


@pytest.mark.parametrize(
    ("value", "target", "expected"),
    [
        (123, int, 123),
        ("test", str, "test"),
        (123.45, float, 123.45),
        (Sample("value", 10), Sample, Sample("value", 10)),
    ],
)
def test_converts_matching_type(value, target, expected):
    assert to_any_type(value, target) == expected


def test_none_input_gives_none():
    assert to_any_type(None, int) is None


def test_none_input_with_object_target_gives_none():
    assert to_any_type(None, object) is None


def test_mismatched_type_gives_none():
    assert to_any_type("123", int) is None