import dataclasses
import json

import pytest

from zbjobs.variables import InvalidVariablesError, JSONStringSerializer, omitempty


@dataclasses.dataclass
class DataType:
    foo: str = omitempty("")


@dataclasses.dataclass
class Mixed:
    name: str = "x"
    count: int = omitempty(0)
    flag: bool = omitempty(False)
    tags: list = omitempty(None)


@dataclasses.dataclass
class Outer:
    inner: DataType = dataclasses.field(default_factory=DataType)
    label: str = "outer"


@pytest.fixture
def serializer():
    return JSONStringSerializer()


def test_validate_returns_decoded_object(serializer):
    assert serializer.validate("variables", '{"foo":"bar"}') == {"foo": "bar"}


@pytest.mark.parametrize("value", ["", "not json", "[1, 2]", "42", '"text"', "null"])
def test_validate_rejects_non_objects(serializer, value):
    with pytest.raises(InvalidVariablesError):
        serializer.validate("variables", value)


def test_validate_error_names_field(serializer):
    with pytest.raises(InvalidVariablesError) as info:
        serializer.validate("variables", "oops")
    assert "variables" in str(info.value)


def test_as_json_dataclass(serializer):
    assert serializer.as_json("variables", DataType(foo="bar"), False) == '{"foo":"bar"}'


def test_as_json_omits_empty_field(serializer):
    assert serializer.as_json("variables", DataType(foo=""), False) == "{}"


def test_as_json_keeps_empty_field_when_ignoring_omitempty(serializer):
    assert serializer.as_json("variables", DataType(foo=""), True) == '{"foo":""}'


def test_as_json_omits_all_kinds_of_empty_values(serializer):
    result = json.loads(serializer.as_json("variables", Mixed(), False))
    assert set(result) == {"name"}


def test_as_json_keeps_non_empty_values(serializer):
    value = Mixed(count=3, flag=True, tags=["a"])
    result = json.loads(serializer.as_json("variables", value, False))
    assert result == {"name": "x", "count": 3, "flag": True, "tags": ["a"]}


def test_as_json_ignore_omitempty_keeps_every_field(serializer):
    result = json.loads(serializer.as_json("variables", Mixed(), True))
    assert set(result) == {f.name for f in dataclasses.fields(Mixed)}


def test_as_json_map_round_trip(serializer):
    variables = {"foo": "bar", "n": 1, "nested": {"list": [1, 2, {"k": None}]}}
    assert json.loads(serializer.as_json("variables", variables, False)) == variables


def test_as_json_nested_dataclass(serializer):
    result = json.loads(serializer.as_json("variables", Outer(), False))
    assert result == {"inner": {}, "label": "outer"}


def test_as_json_is_compact(serializer):
    document = serializer.as_json("variables", {"a": 1, "b": [1, 2]}, False)
    assert " " not in document


def test_as_json_rejects_unserialisable(serializer):
    with pytest.raises(InvalidVariablesError):
        serializer.as_json("variables", {"value": object()}, False)


def test_as_json_rejects_non_object(serializer):
    with pytest.raises(InvalidVariablesError):
        serializer.as_json("variables", [1, 2, 3], False)