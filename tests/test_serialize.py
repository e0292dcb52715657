import pytest

from kser.fields import NamedField
from kser.serialize import serialize_json


class Nested:
    def __init__(self, a):
        self.a = NamedField("a", a)


class Data:
    def __init__(self, int_val, nested):
        self.int_val = NamedField("int_val", int_val)
        self.nested_val = NamedField("nested", nested)


def test_scalars():
    assert serialize_json("hello") == '"hello"'
    assert serialize_json(10) == "10"
    assert serialize_json(10.5) == "10.50"


def test_struct():
    assert serialize_json(Nested(10)) == '{"a": 10}'


def test_nested():
    d = Data(10, Nested(20))
    assert serialize_json(d) == '{"int_val": 10, "nested": {"a": 20}}'


def test_bool():
    assert serialize_json(True) == "true"
    assert serialize_json(False) == "false"


def test_precision():
    assert serialize_json(10.5, precision=3) == "10.500"
    assert serialize_json(10, precision=3) == "10"


def test_quotes_are_escaped():
    assert serialize_json('a"b\\c') == '"a\\"b\\\\c"'


def test_unserializable_fields_and_plain_attributes_skipped():
    class Mixed:
        def __init__(self):
            self.x = NamedField("x", 1)
            self.items = NamedField("items", [1, 2])
            self.plain = 5

    assert serialize_json(Mixed()) == '{"x": 1}'


def test_unsupported_top_level_raises():
    with pytest.raises(TypeError):
        serialize_json([1, 2])