import pytest

from enginebravo.save.fields import (
    FloatSaveField,
    IntSaveField,
    StringSaveField,
    is_float,
    is_integer,
)


def test_int_field_holds_name_and_value():
    field = IntSaveField("score", 10)
    field.value = 20
    assert (field.name, field.value) == ("score", 20)


def test_float_field_holds_name_and_value():
    field = FloatSaveField("speed", 1.5)
    field.value = 2.5
    assert (field.name, field.value) == ("speed", 2.5)


def test_string_field_holds_name_and_value():
    field = StringSaveField("player", "alice")
    field.value = "bob"
    assert (field.name, field.value) == ("player", "bob")


def test_fields_compare_by_content():
    assert IntSaveField("a", 1) == IntSaveField("a", 1)
    assert IntSaveField("a", 1) != IntSaveField("a", 2)


@pytest.mark.parametrize("text", ["42", "-7", "+3", "0", "2147483647", "-2147483648"])
def test_is_integer_accepts(text):
    assert is_integer(text) is True


@pytest.mark.parametrize(
    "text",
    ["", " 42", "42 ", "4.2", "abc", "0x10", "2147483648", "-2147483649", "1e3", "-"],
)
def test_is_integer_rejects(text):
    assert is_integer(text) is False


@pytest.mark.parametrize("text", ["1.5", "-2e3", ".5", "1.", "42", "+0.25", "3E-2"])
def test_is_float_accepts(text):
    assert is_float(text) is True


@pytest.mark.parametrize("text", ["", " 1.5", "1.5 ", "abc", "1e", ".", "1e50", "inf", "nan"])
def test_is_float_rejects(text):
    assert is_float(text) is False


@pytest.mark.parametrize("text", ["0", "12", "-99", "+5", "2147483647"])
def test_every_integer_text_is_float_text(text):
    assert is_integer(text) and is_float(text)