"""Tests for input parsing and the console prompts."""

import pytest

from supermarket.console import INVALID_NUMBER, Console, parse_float, parse_int
from supermarket.errors import InvalidInputError
from supermarket.models import Product


def scripted(*answers):
    """Build a Console that answers prompts from ``answers``."""
    replies = iter(answers)
    output: list[str] = []
    prompts: list[str] = []

    def fake_input(prompt):
        prompts.append(prompt)
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    return Console(fake_input, output.append), output, prompts


@pytest.mark.parametrize("token, expected", [("5", 5), (" 42 ", 42), ("-3", -3)])
def test_parse_int(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize("token", ["", "abc", "4.5", "1e3", "1_000"])
def test_parse_int_invalid(token):
    with pytest.raises(InvalidInputError):
        parse_int(token)


def test_parse_float():
    assert parse_float("2.5") == 2.5
    assert parse_float("3") == 3.0
    with pytest.raises(InvalidInputError):
        parse_float("two")


@pytest.mark.parametrize("token", ["nan", "inf", "-Infinity", "1_000.5"])
def test_parse_float_rejects_non_finite_and_separators(token):
    with pytest.raises(InvalidInputError):
        parse_float(token)


def test_ask_float_reprompts_on_nan():
    console, output, _ = scripted("nan", "2.5")
    assert console.ask_float("Price: ") == 2.5
    assert output == [INVALID_NUMBER]


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_ask_int_reprompts_until_valid():
    console, output, prompts = scripted("x", "", "7")
    assert console.ask_int("ID: ") == 7
    assert output == [INVALID_NUMBER, INVALID_NUMBER]
    assert prompts == ["ID: ", "ID: ", "ID: "]


def test_ask_float_reprompts_until_valid():
    console, output, _ = scripted("cheap", "1.5")
    assert console.ask_float("Price: ") == 1.5
    assert output == [INVALID_NUMBER]


def test_ask_int_end_of_input():
    console, _, _ = scripted("nope")
    with pytest.raises(EOFError):
        console.ask_int("ID: ")


def test_ask_product_field_order():
    console, _, prompts = scripted("1", "Milk", "50", "2.5")
    assert console.ask_product() == Product(id=1, name="Milk", quantity=50, price=2.5)
    assert prompts == [
        "Enter product ID: ",
        "Enter product name: ",
        "Enter quantity: ",
        "Enter price: ",
    ]


def test_clear_only_when_enabled():
    output: list[str] = []
    Console(lambda _: "", output.append).clear()
    assert output == []

    Console(lambda _: "", output.append, clear_screen=True).clear()
    assert output == ["\033[2J\033[H"]
