"""Console prompts and numeric input parsing."""

from __future__ import annotations

import math
from collections.abc import Callable

from .errors import InvalidInputError
from .models import Product

INVALID_NUMBER = " X Invalid input. Please enter a number."

_CLEAR = "\033[2J\033[H"


def parse_int(token: str) -> int:
    """Parse a whole number typed by the user.

    Raises:
        InvalidInputError: If the token is not an integer.
    """
    text = token.strip()
    # int() also accepts "1_000"
    if "_" in text:
        raise InvalidInputError(f"Not a whole number: {token!r}")
    try:
        return int(text)
    except ValueError:
        raise InvalidInputError(f"Not a whole number: {token!r}") from None


def parse_float(token: str) -> float:
    """Parse a decimal number typed by the user.

    Raises:
        InvalidInputError: If the token is not a finite number.
    """
    text = token.strip()
    try:
        value = float(text)
    except ValueError:
        raise InvalidInputError(f"Not a number: {token!r}") from None
    if "_" in text or not math.isfinite(value):
        raise InvalidInputError(f"Not a number: {token!r}")
    return value


class Console:
    """Line-oriented terminal I/O.

    ``input_fn`` and ``output_fn`` default to the builtins and can be
    replaced to script a session. End of input raises EOFError out of
    every ``ask_*`` method.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
        *,
        clear_screen: bool = False,
    ) -> None:
        self._input = input_fn or input
        self._output = output_fn or print
        self.clear_screen = clear_screen

    def say(self, text: str = "") -> None:
        self._output(text)

    def ask_text(self, prompt: str) -> str:
        return self._input(prompt)

    def ask_int(self, prompt: str) -> int:
        while True:
            try:
                return parse_int(self._input(prompt))
            except InvalidInputError:
                self.say(INVALID_NUMBER)

    def ask_float(self, prompt: str) -> float:
        while True:
            try:
                return parse_float(self._input(prompt))
            except InvalidInputError:
                self.say(INVALID_NUMBER)

    def ask_product(self) -> Product:
        product_id = self.ask_int("Enter product ID: ")
        name = self.ask_text("Enter product name: ")
        quantity = self.ask_int("Enter quantity: ")
        price = self.ask_float("Enter price: ")
        return Product(id=product_id, name=name, quantity=quantity, price=price)

    def pause(self) -> None:
        self._input("\nPress Enter to continue...")

    def clear(self) -> None:
        if self.clear_screen:
            self._output(_CLEAR)
