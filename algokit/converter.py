"""Conversion between binary digit strings and non-negative integers, with a small prompt."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator, Sequence


def binary_to_decimal(digits: str | int) -> int:
    """Read a string (or integer) of binary digits and return its value."""
    text = str(digits).strip()
    if not text or set(text) - {"0", "1"}:
        raise ValueError(f"{digits!r} is not a binary number")
    return int(text, 2)


def decimal_to_binary(number: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if number < 0:
        raise ValueError("number must not be negative")
    return format(number, "b")


def _answers(argv: Sequence[str]) -> Callable[[str], str]:
    supplied: Iterator[str] = iter(argv)

    def ask(prompt: str) -> str:
        print(prompt)
        answer = next(supplied, None)
        return input() if answer is None else answer

    return ask


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a conversion and a value, taking answers from ``argv`` before stdin."""
    ask = _answers(sys.argv[1:] if argv is None else argv)
    print("Welcome to binary and decimal converter Program")
    choice = ask(
        "Please Enter Your Choice\n"
        "1.Convert Binary into Decimal\n"
        "2.Convert Decimal into Binary"
    ).strip()
    try:
        if choice == "1":
            result: object = binary_to_decimal(
                ask("Enter binary to convert it into number")
            )
        elif choice == "2":
            result = decimal_to_binary(int(ask("Enter number to convert it into binary")))
        else:
            print("Enter a valid option!")
            return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Answer is {result}")
    return 0