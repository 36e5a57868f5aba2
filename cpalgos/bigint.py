"""Text conversion of integers in bases 2 to 36."""

from __future__ import annotations


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, not {base}")


def char_to_digit(char: str) -> int:
    """Value of one digit character; letters count from 10, in either case."""
    if char.isalpha():
        return 10 + ord(char.lower()) - ord("a")
    return ord(char) - ord("0")


def digit_to_char(digit: int) -> str:
    """Character for a digit value; values above 9 become lower-case letters."""
    if digit > 9:
        return chr(ord("a") + digit - 10)
    return chr(ord("0") + digit)


def to_int(text: str, base: int = 10) -> int:
    """Parse an optionally negative integer written in ``base``."""
    _check_base(base)
    digits = text[1:] if text.startswith("-") else text
    if not digits:
        raise ValueError(f"no digits in {text!r}")
    number = 0
    for char in digits:
        digit = char_to_digit(char)
        if not 0 <= digit < base:
            raise ValueError(f"invalid digit {char!r} for base {base}")
        number = number * base + digit
    return -number if text.startswith("-") else number


def to_string(number: int, base: int = 10) -> str:
    """Write ``number`` in ``base`` with lower-case letter digits."""
    _check_base(base)
    negative = number < 0
    number = abs(number)
    digits = []
    while True:
        number, digit = divmod(number, base)
        digits.append(digit_to_char(digit))
        if number == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))