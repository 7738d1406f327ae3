"""Reading the list of integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

_INT_MIN = -2147483648
_INT_MAX = 2147483647
_LEADING_SPACE = "\n\t\f\v\r "


class InputError(ValueError):
    """Raised when the numbers given to the program are not acceptable."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def atoi(text: str) -> int:
    """Read a leading integer the way the C library's atoi does.

    Leading whitespace is skipped, one optional sign is honoured, and
    digits are read up to the first non-digit. Text with no digits reads
    as 0.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def split_words(text: str) -> list[str]:
    """Split text on spaces, dropping empty words.

    Only the space character separates words; tabs and other whitespace
    stay inside the words they appear in.
    """
    return [word for word in text.split(" ") if word]


def _fits_int(digits: str, sign: int) -> bool:
    value = 0
    for char in digits:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        if not _INT_MIN <= value * sign <= _INT_MAX:
            return False
    return True


def is_valid_int(text: str) -> bool:
    """Tell whether text is an optional sign followed by digits that fit
    a signed 32-bit integer.

    A sign standing alone is not a number.
    """
    body = text[1:] if text[:1] in ("-", "+") and len(text) > 1 else text
    if not all("0" <= char <= "9" for char in body):
        return False
    sign = -1 if text[:1] == "-" else 1
    digits = text[1:] if text[:1] in ("-", "+") else text
    return _fits_int(digits, sign)


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into the list of numbers to sort.

    Each argument may hold several numbers separated by spaces. An
    argument with no numbers in it, a word that is not a valid integer,
    or a number given twice raises :class:`InputError`. No arguments at
    all give an empty list.
    """
    numbers: list[int] = []
    seen: set[int] = set()
    for arg in args:
        words = split_words(arg)
        if not words:
            raise InputError()
        for word in words:
            if not is_valid_int(word):
                raise InputError()
            value = atoi(word)
            if value in seen:
                raise InputError()
            seen.add(value)
            numbers.append(value)
    return numbers