"""Reading the command-line numbers into a list of distinct 32-bit integers."""

from __future__ import annotations

import re
from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(f"[{_WHITESPACE}]*([+-]?)([0-9]*)")
_NUMBER = re.compile(f"[{_WHITESPACE}]*[+-]?[0-9]*")
_DIGITS = re.compile("[0-9]+")


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def parse_int(text: str) -> int:
    """Read an integer from the start of ``text``, atoi style.

    Leading whitespace is skipped, one sign is allowed, and reading stops at
    the first non-digit. Text without digits gives 0.
    """
    match = _LEADING_INT.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces."""
    return [word for word in text.split(sep) if word]


def is_number(text: str) -> bool:
    """Tell whether ``text`` is whitespace, an optional sign and digits only.

    A lone sign is not a number; text that is empty or all whitespace is.
    """
    if text in ("-", "+"):
        return False
    return _NUMBER.fullmatch(text) is not None


def check_entry(words: Sequence[str]) -> int:
    """Check each word is an optional minus sign and digits within int range.

    Returns the number of words checked; raises InputError on the first bad one.
    """
    for word in words:
        digits = word[1:] if word.startswith("-") else word
        if word and not _DIGITS.fullmatch(digits):
            raise InputError(f"not an integer: {word!r}")
        length = len(word)
        too_long = length > 11 or (length == 11 and not word.startswith("-"))
        too_small = length == 11 and word > str(INT_MIN)
        too_large = length == 10 and word > str(INT_MAX)
        if too_long or too_small or too_large:
            raise InputError(f"integer out of range: {word!r}")
    return len(words)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program arguments into the values of stack A, top first.

    One argument is split on spaces; several are taken one value each.
    No arguments, or a single empty one, give an empty list.
    """
    if not args or (len(args) == 1 and args[0] == ""):
        return []
    if len(args) == 1:
        words = split_words(args[0], " ")
        if not all(is_number(word) for word in words):
            raise InputError("arguments must be integers")
        if all(char == " " for char in args[0]):
            raise InputError("argument is blank")
        check_entry(words)
    else:
        words = list(args)
        if not all(is_number(word) for word in words):
            raise InputError("arguments must be integers")
        if any(word == "" for word in words):
            raise InputError("empty argument")
        check_entry(words)
    values = [parse_int(word) for word in words]
    if len(set(values)) != len(values):
        raise InputError("duplicate value")
    if any(value > INT_MAX or value < INT_MIN for value in values):
        raise InputError("value out of int range")
    return values