"""Small text helpers: number parsing, hexadecimal and a minimal formatter."""

from __future__ import annotations

from itertools import takewhile

_UNSIGNED_LONG_MASK = (1 << 64) - 1


def _is_digit(char):
    return "0" <= char <= "9"


def is_alpha_or_space(char):
    """Tell whether a character is an ASCII letter or a space."""
    return ("A" <= char <= "Z") or ("a" <= char <= "z") or char == " "


def to_hex(number):
    """Lower-case hexadecimal of an unsigned long, padded to an even length."""
    digits = format(number & _UNSIGNED_LONG_MASK, "x")
    if number & _UNSIGNED_LONG_MASK == 0:
        return "00"
    if len(digits) % 2:
        return "0" + digits
    return digits


def _next_arg(values):
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_char(value):
    if isinstance(value, int):
        return chr(value & 0xFF)
    return str(value)[:1]


def _convert(flag, values):
    if flag in ("i", "d"):
        return str(int(_next_arg(values)))
    if flag in ("c", "C"):
        return _as_char(_next_arg(values))
    if flag in ("s", "S"):
        return str(_next_arg(values))
    if flag in ("p", "P"):
        pointer = _next_arg(values)
        return "0x0" if pointer is None else "0x" + str(int(pointer))
    if flag in ("x", "X"):
        return to_hex(int(_next_arg(values)))
    if flag == "%":
        return "%"
    return ""


def mini_format(fmt, *args):
    """Format with the flags %i %d %c %s %p %x and %%; other flags print nothing."""
    values = iter(args)
    chars = iter(fmt)
    parts = []
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        parts.append(_convert(next(chars, ""), values))
    return "".join(parts)


def is_negative(text):
    """Tell whether the non-digit prefix of text holds an odd number of '-'."""
    prefix = takewhile(lambda char: not _is_digit(char), text)
    return sum(char == "-" for char in prefix) % 2 == 1


def char_number_kind(char):
    """Classify a character as 'sign', 'digit' or 'other'."""
    if char == "-":
        return "sign"
    if _is_digit(char):
        return "digit"
    return "other"


def is_number_string(text):
    """Tell whether every character is a decimal digit (true for an empty string)."""
    return all(_is_digit(char) for char in text)


def get_number(text):
    """Read a decimal number after any leading '-' characters."""
    rest = text.lstrip("-")
    digits = "".join(takewhile(_is_digit, rest))
    number = int(digits) if digits else 0
    return -number if is_negative(text) else number