"""Strict base-10 integer conversion bounded by bit width."""

from __future__ import annotations

import re

import numpy as np

ERR_SYNTAX = "invalid syntax"
ERR_RANGE = "value out of range"

SUPPORTED_WIDTHS = (8, 16, 32, 64)

_SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_PATTERN = re.compile(r"[0-9]+")

# No supported width holds more than this many significant decimal digits.
_MAX_DIGITS = 20


class NumError(ValueError):
    """A numeric conversion failed.

    Attributes:
        func: Name of the conversion function that failed.
        num: The input text.
        reason: Either `ERR_SYNTAX` or `ERR_RANGE`.
    """

    def __init__(self, func: str, num: str, reason: str) -> None:
        """Initialize the error."""
        self.func = func
        self.num = num
        self.reason = reason
        super().__init__(f"{func}: parsing {num!r}: {reason}")


def _check_width(width: int) -> None:
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"Unsupported integer width {width}. Expected one of {SUPPORTED_WIDTHS}.")


def signed_bounds(width: int) -> tuple[int, int]:
    """Return the inclusive `(min, max)` of a signed integer of `width` bits."""
    _check_width(width)
    info = np.iinfo(np.dtype(f"int{width}"))
    return int(info.min), int(info.max)


def unsigned_bounds(width: int) -> tuple[int, int]:
    """Return the inclusive `(min, max)` of an unsigned integer of `width` bits."""
    _check_width(width)
    info = np.iinfo(np.dtype(f"uint{width}"))
    return int(info.min), int(info.max)


def parse_signed(text: str, width: int) -> int:
    """Parse `text` as a base-10 signed integer that fits in `width` bits.

    Only an optional leading sign followed by ASCII digits is accepted.
    Syntax is validated before range, so `"12a"` is always a syntax error
    no matter how many digits precede the bad character. This differs from
    left-to-right converters, which report an overflow as soon as the digits
    seen so far exceed the bound: `"99999999999999999999x"` is out of range
    for them but a syntax error here.

    Raises:
        NumError: If `text` is malformed or out of range.
        ValueError: If `width` is not supported.
    """
    lo, hi = signed_bounds(width)
    if _SIGNED_PATTERN.fullmatch(text) is None:
        raise NumError("parse_signed", text, ERR_SYNTAX)
    if len(text.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        raise NumError("parse_signed", text, ERR_RANGE)
    value = int(text)
    if not lo <= value <= hi:
        raise NumError("parse_signed", text, ERR_RANGE)
    return value


def parse_unsigned(text: str, width: int) -> int:
    """Parse `text` as a base-10 unsigned integer that fits in `width` bits.

    A leading sign of either kind is a syntax error. As with
    [`parse_signed`][envscalar.utils.numconv.parse_signed], syntax is
    checked over the whole input before range.

    Raises:
        NumError: If `text` is malformed or out of range.
        ValueError: If `width` is not supported.
    """
    _, hi = unsigned_bounds(width)
    if _UNSIGNED_PATTERN.fullmatch(text) is None:
        raise NumError("parse_unsigned", text, ERR_SYNTAX)
    if len(text.lstrip("0")) > _MAX_DIGITS:
        raise NumError("parse_unsigned", text, ERR_RANGE)
    value = int(text)
    if value > hi:
        raise NumError("parse_unsigned", text, ERR_RANGE)
    return value
