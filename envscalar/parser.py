"""Parse a single environment variable into a typed destination."""

from __future__ import annotations

import logging
from typing import Any

from envscalar import config
from envscalar.destination import Destination, Kind, Ref, type_name_of
from envscalar.exception import (
    InvalidArgError,
    NotPresentError,
    ParseError,
    UnsupportedTypeError,
)
from envscalar.utils.env import lookup_env
from envscalar.utils.numconv import (
    SUPPORTED_WIDTHS,
    NumError,
    parse_signed,
    parse_unsigned,
)
from envscalar.utils.pydantic_v1 import ValidationError

logger = logging.getLogger(__name__)


def _validate_destination(name: str, destination: Any) -> Kind:
    """Check the destination's shape and return its kind."""
    if destination is None:
        raise InvalidArgError(name, "destination cannot be nil")
    if not isinstance(destination, Destination):
        raise InvalidArgError(
            name, f"destination cannot be a non-reference {type_name_of(destination)}"
        )
    if destination.is_nil:
        raise InvalidArgError(
            name, f"destination cannot be a nil {destination.type_name} reference"
        )
    kind = destination.kind
    if kind is None or not kind.is_supported:
        raise UnsupportedTypeError(destination.type_name)
    return kind


def _resolve_width(name: str, kind: Kind, native_width: int | None) -> int | None:
    """Return the bit width to parse `kind` with, or `None` for strings."""
    if kind is Kind.STR:
        return None
    if kind.width is not None:
        return kind.width
    if native_width is None:
        try:
            native_width = config.get_settings().native_width
        except ValidationError as e:
            raise InvalidArgError(name, f"invalid ENVSCALAR_NATIVE_WIDTH: {e}") from e
    if native_width not in config.NATIVE_WIDTHS:
        raise InvalidArgError(
            name, f"native_width must be one of {config.NATIVE_WIDTHS}, got {native_width}"
        )
    return native_width


def parse(name: str, destination: Any, *, native_width: int | None = None) -> None:
    """Parse environment variable `name` into `destination`.

    The destination is written only when the whole call succeeds.

    Args:
        name: Name of the environment variable.
        destination: A [`Destination`][envscalar.destination.Destination]
            whose kind is `Kind.STR` or an integer kind.
        native_width: Bit width of `Kind.INT` and `Kind.UINT`. Defaults to
            `envscalar.config.get_settings().native_width`, which is only
            read for native-width kinds.

    Raises:
        InvalidArgError: If `destination` is `None`, not a reference, or a nil
            reference, or if the native width (argument or
            `ENVSCALAR_NATIVE_WIDTH`) is not 32 or 64.
        UnsupportedTypeError: If the destination's kind cannot be parsed into.
        NotPresentError: If the variable is not set.
        ParseError: If the value is not a valid integer for the destination's kind.
    """
    kind = _validate_destination(name, destination)
    width = _resolve_width(name, kind, native_width)

    raw = lookup_env(name)
    if raw is None:
        raise NotPresentError(name)

    value: str | int
    if kind is Kind.STR:
        value = raw
    else:
        assert width is not None
        try:
            if kind.is_signed:
                value = parse_signed(raw, width)
            else:
                value = parse_unsigned(raw, width)
        except NumError as e:
            raise ParseError(name, e) from e

    destination.set(value)
    logger.debug("Parsed %s into %s", name, kind.value)


def _check_width(name: str, width: int | None) -> None:
    if width is not None and width not in SUPPORTED_WIDTHS:
        raise InvalidArgError(name, f"width must be one of {SUPPORTED_WIDTHS}, got {width}")


def parse_str(name: str) -> str:
    """Return environment variable `name` as a string."""
    ref = Ref("")
    parse(name, ref)
    return ref.value


def parse_int(name: str, width: int | None = None) -> int:
    """Return environment variable `name` as a signed integer of `width` bits.

    `width=None` means the native width.
    """
    _check_width(name, width)
    kind = Kind.INT if width is None else Kind(f"int{width}")
    ref = Ref(0, kind)
    parse(name, ref)
    return ref.value


def parse_uint(name: str, width: int | None = None) -> int:
    """Return environment variable `name` as an unsigned integer of `width` bits.

    `width=None` means the native width.
    """
    _check_width(name, width)
    kind = Kind.UINT if width is None else Kind(f"uint{width}")
    ref = Ref(0, kind)
    parse(name, ref)
    return ref.value
