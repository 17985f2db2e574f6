"""Exceptions raised by envscalar.

Every failure of [`parse`][envscalar.parser.parse] is one of the four classes
below, all of which derive from [`EnvScalarBaseError`][envscalar.exception.EnvScalarBaseError].
"""

from __future__ import annotations

from envscalar.utils.numconv import NumError


class EnvScalarBaseError(Exception):
    """envscalar base exception class."""

    def __init__(self, message: str) -> None:
        """Initialize base exception."""
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """Return message."""
        return self.message


class InvalidArgError(EnvScalarBaseError):
    """The destination handle has the wrong shape.

    Raised when the destination is `None`, a bare value instead of a reference,
    or a nil reference. These are programming errors on the caller's side.
    """

    def __init__(self, name: str, reason: str) -> None:
        """Initialize the error for variable `name`."""
        self.name = name
        super().__init__(f"{name}: {reason}")


class UnsupportedTypeError(EnvScalarBaseError):
    """The destination references a kind that cannot be parsed into."""

    def __init__(self, type_name: str) -> None:
        """Initialize the error with the offending type name."""
        self.type_name = type_name
        super().__init__(f"unsupported type: {type_name}")


class NotPresentError(EnvScalarBaseError):
    """The environment variable is not set."""

    def __init__(self, name: str) -> None:
        """Initialize the error for variable `name`."""
        self.name = name
        super().__init__(f"{name} is not present")


class ParseError(EnvScalarBaseError):
    """The environment variable's value could not be converted.

    Attributes:
        name: Name of the environment variable.
        err: The underlying numeric conversion error.
    """

    def __init__(self, name: str, err: NumError) -> None:
        """Initialize the error wrapping `err`."""
        self.name = name
        self.err = err
        super().__init__(f"failed to parse {name}: {err}")
