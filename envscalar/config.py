"""Library-wide configuration.

Settings are read from environment variables prefixed with `ENVSCALAR_`.

- `ENVSCALAR_NATIVE_WIDTH`: Bit width of [`Kind.INT`][envscalar.destination.Kind]
    and [`Kind.UINT`][envscalar.destination.Kind]. Either 32 or 64. Defaults to
    the pointer width of the running interpreter.
"""

from __future__ import annotations

import sys
from functools import lru_cache

from envscalar.utils.pydantic_v1 import BaseSettings, validator

NATIVE_WIDTHS = (32, 64)


def default_native_width() -> int:
    """Return the native integer width of the running interpreter."""
    return sys.maxsize.bit_length() + 1


class EnvScalarSettings(BaseSettings):
    """envscalar settings.

    Attributes:
        native_width: Bit width used for native-width integer kinds.
    """

    native_width: int = default_native_width()

    class Config:  # type: ignore
        """Model configuration."""

        env_prefix = "ENVSCALAR_"

    @validator("native_width")
    def _validate_native_width(cls, v) -> int:
        if v not in NATIVE_WIDTHS:
            raise ValueError(f"native_width must be one of {NATIVE_WIDTHS}, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> EnvScalarSettings:
    """Read the settings from the environment on first use.

    Raises:
        ValidationError: If `ENVSCALAR_NATIVE_WIDTH` is invalid. Failures are
            not cached, so fixing the variable takes effect on the next call.
    """
    return EnvScalarSettings()  # type: ignore
