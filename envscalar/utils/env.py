"""Access to the process environment."""

from __future__ import annotations

import os


def lookup_env(name: str) -> str | None:
    """Return the value of environment variable `name`, or `None` if unset.

    An empty value is returned as the empty string, not `None`.
    """
    return os.environ.get(name)
