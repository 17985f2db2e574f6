"""Compatibility layer for Pydantic v1 and v2.

We don't want to pin any specific version of Pydantic. With this, we can
import things from `envscalar.utils.pydantic_v1` and always use the V1 API
regardless of the installed version of Pydantic.
"""

# pyright: reportWildcardImportFromLibrary=false

try:
    from pydantic.v1 import *
except ImportError:
    from pydantic import *
