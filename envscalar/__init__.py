"""envscalar parses a single environment variable into a typed destination.

- [`parser`][envscalar.parser]: The `parse` entry point and its typed shortcuts
- [`destination`][envscalar.destination]: Scalar kinds and destination references
- [`exception`][envscalar.exception]: Error classes raised by `parse`
- [`config`][envscalar.config]: Library settings read from `ENVSCALAR_*` variables
- [`utils`][envscalar.utils]: Numeric conversion and environment access
"""

import logging

from envscalar.destination import AttrRef, Destination, Kind, Ref
from envscalar.exception import (
    EnvScalarBaseError,
    InvalidArgError,
    NotPresentError,
    ParseError,
    UnsupportedTypeError,
)
from envscalar.parser import parse, parse_int, parse_str, parse_uint
from envscalar.utils.numconv import NumError

__version__ = "0.1.0"

# Add NullHandler to prevent "No handler found" warnings when envscalar is used as a library.
logging.getLogger(__name__).addHandler(logging.NullHandler())
