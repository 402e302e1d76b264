"""pytarde - Convert integer counts into non-negative time durations."""

from __future__ import annotations

try:
    from pytarde._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pytarde._converter import (
    Unit,
    convert,
    to_microseconds,
    to_milliseconds,
    to_nanoseconds,
    to_seconds,
    try_convert,
)
from pytarde._errors import ConversionError, NegativeValueError, OverflowValueError
from pytarde._kinds import (
    I8,
    I16,
    I32,
    I64,
    I128,
    KINDS,
    U8,
    U16,
    U32,
    U64,
    U128,
    IntKind,
)
from pytarde.duration import Duration
from pytarde.during import During, during

__all__ = [
    "convert",
    "try_convert",
    "to_nanoseconds",
    "to_microseconds",
    "to_milliseconds",
    "to_seconds",
    "during",
    "During",
    "Duration",
    "Unit",
    "IntKind",
    "KINDS",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ConversionError",
    "NegativeValueError",
    "OverflowValueError",
]
