"""Method-style conversions on a wrapped integer.

``During(42).millis()`` reads the way ``42.millis()`` would if Python let
you add methods to ``int``.
"""

from __future__ import annotations

from typing import Any

from pytarde._converter import Unit, convert
from pytarde._kinds import IntKind, coerce
from pytarde.duration import Duration


class During:
    """An integer count awaiting a unit."""

    __slots__ = ("value", "kind")

    def __init__(self, value: Any, kind: IntKind | str | None = None) -> None:
        self.value, self.kind = coerce(value, kind)

    def __repr__(self) -> str:
        if self.kind is None:
            return f"During({self.value})"
        return f"During({self.value}, kind={str(self.kind)!r})"

    def _to(self, unit: Unit) -> Duration:
        return convert(self.value, unit, kind=self.kind)

    def nanos(self) -> Duration:
        return self._to(Unit.NANOSECONDS)

    def micros(self) -> Duration:
        return self._to(Unit.MICROSECONDS)

    def millis(self) -> Duration:
        return self._to(Unit.MILLISECONDS)

    def secs(self) -> Duration:
        return self._to(Unit.SECONDS)

    sec = secs
    to_ns = nanos
    to_us = micros
    to_ms = millis
    to_sec = secs

    # Kind-specific constructors
    @classmethod
    def u8(cls, value: Any) -> During:
        return cls(value, "u8")

    @classmethod
    def u16(cls, value: Any) -> During:
        return cls(value, "u16")

    @classmethod
    def u32(cls, value: Any) -> During:
        return cls(value, "u32")

    @classmethod
    def u64(cls, value: Any) -> During:
        return cls(value, "u64")

    @classmethod
    def u128(cls, value: Any) -> During:
        return cls(value, "u128")

    @classmethod
    def i8(cls, value: Any) -> During:
        return cls(value, "i8")

    @classmethod
    def i16(cls, value: Any) -> During:
        return cls(value, "i16")

    @classmethod
    def i32(cls, value: Any) -> During:
        return cls(value, "i32")

    @classmethod
    def i64(cls, value: Any) -> During:
        return cls(value, "i64")

    @classmethod
    def i128(cls, value: Any) -> During:
        return cls(value, "i128")


def during(value: Any, kind: IntKind | str | None = None) -> During:
    return During(value, kind)
