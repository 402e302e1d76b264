"""Duration value type produced by every conversion."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import ClassVar

from pytarde._constants import (
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_SEC,
    U64_MAX,
)


@dataclass(frozen=True, order=True)
class Duration:
    """A non-negative span of time with nanosecond resolution.

    Stored as whole seconds (up to ``2**64 - 1``) plus a sub-second
    nanosecond remainder, so any ``u64`` count of any unit fits exactly.
    ``datetime.timedelta`` tops out near 2.7 million years and only keeps
    microseconds, which is why this type exists at all.
    """

    secs: int = 0
    nanos: int = 0

    ZERO: ClassVar[Duration]

    def __post_init__(self) -> None:
        if isinstance(self.secs, bool) or not isinstance(self.secs, int):
            raise TypeError(f"secs must be int, got {type(self.secs).__name__}")
        if isinstance(self.nanos, bool) or not isinstance(self.nanos, int):
            raise TypeError(f"nanos must be int, got {type(self.nanos).__name__}")
        if not 0 <= self.secs <= U64_MAX:
            raise ValueError(f"secs out of range [0, {U64_MAX}]: {self.secs}")
        if not 0 <= self.nanos < NANOS_PER_SEC:
            raise ValueError(f"nanos out of range [0, {NANOS_PER_SEC}): {self.nanos}")

    # --- Factories ---

    @classmethod
    def from_nanos(cls, count: int) -> Duration:
        _check_u64(count)
        return cls(*divmod(count, NANOS_PER_SEC))

    @classmethod
    def from_micros(cls, count: int) -> Duration:
        _check_u64(count)
        secs, rem = divmod(count, 1_000_000)
        return cls(secs, rem * NANOS_PER_MICRO)

    @classmethod
    def from_millis(cls, count: int) -> Duration:
        _check_u64(count)
        secs, rem = divmod(count, 1_000)
        return cls(secs, rem * NANOS_PER_MILLI)

    @classmethod
    def from_secs(cls, count: int) -> Duration:
        _check_u64(count)
        return cls(count, 0)

    # --- Accessors ---

    def as_secs(self) -> int:
        return self.secs

    def subsec_nanos(self) -> int:
        return self.nanos

    def as_nanos(self) -> int:
        return self.secs * NANOS_PER_SEC + self.nanos

    def as_micros(self) -> int:
        return self.as_nanos() // NANOS_PER_MICRO

    def as_millis(self) -> int:
        return self.as_nanos() // NANOS_PER_MILLI

    def total_seconds(self) -> float:
        """Seconds as a float, for ``time.sleep`` and ``asyncio.sleep``."""
        return self.secs + self.nanos / NANOS_PER_SEC

    def to_timedelta(self) -> datetime.timedelta:
        """Convert to ``datetime.timedelta``, dropping sub-microsecond nanos.

        Raises:
            OverflowError: If the duration exceeds ``timedelta.max``.
        """
        return datetime.timedelta(
            seconds=self.secs, microseconds=self.nanos // NANOS_PER_MICRO
        )

    # --- Arithmetic ---

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        secs, nanos = divmod(self.as_nanos() + other.as_nanos(), NANOS_PER_SEC)
        if secs > U64_MAX:
            raise OverflowError("overflow when adding durations")
        return Duration(secs, nanos)

    def __bool__(self) -> bool:
        return bool(self.secs or self.nanos)

    def __repr__(self) -> str:
        return f"Duration(secs={self.secs}, nanos={self.nanos})"


Duration.ZERO = Duration()


def _check_u64(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"duration count must be int, got {type(count).__name__}")
    if not 0 <= count <= U64_MAX:
        raise ValueError(f"duration count out of u64 range: {count}")
