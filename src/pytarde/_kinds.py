"""Integer representations accepted as conversion input."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any

from pytarde._constants import U64_MAX


@dataclass(frozen=True)
class IntKind:
    """A fixed-width integer representation such as ``u8`` or ``i128``."""

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def can_overflow(self) -> bool:
        """Whether a value of this kind may exceed the ``u64`` duration range."""
        return self.max > U64_MAX

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def __str__(self) -> str:
        return self.name


WIDTHS = (8, 16, 32, 64, 128)

KINDS: dict[str, IntKind] = {
    f"{prefix}{bits}": IntKind(f"{prefix}{bits}", bits, prefix == "i")
    for prefix in ("u", "i")
    for bits in WIDTHS
}

U8, U16, U32, U64, U128 = (KINDS[f"u{b}"] for b in WIDTHS)
I8, I16, I32, I64, I128 = (KINDS[f"i{b}"] for b in WIDTHS)


def get_kind(kind: IntKind | str) -> IntKind:
    """Look up a kind by name, passing ``IntKind`` instances through."""
    if isinstance(kind, IntKind):
        return kind
    try:
        return KINDS[kind.lower()]
    except (KeyError, AttributeError):
        raise ValueError(
            f"unknown integer kind {kind!r}, expected one of {', '.join(KINDS)}"
        ) from None


def _dtype_kind(value: Any) -> IntKind | None:
    """Infer the kind of a NumPy-style integer scalar from its ``dtype``."""
    dtype = getattr(value, "dtype", None)
    if dtype is None or getattr(dtype, "kind", None) not in ("i", "u"):
        return None
    return get_kind(f"{dtype.kind}{dtype.itemsize * 8}")


def coerce(
    value: Any, kind: IntKind | str | None = None
) -> tuple[int, IntKind | None]:
    """Normalize ``value`` to a Python ``int`` and the kind it is read as.

    A plain ``int`` with no explicit kind is unbounded and comes back with
    kind ``None``; the range checks in the converter still apply to it.

    Raises:
        TypeError: If ``value`` is not an integer (``bool`` included).
        ValueError: If ``value`` does not fit the requested kind.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a duration count")

    inferred = _dtype_kind(value)
    if inferred is None and not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")

    number = operator.index(value)
    resolved = get_kind(kind) if kind is not None else inferred
    if resolved is not None and not resolved.contains(number):
        raise ValueError(
            f"{number} is out of range for {resolved} [{resolved.min}, {resolved.max}]"
        )
    return number, resolved
