"""The integer-to-duration conversion routine.

Every public conversion funnels through :func:`convert`. The unit only
selects which ``Duration`` factory is called; sign and range policy are
shared by all units and all integer kinds.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any

from pytarde._constants import U64_MAX
from pytarde._errors import ConversionError, NegativeValueError, OverflowValueError
from pytarde._kinds import IntKind, coerce
from pytarde.duration import Duration


class Unit(enum.StrEnum):
    NANOSECONDS = "ns"
    MICROSECONDS = "us"
    MILLISECONDS = "ms"
    SECONDS = "s"


_FACTORIES: dict[Unit, Callable[[int], Duration]] = {
    Unit.NANOSECONDS: Duration.from_nanos,
    Unit.MICROSECONDS: Duration.from_micros,
    Unit.MILLISECONDS: Duration.from_millis,
    Unit.SECONDS: Duration.from_secs,
}


def convert(
    value: Any, unit: Unit | str, *, kind: IntKind | str | None = None
) -> Duration:
    """Convert an integer count of ``unit`` into a :class:`Duration`.

    Args:
        value: An ``int`` or NumPy-style integer scalar.
        unit: Target unit, a :class:`Unit` or one of ``"ns"``, ``"us"``,
            ``"ms"``, ``"s"``.
        kind: Integer representation to read ``value`` as, e.g. ``"u8"``.
            Inferred from ``value.dtype`` when omitted; a plain ``int`` is
            unbounded.

    Returns:
        A duration of exactly ``value`` units.

    Raises:
        NegativeValueError: If ``value`` is below zero.
        OverflowValueError: If ``value`` exceeds ``2**64 - 1``.
        TypeError: If ``value`` is not an integer.
        ValueError: If ``value`` does not fit ``kind`` or ``unit`` is unknown.
    """
    factory = _FACTORIES[Unit(unit)]
    number, resolved = coerce(value, kind)

    if number < 0:
        raise NegativeValueError(number, str(resolved or "int"))
    # Unreachable for kinds narrower than u128.
    if number > U64_MAX:
        raise OverflowValueError(number, str(resolved or "int"))

    return factory(number)


def try_convert(
    value: Any, unit: Unit | str, *, kind: IntKind | str | None = None
) -> Duration | ConversionError:
    """Like :func:`convert`, but return the conversion error instead of raising it.

    Caller errors (``TypeError``, ``ValueError``) still raise.
    """
    try:
        return convert(value, unit, kind=kind)
    except ConversionError as e:
        return e


def to_nanoseconds(value: Any, *, kind: IntKind | str | None = None) -> Duration:
    return convert(value, Unit.NANOSECONDS, kind=kind)


def to_microseconds(value: Any, *, kind: IntKind | str | None = None) -> Duration:
    return convert(value, Unit.MICROSECONDS, kind=kind)


def to_milliseconds(value: Any, *, kind: IntKind | str | None = None) -> Duration:
    return convert(value, Unit.MILLISECONDS, kind=kind)


def to_seconds(value: Any, *, kind: IntKind | str | None = None) -> Duration:
    return convert(value, Unit.SECONDS, kind=kind)
