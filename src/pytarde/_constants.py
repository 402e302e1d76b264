"""Range limits and unit scale constants."""

U64_MAX = 2**64 - 1
"""Largest count any ``Duration.from_*`` factory accepts."""

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SEC = 1_000_000_000
