"""Exception hierarchy for integer-to-duration conversion."""


class ConversionError(Exception):
    """Base exception for integer-to-duration conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging. ``number`` holds the offending input.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        number: int | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.number = number

    def internal(self) -> str:
        return self.internal_details


class NegativeValueError(ConversionError):
    """Raised when a signed input holds a value below zero."""

    def __init__(self, number: int, kind: str = "i128") -> None:
        super().__init__(
            f"{ERR_MSG_NEGATIVE_VALUE}: {number}",
            f"negative {kind} value {number} cannot be a time duration",
            number,
        )


class OverflowValueError(ConversionError):
    """Raised when an input exceeds the largest count a duration accepts."""

    def __init__(self, number: int, kind: str = "u128") -> None:
        super().__init__(
            f"{ERR_MSG_OVERFLOW}: {number}",
            f"{kind} value {number} exceeds u64 maximum {2**64 - 1}",
            number,
        )


# Sanitized user-facing error message constants
ERR_MSG_NEGATIVE_VALUE = "Could not convert negative number to time duration"
ERR_MSG_OVERFLOW = "Could not convert 128-bit to 64-bit number (overflow error)"
