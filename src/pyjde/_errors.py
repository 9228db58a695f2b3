"""Exception hierarchy for JDE date/time conversion."""


class JdeConversionError(Exception):
    """Base exception for JDE date/time conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details (offending values) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidDateTimeError(JdeConversionError, ValueError):
    """Raised when decoded fields do not form a valid calendar date-time."""


class InvalidArgumentsError(JdeConversionError, TypeError):
    """Raised when an argument has the wrong type."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_JDE_DATE = "invalid JDE date"
ERR_MSG_INVALID_JDE_TIME = "invalid JDE time"
ERR_MSG_INVALID_DAY_OF_YEAR = "day of year out of range"
ERR_MSG_INVALID_YEAR = "year out of range"
ERR_MSG_INVALID_TIME_FIELDS = "time of day out of range"
ERR_MSG_INVALID_ARGUMENTS = "invalid function arguments"
