"""Exception hierarchy for Eorzea time operations."""


class EorzeaTimeError(Exception):
    """Base exception for Eorzea time errors.

    Provides dual messaging: a user-facing message and internal
    details for logging.
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


class InvalidFormatError(EorzeaTimeError, ValueError):
    """Raised when a format string uses a calendar or timezone directive."""


ERR_MSG_INVALID_FORMAT = "Eorzea time has no calendar; date directives are not allowed"
ERR_MSG_UNFORMATTABLE = "format string could not be rendered"
