"""Exception hierarchy for pypgdesc."""


class PgDescError(Exception):
    """Base exception for pypgdesc.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
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


class InvalidArgumentsError(PgDescError):
    """Raised when a caller passes unusable arguments (never for a pattern)."""


# Sanitized user-facing error message constants
ERR_MSG_MISSING_NAME_VAR = "name variable is required"
ERR_MSG_INVALID_SINK = "output sink must provide write()"
