"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when order input is malformed or a requested transition is not allowed."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND")


class InconsistentStateError(AppError):
    """
    Raised when a valuation fold produces negative cash or a negative position.

    This signals a broken ledger, not a bad request.
    """

    def __init__(self, message: str):
        super().__init__(
            "Portfolio is in an inconsistent state according to platform rules. "
            f"{message} Please contact customer support to resolve this situation.",
            code="INCONSISTENT_STATE",
        )
