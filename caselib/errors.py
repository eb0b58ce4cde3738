from enum import Enum


class InvalidInputCause(Enum):
    NULL = "null"
    WRONG_TYPE = "wrong_type"
    EMPTY = "empty"


class InvalidInput(ValueError):
    """Raised when a converter is given something other than a non-blank string."""

    def __init__(self, message: str, cause: InvalidInputCause):
        super().__init__(message)
        self.cause = cause

    @classmethod
    def null(cls):
        return cls("Invalid input: received null", InvalidInputCause.NULL)

    @classmethod
    def wrongType(cls, value):
        return cls(
            f"Invalid input: expected string, received {type(value).__name__}",
            InvalidInputCause.WRONG_TYPE,
        )

    @classmethod
    def empty(cls):
        return cls("Invalid input: received empty string", InvalidInputCause.EMPTY)
