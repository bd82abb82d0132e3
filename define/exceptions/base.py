"""Base exception classes for Define."""


class DefineException(Exception):
    """Base exception for all Define errors.

    All custom exceptions in the define package should inherit
    from this base class for consistent error handling.
    """

    pass
