"""Dictionary source exceptions."""

from .base import DefineException


class EmptyResultError(DefineException):
    """Raised when a source returns no usable content for a word."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"no results found for {word!r}")


class SourceRequestError(DefineException):
    """Raised when the HTTP request to a source fails."""

    pass


class ResponseDecodeError(DefineException):
    """Raised when a source response body cannot be decoded."""

    pass


class InvalidResponseError(DefineException):
    """Raised when a source response fails the sanity checks."""

    pass


class UnexpectedStatusError(InvalidResponseError):
    """Raised when a response has a status code we don't accept."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"unexpected response status code {status_code}")


class UnexpectedContentTypeError(InvalidResponseError):
    """Raised when a response has a content type we don't accept."""

    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(f"unexpected response content type {content_type!r}")
