"""Structured exception classes for content negotiation."""

import json
from typing import Any, Dict, Optional


class NegotiatorError(Exception):
    """Base exception for all content negotiation errors.

    This exception serves as the parent class for every error raised by
    the parser, the registry and the marshal/unmarshal helpers, giving
    the enclosing HTTP layer one type to catch.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class InvalidMediaRangeError(NegotiatorError, ValueError):
    """Raised when an Accept value's media range has no ``/``.

    :param value: The offending Accept value
    """

    def __init__(self, value: str):
        """Initialize the error with the rejected value."""
        super().__init__(
            message="Invalid Accept Media Range",
            code="INVALID_MEDIA_RANGE",
            details={"value": value},
        )
        self.value = value


class InvalidAcceptParamError(NegotiatorError, ValueError):
    """Raised when an Accept parameter is not a ``key=value`` pair.

    :param param: The malformed parameter segment
    """

    def __init__(self, param: str):
        """Initialize the error with the malformed segment."""
        super().__init__(
            message="Invalid Accept Parameter",
            code="INVALID_ACCEPT_PARAM",
            details={"param": param},
        )
        self.param = param


class QualityParseError(NegotiatorError, ValueError):
    """Raised when the ``q`` parameter is not a number in [0, 1].

    For a non-numeric value the message is the numeric parser's own
    message, unchanged, and the original exception is attached as the cause.

    :param message: Message of the underlying numeric parse error
    :param value: The raw quality value
    """

    def __init__(self, message: str, value: str):
        """Initialize quality parse error with the parser's message."""
        super().__init__(
            message=message,
            code="QUALITY_PARSE_ERROR",
            details={"value": value},
        )
        self.value = value


class NoAcceptableContentTypeError(NegotiatorError):
    """Raised when no registered representation matches the request.

    Raised directly for an Accept header none of whose values is
    registered, and as :class:`UnsupportedMediaTypeError` for a
    Content-Type whose bare media type is not registered.

    :param header: The header that could not be matched
    """

    def __init__(self, header: Optional[str] = None):
        """Initialize the error with the unmatched header."""
        details = {}
        if header is not None:
            details["header"] = header
        super().__init__(
            message="No Acceptable Content Type",
            code="NO_ACCEPTABLE_CONTENT_TYPE",
            details=details,
        )


class UnsupportedMediaTypeError(NoAcceptableContentTypeError):
    """Raised when a request Content-Type is not registered.

    A :class:`NoAcceptableContentTypeError` for the request body rather than
    the response, so HTTP adapters can answer 415 instead of 406.

    :param header: The unregistered Content-Type header
    """

    def __init__(self, header: Optional[str] = None):
        super().__init__(header)
        self.code = "UNSUPPORTED_MEDIA_TYPE"


class NoContentTypeError(NegotiatorError):
    """Raised when a request body arrives without a Content-Type header."""

    def __init__(self):
        """Initialize the missing Content-Type error."""
        super().__init__(
            message="No Content-Type Header Provided", code="NO_CONTENT_TYPE"
        )


class MediaTypeError(NegotiatorError, ValueError):
    """Raised when a Content-Type header does not follow RFC 7231 grammar.

    :param message: Description of the grammar violation
    :param header: The header that failed to parse
    """

    def __init__(self, message: str, header: str):
        """Initialize media type error with message and header."""
        super().__init__(
            message=message, code="MEDIA_TYPE_ERROR", details={"header": header}
        )
        self.header = header


class RegistryFrozenError(NegotiatorError):
    """Raised when registering into a registry that has been frozen.

    :param media_range: Key the caller attempted to register
    """

    def __init__(self, media_range: str):
        """Initialize frozen registry error with the rejected key."""
        super().__init__(
            message=f"Registry is frozen; cannot register {media_range!r}",
            code="REGISTRY_FROZEN",
            details={"media_range": media_range},
        )
