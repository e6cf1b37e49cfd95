"""Drive content negotiation from httpx requests and responses.

The parsing core never looks at a request object; this module is the
glue for services that model their traffic with :class:`httpx.Request`
and :class:`httpx.Response`. It also owns the error to status code
mapping, which the core leaves to the HTTP layer.

Recommended flow::

    representation, accept = negotiate_request(registry, request)
    representation.name = widget.name     # fill the clone with resource data
    response = render_response(representation, accept, request=request)
"""

import io
import logging
from typing import Optional, Tuple

import httpx

from .config import Settings, settings as default_settings
from .content import CONTENT_TYPE_HEADER, marshal_for, unmarshal_from
from .exceptions import (
    InvalidAcceptParamError,
    InvalidMediaRangeError,
    MediaTypeError,
    NegotiatorError,
    NoAcceptableContentTypeError,
    NoContentTypeError,
    QualityParseError,
    UnsupportedMediaTypeError,
)
from .media import AcceptValue
from .registry import Registry
from .representation import Representation

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "Accept"

_ERROR_STATUS = (
    # checked in order; the 415 subclass must precede its 406 base
    (UnsupportedMediaTypeError, 415),
    (NoAcceptableContentTypeError, 406),
    (NoContentTypeError, 400),
    (InvalidMediaRangeError, 400),
    (InvalidAcceptParamError, 400),
    (QualityParseError, 400),
    (MediaTypeError, 400),
)


class _RequestBody:
    """Defer reading an httpx request body until the unmarshal step."""

    def __init__(self, request: httpx.Request):
        self._request = request

    def read(self) -> bytes:
        return self._request.read()


def negotiate_request(
    registry: Registry,
    request: httpx.Request,
    settings: Optional[Settings] = None,
) -> Tuple[Representation, AcceptValue]:
    """Negotiate a representation for a request's Accept header.

    A request without an Accept header is negotiated as if it sent
    ``settings.default_accept``.

    :param registry: Registry to negotiate against
    :type registry: Registry
    :param request: Incoming request
    :type request: httpx.Request
    :param settings: Settings to use instead of the global instance
    :type settings: Optional[Settings]
    :return: Tuple of (cloned representation, matched Accept value)
    :rtype: Tuple[Representation, AcceptValue]
    """
    settings = settings or default_settings
    header = request.headers.get(ACCEPT_HEADER)
    if not header:
        logger.debug("No Accept header on %s %s, using %r",
                     request.method, request.url, settings.default_accept)
        header = settings.default_accept
    return registry.negotiate(header)


def render_response(
    representation: Representation,
    accept: AcceptValue,
    status_code: int = 200,
    request: Optional[httpx.Request] = None,
) -> httpx.Response:
    """Marshal a representation into an httpx response.

    :param representation: Representation to render
    :type representation: Representation
    :param accept: Accept value it was negotiated for
    :type accept: AcceptValue
    :param status_code: Response status code
    :type status_code: int
    :param request: Request to attach to the response
    :type request: Optional[httpx.Request]
    :return: Response carrying the rendered body and its Content-Type
    :rtype: httpx.Response
    """
    buffer = io.BytesIO()
    marshal_for(buffer, representation, accept)
    return httpx.Response(
        status_code,
        headers={CONTENT_TYPE_HEADER: representation.content_type(accept)},
        content=buffer.getvalue(),
        request=request,
    )


def unmarshal_request(request: httpx.Request, representation: Representation) -> None:
    """Decode a request body into a representation.

    :param request: Incoming request
    :type request: httpx.Request
    :param representation: Representation to populate
    :type representation: Representation
    :raises NoContentTypeError: If the request has no Content-Type header
    :raises MediaTypeError: If the Content-Type header is malformed
    """
    unmarshal_from(
        request.headers.get(CONTENT_TYPE_HEADER),
        _RequestBody(request),
        representation,
    )


def status_for_error(exc: BaseException) -> int:
    """Map a negotiation error to an HTTP status code.

    :param exc: Exception raised while negotiating or unmarshalling
    :type exc: BaseException
    :return: 406, 415 or 400 for negotiation errors, 500 otherwise
    :rtype: int
    """
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 500


def error_response(
    exc: NegotiatorError, request: Optional[httpx.Request] = None
) -> httpx.Response:
    """Build a JSON error response for a negotiation error.

    :param exc: The error to report
    :type exc: NegotiatorError
    :param request: Request to attach to the response
    :type request: Optional[httpx.Request]
    :return: Response with the error's ``to_dict`` payload
    :rtype: httpx.Response
    """
    return httpx.Response(
        status_for_error(exc), json=exc.to_dict(), request=request
    )


__all__ = [
    "ACCEPT_HEADER",
    "negotiate_request",
    "render_response",
    "unmarshal_request",
    "status_for_error",
    "error_response",
]
