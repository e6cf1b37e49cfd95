"""HTTP content negotiation package.

This package parses Accept headers into ranked preferences and matches
them against a registry of representations. It also parses Content-Type
headers for request bodies and provides marshal/unmarshal helpers plus
an httpx adapter for services that use it.

:var __version__: Current package version
:type __version__: str
"""

from .content import marshal_for, unmarshal_from
from .exceptions import (
    InvalidAcceptParamError,
    InvalidMediaRangeError,
    MediaTypeError,
    NegotiatorError,
    NoAcceptableContentTypeError,
    NoContentTypeError,
    QualityParseError,
    RegistryFrozenError,
    UnsupportedMediaTypeError,
)
from .media import (
    AcceptHeader,
    AcceptValue,
    MediaRange,
    parse_accept,
    parse_header,
    parse_media_type,
)
from .registry import Registry, build_registry
from .representation import Representation

__version__ = "0.1.0"

__all__ = [
    "AcceptHeader",
    "AcceptValue",
    "MediaRange",
    "parse_accept",
    "parse_header",
    "parse_media_type",
    "Registry",
    "build_registry",
    "Representation",
    "marshal_for",
    "unmarshal_from",
    "NegotiatorError",
    "InvalidMediaRangeError",
    "InvalidAcceptParamError",
    "QualityParseError",
    "NoAcceptableContentTypeError",
    "NoContentTypeError",
    "MediaTypeError",
    "RegistryFrozenError",
    "UnsupportedMediaTypeError",
]
