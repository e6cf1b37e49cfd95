"""Media type parsing public API (re-exports)."""

from .accept import (
    ACCEPT_PARAMS_QUALITY,
    MEDIA_RANGE_SUBTYPE_QUALITY,
    MEDIA_RANGE_WILDCARD_QUALITY,
    MEDIA_RANGE_WILDCARD_SUBTYPE_QUALITY,
    WILDCARD,
    AcceptValue,
    MediaRange,
    default_quality,
    parse_accept,
)
from .header import AcceptHeader, parse_header
from .mime import parse_media_type

__all__ = [
    "ACCEPT_PARAMS_QUALITY",
    "MEDIA_RANGE_SUBTYPE_QUALITY",
    "MEDIA_RANGE_WILDCARD_SUBTYPE_QUALITY",
    "MEDIA_RANGE_WILDCARD_QUALITY",
    "WILDCARD",
    "MediaRange",
    "AcceptValue",
    "default_quality",
    "parse_accept",
    "AcceptHeader",
    "parse_header",
    "parse_media_type",
]
