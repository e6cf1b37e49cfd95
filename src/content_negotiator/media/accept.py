"""Accept header value parsing.

This module implements the grammar of a single Accept header value as
described by RFC 7231 section 5.3.2, with structured syntax suffixes from
RFC 6839. A value is a media range followed by optional parameters; the
first ``q`` parameter carries the quality and splits the parameters into
accept-params (before it) and accept-extensions (after it).

When no quality is given, a default is derived from the shape of the
value rather than the flat 1.0 of the RFC:

- any accept-params present (``text/html;level=1``): 1.0
- a concrete subtype (``text/html``): 0.9
- a wildcard subtype (``text/*``): 0.8
- a full wildcard (``*/*``): 0.7
"""

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import core_schema

from ..exceptions import InvalidAcceptParamError, InvalidMediaRangeError, QualityParseError

# Default quality of a media range with accept-params (e.g. text/html;level=1)
ACCEPT_PARAMS_QUALITY = 1.0

# Default quality of a media range with type and subtype (e.g. text/html)
MEDIA_RANGE_SUBTYPE_QUALITY = 0.9

# Default quality of a media range with a wildcard subtype (e.g. text/*)
MEDIA_RANGE_WILDCARD_SUBTYPE_QUALITY = 0.8

# Default quality of a fully wildcarded media range (*/*)
MEDIA_RANGE_WILDCARD_QUALITY = 0.7

WILDCARD = "*"

QUALITY_PARAM = "q"


class MediaRange(str):
    """A ``type/subtype[+suffix]`` token from an Accept header.

    The accessors never raise; a token without ``/`` yields empty strings
    for all three parts and is rejected by :func:`parse_accept` instead.
    """

    __slots__ = ()

    def _subtype_window(self) -> str:
        slash = self.find("/")
        if slash == -1:
            return ""
        semi = self.find(";")
        if semi == -1:
            return self[slash + 1 :]
        if semi < slash:
            return ""
        return self[slash + 1 : semi]

    @property
    def type(self) -> str:
        """Top-level type, e.g. ``application`` for ``application/json``."""
        slash = self.find("/")
        if slash == -1:
            return ""
        return self[:slash]

    @property
    def subtype(self) -> str:
        """Subtype including any suffix, e.g. ``resource+json``."""
        return self._subtype_window()

    @property
    def suffix(self) -> str:
        """RFC 6839 structured syntax suffix, e.g. ``json``, or ``""``."""
        window = self._subtype_window()
        tail = window.rsplit("/", 1)[-1]
        plus = tail.rfind("+")
        if plus == -1:
            return ""
        return tail[plus + 1 :]

    @property
    def is_wildcard(self) -> bool:
        return self.type == WILDCARD or self.subtype == WILDCARD

    def __repr__(self) -> str:
        return f"MediaRange({str.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any):
        return core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema()
        )


class AcceptValue(BaseModel):
    """One parsed entry of an Accept header.

    :param media_range: The ``type/subtype`` token
    :type media_range: MediaRange
    :param params: Parameters preceding the ``q`` parameter
    :type params: Dict[str, str]
    :param quality: Explicit or defaulted quality
    :type quality: float
    :param extensions: Parameters following the ``q`` parameter
    :type extensions: Dict[str, str]
    """

    model_config = ConfigDict(frozen=True)

    media_range: MediaRange
    params: Dict[str, str] = Field(default_factory=dict)
    quality: float
    extensions: Dict[str, str] = Field(default_factory=dict)

    @property
    def type(self) -> str:
        return self.media_range.type

    @property
    def subtype(self) -> str:
        return self.media_range.subtype

    @property
    def suffix(self) -> str:
        return self.media_range.suffix

    def __str__(self) -> str:
        parts = [str(self.media_range)]
        parts.extend(f"{k}={v}" for k, v in self.params.items())
        parts.append(f"{QUALITY_PARAM}={self.quality:g}")
        parts.extend(f"{k}={v}" for k, v in self.extensions.items())
        return ";".join(parts)


def default_quality(media_range: MediaRange, params: Dict[str, str]) -> float:
    """Compute the quality of a value that carried no ``q`` parameter.

    :param media_range: Parsed media range
    :type media_range: MediaRange
    :param params: Accept-params of the value
    :type params: Dict[str, str]
    :return: The default quality
    :rtype: float
    """
    if params:
        return ACCEPT_PARAMS_QUALITY
    if media_range.subtype != WILDCARD:
        return MEDIA_RANGE_SUBTYPE_QUALITY
    if media_range.type != WILDCARD:
        return MEDIA_RANGE_WILDCARD_SUBTYPE_QUALITY
    return MEDIA_RANGE_WILDCARD_QUALITY


def _parse_quality(value: str) -> float:
    # float() also takes "1_0" and " 0.5"; neither is a qvalue
    if "_" in value or value != value.strip():
        raise QualityParseError(f"could not convert string to float: {value!r}", value)
    try:
        quality = float(value)
    except ValueError as e:
        raise QualityParseError(str(e), value) from e
    if not math.isfinite(quality) or not 0.0 <= quality <= 1.0:
        raise QualityParseError(f"quality {value!r} is not in the range [0, 1]", value)
    return quality


def parse_accept(value: str) -> AcceptValue:
    """Parse a single Accept header value.

    :param value: One comma-free Accept value, e.g. ``text/html;q=0.8``
    :type value: str
    :return: The parsed value with a finalized quality
    :rtype: AcceptValue
    :raises InvalidMediaRangeError: If the value has no ``/``
    :raises InvalidAcceptParamError: If a parameter is not ``key=value``
    :raises QualityParseError: If the ``q`` parameter is not a number in [0, 1]
    """
    value = value.strip()
    media, sep, tail = value.partition(";")
    # a "/" inside the parameters does not make a media range
    if "/" not in media:
        raise InvalidMediaRangeError(value)
    media_range = MediaRange(media.rstrip())

    params: Dict[str, str] = {}
    extensions: Dict[str, str] = {}
    quality: Optional[float] = None

    if sep:
        for segment in tail.split(";"):
            key_val = segment.strip().split("=")
            if len(key_val) != 2:
                raise InvalidAcceptParamError(segment)
            key, val = key_val
            if key == QUALITY_PARAM and quality is None:
                quality = _parse_quality(val)
            elif quality is not None:
                extensions[key] = val
            else:
                params[key] = val

    if quality is None:
        quality = default_quality(media_range, params)

    return AcceptValue(
        media_range=media_range,
        params=params,
        quality=quality,
        extensions=extensions,
    )


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
]
