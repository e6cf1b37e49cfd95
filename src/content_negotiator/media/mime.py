"""Content-Type header parsing.

Splitting the header is left to :mod:`mimeparse`; this module narrows its
result to the ``media-type`` production of RFC 7231 section 3.1.1.1::

    media-type = type "/" subtype *( OWS ";" OWS parameter )

The type and subtype must both be RFC 7230 tokens. Parameters follow
``mimeparse``: names are lowercased, quoted values are unquoted, segments
without ``=`` are skipped and a repeated name keeps its last value.
"""

import re
from typing import Dict, Tuple

import mimeparse

from ..exceptions import MediaTypeError

# RFC 7230 section 3.2.6 tchar
_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def parse_media_type(header: str) -> Tuple[str, Dict[str, str]]:
    """Split a Content-Type header into its bare media type and parameters.

    :param header: Raw Content-Type header, e.g. ``text/html; charset=utf-8``
    :type header: str
    :return: Tuple of (lowercased media_type, params)
    :rtype: Tuple[str, Dict[str, str]]
    :raises MediaTypeError: If the header has no ``type/subtype`` of tokens
    """
    if not header or not header.strip():
        raise MediaTypeError("mime: no media type", header or "")

    try:
        type_, subtype, params = mimeparse.parse_mime_type(header)
    except mimeparse.MimeTypeParseException as e:
        raise MediaTypeError(str(e), header) from e

    if not _TOKEN_RE.fullmatch(type_):
        raise MediaTypeError("mime: expected token before slash", header)
    if not _TOKEN_RE.fullmatch(subtype):
        raise MediaTypeError("mime: expected token after slash", header)

    return f"{type_}/{subtype}".lower(), dict(params)


__all__ = ["parse_media_type"]
