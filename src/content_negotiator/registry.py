"""Manage the mapping of media ranges to representations.

The registry is filled once at startup and consulted on every request.
Keys are matched literally: ``*/*`` is an ordinary key that only matches
an Accept value whose media range is exactly ``*/*``; it is not a
catch-all pattern.

Registration is expected to complete before concurrent negotiation
starts. :meth:`Registry.freeze` turns that expectation into a contract:
once frozen the registry rejects registrations, and readers need no
lock.

Examples
--------
.. code-block:: python

   from content_negotiator import Registry

   registry = Registry()
   registry.register("application/json", JSONWidget())
   registry.register("*/*", JSONWidget())
   registry.freeze()

   representation, accept = registry.negotiate("text/html,*/*;q=0.8")
"""

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from .config import Settings, settings as default_settings
from .exceptions import (
    NoAcceptableContentTypeError,
    RegistryFrozenError,
    UnsupportedMediaTypeError,
)
from .media import AcceptValue, parse_header, parse_media_type
from .representation import Representation

logger = logging.getLogger(__name__)


class Registry:
    """Registry of representation prototypes keyed by media range.

    The registry owns clones of what callers register and returns a fresh
    clone from every lookup, so neither side can mutate the other's copy.
    """

    def __init__(self) -> None:
        self._prototypes: Dict[str, Representation] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, media_range: str, prototype: Representation) -> None:
        """Register a representation prototype under an exact media range.

        A clone of ``prototype`` is stored; later changes to the caller's
        object are not seen by the registry. Registering an existing key
        replaces its prototype.

        :param media_range: Exact key, e.g. ``application/json`` or ``*/*``.
        :param prototype: Representation to clone for matching requests.
        :raises RegistryFrozenError: If the registry has been frozen.
        """
        if self._frozen:
            raise RegistryFrozenError(media_range)

        self._prototypes[media_range] = prototype.clone()
        logger.debug(
            "Registered representation: %s -> %s",
            media_range,
            type(prototype).__name__,
        )

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True
        logger.debug("Registry frozen with %d media ranges", len(self._prototypes))

    def negotiate(self, header: str) -> Tuple[Representation, AcceptValue]:
        """Negotiate a representation for an Accept header.

        Values are tried in rank order; the first whose media range is a
        registered key wins.

        :param header: Raw Accept header.
        :return: Tuple of (cloned representation, matched Accept value).
        :raises NoAcceptableContentTypeError: If no value is registered.
        :raises InvalidMediaRangeError: If the header fails to parse.
        :raises InvalidAcceptParamError: If the header fails to parse.
        :raises QualityParseError: If the header fails to parse.
        """
        for accept in parse_header(header):
            prototype = self._prototypes.get(accept.media_range)
            if prototype is not None:
                logger.debug(
                    "Negotiated %s (q=%s) for Accept %r",
                    accept.media_range,
                    accept.quality,
                    header,
                )
                return prototype.clone(), accept
        raise NoAcceptableContentTypeError(header)

    def resolve_content_type(
        self, header: str
    ) -> Tuple[Representation, Dict[str, str]]:
        """Find the representation registered for a Content-Type header.

        :param header: Raw Content-Type header.
        :return: Tuple of (cloned representation, Content-Type parameters).
        :raises UnsupportedMediaTypeError: If the media type is not registered.
            It is a :class:`NoAcceptableContentTypeError`.
        :raises MediaTypeError: If the header is malformed.
        """
        media_type, params = parse_media_type(header)
        prototype = self._prototypes.get(media_type)
        if prototype is None:
            raise UnsupportedMediaTypeError(header)
        return prototype.clone(), params

    def media_ranges(self) -> List[str]:
        """List registered keys in registration order."""
        return list(self._prototypes)

    def __contains__(self, media_range: object) -> bool:
        return media_range in self._prototypes

    def __len__(self) -> int:
        return len(self._prototypes)


def build_registry(
    entries: Mapping[str, Representation], settings: Optional[Settings] = None
) -> Registry:
    """Build a registry from a mapping of media ranges to prototypes.

    The registry is frozen afterwards when ``settings.freeze_registry`` is
    set (the default).

    :param entries: Media range to prototype mapping, registered in order.
    :param settings: Settings to use instead of the global instance.
    :return: The populated registry.
    """
    settings = settings or default_settings
    registry = Registry()
    for media_range, prototype in entries.items():
        registry.register(media_range, prototype)
    if settings.freeze_registry:
        registry.freeze()
    return registry


__all__ = ["Registry", "build_registry"]
