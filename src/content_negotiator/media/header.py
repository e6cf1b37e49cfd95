"""Accept header parsing and ranking."""

from operator import attrgetter

from .accept import AcceptValue, MediaRange, parse_accept

_by_quality = attrgetter("quality")


class AcceptHeader(list[AcceptValue]):
    """The values of an Accept header, most preferred first once ranked.

    Ranking orders values by descending quality only. Values of equal
    quality keep the order in which the client listed them; specificity
    is not used as a tie-breaker, so ``*/*;q=0.9`` ranks ahead of
    ``text/html;q=0.8``.
    """

    def rank(self) -> "AcceptHeader":
        """Stable-sort the values in place by descending quality.

        :return: This header, for chaining
        :rtype: AcceptHeader
        """
        # list.sort is stable and reverse=True keeps ties in original order
        self.sort(key=_by_quality, reverse=True)
        return self

    def media_ranges(self) -> list[MediaRange]:
        return [value.media_range for value in self]


def parse_header(header: str) -> AcceptHeader:
    """Parse and rank a full Accept header.

    Every comma-separated value is parsed with
    :func:`~content_negotiator.media.accept.parse_accept`. The first value
    that fails aborts the whole header; callers never see a partial result.

    :param header: Raw Accept header, e.g. ``text/html,*/*;q=0.8``
    :type header: str
    :return: Values ranked by descending quality
    :rtype: AcceptHeader
    :raises InvalidMediaRangeError: If a value has no ``/``
    :raises InvalidAcceptParamError: If a parameter is malformed
    :raises QualityParseError: If a ``q`` value is not a number in [0, 1]
    """
    accepts = AcceptHeader(parse_accept(value.strip()) for value in header.split(","))
    return accepts.rank()


__all__ = ["AcceptHeader", "parse_header"]
