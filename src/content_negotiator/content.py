"""Marshal and unmarshal helpers around a representation.

These helpers are transport-agnostic: the writer is any binary stream with
``write`` and the body reader any binary stream with ``read``. Errors from
the representation, the writer and the reader propagate unchanged; nothing
is retried.
"""

from typing import BinaryIO, Optional

from .exceptions import NoContentTypeError
from .media import AcceptValue, parse_media_type
from .representation import Representation

CONTENT_TYPE_HEADER = "Content-Type"


def marshal_for(writer: BinaryIO, representation: Representation, accept: AcceptValue) -> None:
    """Render a representation for an Accept value and write it out.

    Short writes are continued until every byte is written.

    :param writer: Binary stream to write to
    :type writer: BinaryIO
    :param representation: Negotiated representation
    :type representation: Representation
    :param accept: Accept value the representation was negotiated for
    :type accept: AcceptValue
    :raises OSError: If the writer accepts no bytes
    """
    data = memoryview(representation.marshal(accept))
    while data:
        written = writer.write(data)
        # writers that report no count are taken to have written everything
        if written is None:
            break
        if written == 0:
            raise OSError("short write")
        data = data[written:]


def unmarshal_from(
    content_type: Optional[str], body: BinaryIO, representation: Representation
) -> None:
    """Decode a request body into a representation.

    :param content_type: Raw Content-Type header of the request
    :type content_type: Optional[str]
    :param body: Request body stream, read to the end
    :type body: BinaryIO
    :param representation: Representation to populate
    :type representation: Representation
    :raises NoContentTypeError: If the Content-Type header is missing or empty
    :raises MediaTypeError: If the Content-Type header is malformed
    """
    if not content_type:
        raise NoContentTypeError()

    media_type, params = parse_media_type(content_type)
    data = body.read()
    representation.unmarshal(media_type, params, data)


__all__ = ["CONTENT_TYPE_HEADER", "marshal_for", "unmarshal_from"]
