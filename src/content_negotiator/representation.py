"""Define the representation interface used by the registry.

A representation is an object that knows how to render a resource for a
negotiated Accept value and how to populate itself from a request body.
The registry stores representations as prototypes and hands out clones,
so implementations must be safe to copy.

Examples
--------
A JSON representation of a small resource::

    class Widget(Representation):
        def __init__(self, name=""):
            self.name = name

        def content_type(self, accept):
            return "application/json"

        def marshal(self, accept):
            return json.dumps({"name": self.name}).encode()

        def unmarshal(self, media_type, params, body):
            self.name = json.loads(body)["name"]
"""

import copy
from abc import ABC, abstractmethod
from typing import Dict

from .media import AcceptValue


class Representation(ABC):
    """Provide the contract every registered representation fulfils."""

    @abstractmethod
    def content_type(self, accept: AcceptValue) -> str:
        """Return the Content-Type to send for a negotiated Accept value.

        :param accept: The Accept value the representation was matched on.
        :return: Content-Type header value.
        """
        pass

    @abstractmethod
    def marshal(self, accept: AcceptValue) -> bytes:
        """Render the representation for the negotiated Accept value.

        :param accept: The Accept value the representation was matched on.
        :return: Encoded body.
        """
        pass

    @abstractmethod
    def unmarshal(self, media_type: str, params: Dict[str, str], body: bytes) -> None:
        """Populate the representation from a request body.

        :param media_type: Bare media type from the Content-Type header.
        :param params: Content-Type parameters.
        :param body: Raw request body.
        """
        pass

    def clone(self) -> "Representation":
        """Return an independent copy of this representation.

        The default is a deep copy. Override when a representation holds
        state that must be shared (or must not be copied).
        """
        return copy.deepcopy(self)
