"""Read, normalize and format RSS and Atom feeds through one object model."""

from feedio.client import Client, ClientResponse, RequestsClient
from feedio.models import Element, Feed, Item, Node
from feedio.reader import NoAccurateParserError, Reader, Result
from feedio.service import FeedIo
from feedio.standards import NotFoundError, StandardRegistry

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ClientResponse",
    "Element",
    "Feed",
    "FeedIo",
    "Item",
    "NoAccurateParserError",
    "Node",
    "NotFoundError",
    "Reader",
    "RequestsClient",
    "Result",
    "StandardRegistry",
    "__version__",
]
