"""HTTP transport contract and default httpx implementation."""

from ..dto.transport_options import TransportOptions
from .transport import HeaderValue, HttpResponse, Transport
from .httpx_transport import HttpxTransport
from .multipart import encode_multipart

__all__ = [
    "HeaderValue",
    "HttpResponse",
    "Transport",
    "TransportOptions",
    "HttpxTransport",
    "encode_multipart",
]
