"""Async JSON client for the remote action endpoint."""

from .client import RemoteCallClient, failure, CID_HEADER, INVALID_RESPONSE, UNKNOWN_ERROR

__all__ = [
    "RemoteCallClient",
    "failure",
    "CID_HEADER",
    "INVALID_RESPONSE",
    "UNKNOWN_ERROR",
]
