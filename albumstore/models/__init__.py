"""Data models for albums and handler results."""
from albumstore.models.album import Album, AlbumRequest, MissingAlbumFields
from albumstore.models.response import ErrorResponse, RequestAborted, Result, Success

__all__ = [
    "Album",
    "AlbumRequest",
    "MissingAlbumFields",
    "ErrorResponse",
    "RequestAborted",
    "Result",
    "Success",
]
