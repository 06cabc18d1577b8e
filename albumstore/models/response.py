"""Tagged handler results: Success or ErrorResponse."""
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass
class Success:
    payload: Any
    status: int = 200


@dataclass
class ErrorResponse:
    """Error reply. err is the low-level cause and is never serialized."""
    http_status: int
    status_text: str
    app_code: Optional[int] = None
    error_text: Optional[str] = None
    err: Optional[BaseException] = None


Result = Union[Success, ErrorResponse]


class RequestAborted(Exception):
    """Raised to stop a request early with a ready ErrorResponse."""

    def __init__(self, response: ErrorResponse) -> None:
        super().__init__(response.status_text)
        self.response = response


def err_not_found() -> ErrorResponse:
    return ErrorResponse(http_status=404, status_text="Resource not found.")


def err_invalid_request(err: BaseException) -> ErrorResponse:
    return ErrorResponse(
        http_status=400,
        status_text="Invalid request.",
        error_text=str(err),
        err=err,
    )


def err_render(err: BaseException) -> ErrorResponse:
    return ErrorResponse(
        http_status=422,
        status_text="Error rendering response.",
        error_text=str(err),
        err=err,
    )
