"""Map handler results to JSON responses."""
import logging
from dataclasses import asdict, is_dataclass
from typing import Any

from fastapi.responses import JSONResponse

from albumstore.models.response import ErrorResponse, Result, err_render

logger = logging.getLogger(__name__)


def _to_jsonable(payload: Any) -> Any:
    if is_dataclass(payload) and not isinstance(payload, type):
        return asdict(payload)
    if isinstance(payload, (list, tuple)):
        return [_to_jsonable(p) for p in payload]
    return payload


def error_body(err: ErrorResponse, style: str) -> dict:
    """Error payload in the configured style; empty optional fields are omitted."""
    if style == "adhoc":
        return {
            "code": err.http_status,
            "success": False,
            "err": err.error_text or err.status_text,
        }
    body: dict = {"status": err.status_text}
    if err.app_code:
        body["code"] = err.app_code
    if err.error_text:
        body["error"] = err.error_text
    return body


def render(result: Result, style: str) -> JSONResponse:
    """Serialize result; a payload that cannot be encoded becomes a 422."""
    if isinstance(result, ErrorResponse):
        if result.err is not None:
            logger.info("%s %s: %s", result.http_status, result.status_text, result.err)
        return JSONResponse(error_body(result, style), status_code=result.http_status)
    try:
        return JSONResponse(_to_jsonable(result.payload), status_code=result.status)
    except (TypeError, ValueError) as e:
        logger.warning("Rendering response failed: %s", e)
        return render(err_render(e), style)
