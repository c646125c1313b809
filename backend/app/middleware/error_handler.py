from fastapi import Request
from fastapi.responses import JSONResponse
import traceback
import logging
from typing import Dict, Any, Optional

from app.config import ALLOWED_ORIGINS, DEBUG
from services.error_types import ValidationError, log_error_with_context


def create_error_response(error_type: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Create structured error response"""
    error: Dict[str, Any] = {
        "type": error_type,
        "message": message
    }
    if details:
        error["details"] = details
    return {"error": error}


def _add_cors_headers(request: Request, response: JSONResponse) -> JSONResponse:
    origin = request.headers.get("origin")
    if origin in ALLOWED_ORIGINS:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = "*"
        response.headers["Access-Control-Allow-Headers"] = "*"
    return response


async def validation_exception_handler(request: Request, exc: ValidationError):
    """Calculator input rejected by the normalizer: shown to the user as-is"""
    log_error_with_context(exc, {"path": request.url.path})
    content = create_error_response("ValidationError", exc.message, exc.details)
    return _add_cors_headers(request, JSONResponse(status_code=422, content=content))


async def traceback_exception_handler(request: Request, exc: Exception):
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logging.error(tb)

    if DEBUG:
        content = create_error_response("InternalServerError", tb)
    else:
        content = create_error_response("InternalServerError", "Internal server error")

    return _add_cors_headers(request, JSONResponse(status_code=500, content=content))
