"""
Response rendering and error handlers shared by both transports
"""
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse, Response

from gcal_bridge.core.errors import ProviderError, ServiceError
from gcal_bridge.core.logging import log_operation_error
from gcal_bridge.schemas.results import JsonResult, OperationResult, RedirectResult

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body. Expected a JSON object."


def render(result: OperationResult) -> Response:
    """Turn an operation result into an HTTP response"""
    if isinstance(result, RedirectResult):
        return RedirectResponse(url=result.url, status_code=result.status_code)
    if isinstance(result, JsonResult):
        return JSONResponse(content=jsonable_encoder(result.data), status_code=result.status_code)
    return PlainTextResponse(content=result.text, status_code=result.status_code)


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        # Provider errors are logged with their cause where they are raised
        if not isinstance(exc, ProviderError):
            log_operation_error(logger, exc.operation or request.url.path, exc)
        return PlainTextResponse(content=exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("⚠️ [%s] unreadable request: %s", request.url.path, exc.errors())
        return PlainTextResponse(content=INVALID_BODY_MESSAGE, status_code=400)
