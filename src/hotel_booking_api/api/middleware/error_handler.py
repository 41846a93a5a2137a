import logging
from collections.abc import Awaitable, Callable
from http import HTTPStatus

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from hotel_booking_api.api import responses
from hotel_booking_api.shared.logging import AuditLogger

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn unexpected exceptions into the generic 500 envelope."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            self._log_exception(request, exc)
            return responses.internal_server_error()

    @staticmethod
    def _log_exception(request: Request, exc: Exception) -> None:
        headers = AuditLogger.mask_sensitive_data(dict(request.headers))
        body = AuditLogger.mask_sensitive_data(getattr(request.state, "json_body", None))
        logger.exception(
            "unexpected_error method=%s path=%s headers=%s body=%s detail=%s",
            request.method,
            request.url.path,
            headers,
            body,
            str(exc),
        )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Render framework HTTP errors (404, 405, ...) in the error envelope."""
    try:
        status = HTTPStatus(exc.status_code)
    except ValueError:
        status = HTTPStatus.INTERNAL_SERVER_ERROR
    return responses.error(status, str(exc.detail))
