import hmac
import logging
from collections.abc import Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from browserscan.api.common.schema import ApiError

logger = logging.getLogger(__name__)

DEFAULT_EXEMPT_PATHS = ("/api/health", "/openapi.json", "/docs", "/redoc")


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject requests whose ``X-API-Key`` header does not match ``api_key``."""

    def __init__(
        self,
        app,  # noqa: ANN001
        api_key: str,
        exempt_paths: Iterable[str] = DEFAULT_EXEMPT_PATHS,
    ) -> None:
        super().__init__(app)
        self._api_key = api_key
        self._exempt_paths = frozenset(exempt_paths)

    async def dispatch(self, request: Request, call_next) -> Response:  # noqa: ANN001
        if request.url.path in self._exempt_paths:
            return await call_next(request)

        provided = request.headers.get("X-API-Key", "").encode()
        if hmac.compare_digest(provided, self._api_key.encode()):
            return await call_next(request)

        logger.warning("Rejected %s %s: bad API key", request.method, request.url.path)
        return JSONResponse(
            ApiError(message="Invalid or missing API key").model_dump(),
            status_code=401,
        )


__all__ = ("DEFAULT_EXEMPT_PATHS", "ApiKeyMiddleware")
