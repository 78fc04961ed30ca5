"""Error taxonomy and the JSON envelope every failure is rendered into."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from humadero.core.config import Settings

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Client-supplied order data failed the required-field checks."""

    def __init__(
        self,
        message: str = "Faltan campos requeridos",
        missing: Optional[List[str]] = None,
        invalid: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.missing = list(missing or [])
        self.invalid = list(invalid or [])


class PersistenceError(Exception):
    """The database was unreachable, timed out, or rejected the operation."""

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class NotFoundError(Exception):
    def __init__(self, path: str, method: str, routes: List[str]) -> None:
        super().__init__(f"{method} {path} not found")
        self.path = path
        self.method = method
        self.routes = routes


def list_routes(app: FastAPI) -> List[str]:
    """Return the public routes as "METHOD /path" strings, read from the OpenAPI schema."""
    out = []
    for path, operations in app.openapi().get("paths", {}).items():
        for method in sorted(operations):
            out.append(f"{method.upper()} {path}")
    return out


def _envelope(message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "error": message}
    body.update(extra)
    return body


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(ValidationError)
    async def handle_validation(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=400,
            content=_envelope(
                exc.message,
                campos_faltantes=exc.missing,
                campos_invalidos=exc.invalid,
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_unparseable_body(request: Request, exc: RequestValidationError):
        # Malformed JSON or a body that is not an object never reaches the handler
        return await handle_validation(
            request,
            ValidationError("El cuerpo de la petición debe ser un objeto JSON válido"),
        )

    @app.exception_handler(PersistenceError)
    async def handle_persistence(request: Request, exc: PersistenceError):
        logger.error(f"{request.method} {request.url.path} persistence failure: {exc.message} ({exc.detail})")
        extra = {"detalle": exc.detail} if settings.is_development and exc.detail else {}
        return JSONResponse(status_code=500, content=_envelope(exc.message, **extra))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content=_envelope(
                "Ruta no encontrada",
                ruta=exc.path,
                metodo=exc.method,
                rutas_disponibles=exc.routes,
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        # A known path with the wrong method is reported like any unmatched route
        if exc.status_code in (404, 405):
            return await handle_not_found(
                request,
                NotFoundError(request.url.path, request.method, list_routes(request.app)),
            )
        if exc.status_code == 400:
            # Bodies FastAPI cannot decode at all (e.g. invalid UTF-8)
            return await handle_validation(
                request,
                ValidationError("El cuerpo de la petición debe ser un objeto JSON válido"),
            )
        return JSONResponse(status_code=exc.status_code, content=_envelope(str(exc.detail)))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        extra = {"detalle": str(exc)} if settings.is_development else {}
        return JSONResponse(status_code=500, content=_envelope("Error interno del servidor", **extra))
