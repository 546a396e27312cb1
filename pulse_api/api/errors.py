"""
Manejadores de errores de la aplicación. Toda respuesta de error tiene la forma
{"error": {"message": "..."}}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pulse_api.core.errors import ApiError, RouteNotFoundError

logger = logging.getLogger(__name__)

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"message": message}})

async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return error_response(exc.status_code, exc.message)

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Ruta o método sin manejador
    if exc.status_code in (404, 405):
        return await api_error_handler(request, RouteNotFoundError())
    return error_response(exc.status_code, str(exc.detail))

async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return error_response(500, str(exc) or "Internal Server Error")

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
