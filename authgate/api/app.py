from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from .error import NOT_FOUND, ClientError, ServerError
from .middleware import RequestLoggingMiddleware
import logging

logger = logging.getLogger(__name__)

_MASKED_STATUSES = (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    error_dict = {
        "code": "VALIDATION_ERROR",
        "message": f"{field}: {first.get('msg', 'Invalid request')}" if field else "Invalid request",
    }
    logger.warning(f"Validation error: {error_dict}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": error_dict})


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    # Unknown routes and wrong methods answer exactly like a denied protected route
    if exc.status_code in _MASKED_STATUSES:
        error_dict = {"code": NOT_FOUND.code, "message": NOT_FOUND.message}
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": error_dict}
        )
    return await http_exception_handler(request, exc)


def create_app(ApplicationConfig) -> FastAPI:
    from authgate.depends import check_store_backend, engine

    check_store_backend(ApplicationConfig.STORE_BACKEND)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.STORE_BACKEND == "sql":
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        logger.info(f"Credential store backend: {ApplicationConfig.STORE_BACKEND}")
        yield
        await engine.dispose()

    app = FastAPI(title="Session Gate", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from authgate.api.routes import auth, health_check, sessions, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(sessions.router, prefix=prefix, tags=["Sessions"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)

    return app
