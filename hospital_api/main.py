import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv

# Load environment variables as early as possible
load_dotenv()

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .core.config import settings
from .exceptions import AppError, app_error_handler, create_success_response, request_validation_handler
from .middleware import ErrorHandlingMiddleware, LoggingMiddleware, SecurityMiddleware
from .persistence.database import MongoGateway, create_gateway
from .routers import auth_router, doctors_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)


def create_app(gateway: Optional[MongoGateway] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: no store, no traffic. A failed connect aborts startup.
        store = gateway or create_gateway(settings)
        try:
            store.connect()
        except Exception:
            logger.exception("MongoDB connection failed, refusing to start")
            raise
        app.state.gateway = store
        logger.info(f"Server started on port {settings.PORT}")
        logger.info(f"Database: {settings.DB_NAME}")
        logger.info("Health check: GET /health")
        yield
        # Shutdown
        store.close()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url=("/docs" if settings.DOCS_ENABLED else None),
        redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
        openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None),
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SecurityMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_methods=settings.allowed_methods_list,
        allow_headers=settings.allowed_headers_list,
    )

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "Hospital Management System Backend is running"

    @app.get("/health")
    def health_check():
        return create_success_response(message="Backend is running")

    app.include_router(auth_router.router)
    app.include_router(doctors_router.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hospital_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        workers=1,
        log_level=settings.LOG_LEVEL.lower()
    )
