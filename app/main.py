import logging
from typing import Optional
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import Settings, settings as default_settings
from app.core.logging_config import setup_logging
from app.api.v1.api import api_router as api_v1_router
from app.services.node_service import NodeService
from app.services.pod_registry import NotFoundError, PodRegistry

logger = logging.getLogger(__name__)

CORS_ALLOWED_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept"]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Builds the agent with its own, empty pod registry."""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.APP_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.pod_registry = PodRegistry()
    app.state.node_service = NodeService(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=CORS_ALLOWED_HEADERS,
    )
    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    @app.get("/", tags=["Root"], summary="Root endpoint for service status")
    async def read_root():
        """Returns a welcome message indicating the service is running."""
        return {"message": f"Welcome to the {settings.APP_NAME}"}

    # A body that doesn't decode into a pod aborts the call with 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.error(f"Error in {request.url.path}: {exc.errors()}", exc_info=False)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_exception_handler(request: Request, exc: NotFoundError):
        # Pod and container misses look the same to the caller: a bare 404
        logger.warning(f"{request.url.path}. {exc}")
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception during request to {request.url}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred."},
        )

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting....")
        logger.info(f"Application '{settings.APP_NAME}' started successfully.")
        logger.info(f"Node IP: {settings.VKUBELET_POD_IP or '(none)'}")
        logger.info(
            f"Capacity: cpu={settings.NODE_CPU_CAPACITY}, memory={settings.NODE_MEMORY_CAPACITY}, "
            f"pods={settings.NODE_PODS_CAPACITY}"
        )

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info(f"Application shutdown... {len(app.state.pod_registry)} pod(s) discarded.")

    return app


# Setup logging FIRST
setup_logging()
app = create_app()


def run():
    """Entry point of the fake-node-agent script."""
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
