from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime, timezone
import logging

from . import __version__, config
from .routers import plans

SERVICE_NAME = "Floor Plan Designer API"

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=SERVICE_NAME,
    version=__version__,
    description="Procedural floor plan layouts from room requirements"
)

# The wizard frontend runs on its own origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_body_error_handler(request: Request, exc: RequestValidationError):
    """Malformed requirements never reach the layout engine."""
    errors = jsonable_encoder(exc.errors())
    logger.warning(f"Rejected {request.method} {request.url.path}: {len(errors)} field error(s)")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": errors,
            "message": "Malformed requirements - check plot size, style and room fields"
        }
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
    show_error = config.ENVIRONMENT == "development"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "Floor plan service error. Please try again later.",
            "error": str(exc) if show_error else "Internal server error"
        }
    )


app.include_router(plans.router)

logger.info(f"{SERVICE_NAME} {__version__} ready ({config.ENVIRONMENT})")


@app.get("/")
async def root():
    return {
        "message": SERVICE_NAME,
        "version": __version__,
        "status": "running",
        "environment": config.ENVIRONMENT,
        "endpoints": [route.path for route in plans.router.routes],
    }


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
