"""
FastAPI application entry point.

Assembles the FastAPI app with all component routers.
"""

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planning.estimation.estimation_api import router as estimation_router
from planning.graph.pipeline_api import router as pipeline_router
from planning.planner.planner_api import router as planner_router
from planning.shared.api import register_error_handlers
from planning.shared.logging import LOG_FORMAT, setup_logging
from planning.shared.settings import get_settings
from planning.validation.validation_api import router as validation_router


settings = get_settings()

# ============================================================================
# Logging configuration (single source of truth for the service)
# ============================================================================
if settings.json_logs:
    setup_logging(
        level=getattr(logging, settings.log_level, logging.INFO),
        log_file=settings.log_file,
    )
else:
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,  # Override any prior basicConfig calls
    )

# Quiet noisy third-party loggers
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)


# Create FastAPI app
app = FastAPI(
    title="Wayfare Planning",
    description="Trip planning and cost estimation core",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(validation_router)
app.include_router(planner_router)
app.include_router(estimation_router)
app.include_router(pipeline_router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Wayfare Planning",
        "version": "0.1.0",
        "components": {
            "validation": {"status": "active", "endpoints": "/api/travel-input"},
            "planner": {"status": "active", "endpoints": "/api/trips"},
            "estimation": {"status": "active", "endpoints": "/api/costs"},
            "pipeline": {"status": "active", "endpoints": "/api/pipeline"},
        },
    }


@app.get("/health")
async def health():
    """Global health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
