"""
FastAPI application for style resolution.

Provides REST API endpoints to encode theme variables into placeholders
before compilation and to resolve compiled style objects at render time.

License: MIT
"""

import time
import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from themestyle import config
from themestyle.errors import StyleResolutionError
from themestyle.models import PlaceholderRequest, ResolveRequest, Units
from themestyle.registry import VariableRegistry
from themestyle.resolver import resolve_theme_variables
from themestyle.styles import default_theme

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format=config.LOG_FORMAT
)
logger = logging.getLogger(__name__)

# Placeholders handed out by this service; styles compiled against them must
# be resolved by the same process
registry = VariableRegistry()

# Create FastAPI app
app = FastAPI(
    title="Theme Style Resolver API",
    version="1.0.0",
    description="Resolves theme variables, relative lengths and margin-aware dimensions in compiled style objects",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing information."""
    start_time = time.time()

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} "
        f"completed in {duration:.3f}s with status {response.status_code}"
    )

    return response


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint.

    Returns:
        Status dictionary indicating service health
    """
    return {"status": "ok"}


@app.post("/placeholders")
async def create_placeholders(payload: PlaceholderRequest) -> Dict[str, Any]:
    """
    Encode theme variables into parser-safe placeholders.

    Args:
        payload: Variable names and the encoding discipline to use

    Returns:
        JSON mapping each variable name to its placeholder
    """
    if payload.kind == "color":
        encode = registry.resolve_color_placeholder
    else:
        encode = registry.resolve_length_placeholder

    placeholders = {name: encode(name, payload.fallback) for name in payload.variables}
    logger.info(f"Encoded {len(placeholders)} {payload.kind} variable(s)")

    return {"placeholders": placeholders}


@app.post("/resolve")
async def resolve_style(payload: ResolveRequest) -> Dict[str, Any]:
    """
    Resolve a compiled style object.

    Args:
        payload: Style object, optional theme, viewport and platform

    Returns:
        JSON with the resolved style and timing information

    Raises:
        HTTPException: On resolution errors
    """
    start_time = time.time()

    theme = payload.theme.to_theme() if payload.theme else default_theme()
    units = Units.from_viewport(theme, payload.viewport, payload.parent)

    try:
        style = resolve_theme_variables(
            payload.style,
            theme,
            payload.viewport,
            units,
            registry=registry,
            platform=payload.platform,
        )
    except StyleResolutionError as e:
        logger.error(f"Resolution error: {str(e)}")
        raise HTTPException(status_code=400, detail=f"Resolution error: {str(e)}")

    resolve_time = time.time() - start_time
    logger.info(f"Resolved style with {len(style)} properties in {resolve_time:.3f}s")

    return {
        "style": style,
        "resolve_time_seconds": round(resolve_time, 3),
    }


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
