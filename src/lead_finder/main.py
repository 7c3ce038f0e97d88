import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import __version__
from .api.router import router as leads_router
from .exceptions import LeadFinderError
from .settings import get_settings

app = FastAPI(title="Lead Generation API Server", version=__version__)

# Include routers
app.include_router(leads_router)

logger = logging.getLogger(__name__)

ENDPOINTS = [
    "/api/search",
    "/api/search-to-spreadsheet",
    "/api/search-to-excel",
]


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


@app.exception_handler(LeadFinderError)
async def lead_finder_error_handler(request: Request, exc: LeadFinderError):
    """Convert application errors into ``{"error": message}`` responses."""
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    """Report malformed request bodies as 400 with the offending field."""
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = (
            f"Invalid parameter {field}: {first.get('msg')}"
            if field
            else f"{message}: {first.get('msg')}"
        )
    logger.warning(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Server error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": str(exc)},
    )


@app.get("/")
async def health():
    """Health check listing the available endpoints."""
    return {
        "status": "ok",
        "message": "Lead Generation API Server",
        "version": __version__,
        "endpoints": ENDPOINTS,
    }


def main():
    """Main entry point for the web server."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Lead Generation API Server running on port {settings.port}")
    logger.info("Available endpoints:")
    logger.info("  GET  / - API information")
    logger.info("  POST /api/search - Search for job listings")
    logger.info("  POST /api/search-to-spreadsheet - Search and create spreadsheet")
    logger.info("  POST /api/search-to-excel - Search and export to Excel")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
