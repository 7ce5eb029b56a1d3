"""
CV Analysis Backend - Main FastAPI Application

Scores CVs for ATS compatibility, content quality, length and keyword fit
against job descriptions.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Default industry: {settings.default_industry}")
    
    yield
    
    # Shutdown
    logger.info("Shutting down CV Analysis Backend")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        description="""
## CV Analysis Backend API

Deterministic CV scoring and text analysis.

### Features

- **ATS Score**: Formatting, keyword, structure and readability sub-scores
- **Content Quality**: Grammar heuristics, impact (weak verbs, quantification, passive voice) and clarity
- **Length Analysis**: Word count against industry benchmarks
- **Keyword Analysis**: Job description keyword coverage
- **Validation**: CV completeness check before analysis

### Quick Start

1. Check your CV is complete enough with `/api/validate`
2. Send the CV and the analyses you want to `/api/analyze`
3. Add a `jobDescription` to also receive keyword analysis

### Data Format

The API accepts CV data in JSON format matching the frontend structure:
- `personalInfo`: Name, title, email, phone, location, summary, links
- `experience`: Work experience entries with free-text descriptions
- `education`: Education entries
- `skills`: List of skills
- `certifications`: Certification entries
        """,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )
    
    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    
    # Add global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "An internal error occurred",
                "detail": str(exc) if settings.debug else "Please try again later"
            }
        )
    
    # Include API routes
    app.include_router(router, prefix="/api")
    
    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
            "api": "/api"
        }
    
    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
