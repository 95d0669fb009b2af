"""
Main FastAPI application
Learning progress tracking, badge awards and leaderboard
"""
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time

from courseware.config import settings
from courseware.database import SessionLocal
from courseware.bootstrap import bootstrap
from courseware.exceptions import CoursewareError
from courseware.api import chapters, progress, quizzes, exercises, badges, users

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Course platform backend: catalog sync, learner progress, badges and leaderboard",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing"""

    start_time = time.time()

    response = await call_next(request)

    duration = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Duration: {duration:.3f}s"
    )

    return response


# Service-layer errors (not found, invalid argument)
@app.exception_handler(CoursewareError)
async def courseware_exception_handler(request: Request, exc: CoursewareError):
    """Map typed service errors to 4xx responses"""

    logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.error,
            "message": exc.message,
            "status_code": exc.status_code
        }
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors gracefully"""

    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again later.",
            "detail": str(exc) if settings.DEBUG else None
        }
    )


# HTTP exception handler
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Format HTTP exceptions consistently"""

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": "http_error",
            "message": exc.detail,
            "status_code": exc.status_code
        }
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": time.time()
    }


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "message": "Courseware Learning Platform API",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health"
    }


# Include routers
app.include_router(users.router)
app.include_router(chapters.router)
app.include_router(progress.router)
app.include_router(quizzes.router)
app.include_router(exercises.router)
app.include_router(badges.router)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create tables, seed badges and synchronize the chapter catalog"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    db = SessionLocal()
    try:
        report = bootstrap(db)
        logger.info(f"Bootstrap complete: {report.loaded} chapters loaded, {len(report.errors)} skipped")
    except Exception as e:
        logger.error(f"Failed to bootstrap application: {str(e)}")
        raise
    finally:
        db.close()

    logger.info("Application startup complete")


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down application")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "courseware.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
