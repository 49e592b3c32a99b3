"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Registers API routes (users, tour guides, tours, bookings, stories)
- No business logic should be written here
- Manages application lifecycle (store connects before traffic, closes on shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from contextlib import asynccontextmanager
import time

from app.core.config import settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.mongo import MongoStore
from app.db.indexes import create_indexes
from app.api import bookings, stories, tour_guides, tours, users
from utils.constants import HOME_BANNER

# Initialize logging first
setup_logging()
logger = get_logger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    The store must be connected before the listener accepts requests.
    """
    logger.info("🚀 Starting TourNext API...")

    store = MongoStore(settings)
    try:
        logger.info("Validating configuration...")
        validate_settings()
        logger.info("✅ Configuration validated")

        logger.info("Connecting to MongoDB...")
        await store.connect()
        logger.info("✅ MongoDB connected")

        await create_indexes(store)

        app.state.store = store
        logger.info(f"🎉 TourNext API started (environment={settings.ENVIRONMENT}, port={settings.PORT})")

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        await store.close()
        raise

    yield  # Application runs here

    logger.info("🛑 Shutting down TourNext API...")
    try:
        await store.close()
        app.state.store = None
        logger.info("👋 TourNext API shut down successfully")
    except Exception as e:
        logger.error(f"Error during shutdown: {str(e)}", exc_info=True)


app = FastAPI(
    title="TourNext API",
    description="Tours, bookings, tour guides and travel stories",
    version=APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_exception_handlers(app)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time header to all responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    if process_time > 5.0:
        logger.warning(
            f"Slow request detected: {request.method} {request.url.path} ({process_time:.2f}s)"
        )

    return response


app.include_router(users.router, tags=["Users"])
app.include_router(tour_guides.router, tags=["Tour Guides"])
app.include_router(tours.router, tags=["Tours"])
app.include_router(bookings.router, tags=["Bookings"])
app.include_router(stories.router, tags=["Stories"])


@app.get("/", response_class=HTMLResponse, tags=["Health"])
async def root():
    """Home banner."""
    return HOME_BANNER


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """
    Health check endpoint.
    Checks database connectivity.
    """
    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.ENVIRONMENT,
        "version": APP_VERSION,
        "checks": {}
    }

    store = getattr(request.app.state, "store", None)
    db_healthy = store is not None and await store.ping()
    health_status["checks"]["database"] = "healthy" if db_healthy else "unhealthy"
    if not db_healthy:
        health_status["status"] = "unhealthy"

    status_code = 200 if db_healthy else 503
    return JSONResponse(content=health_status, status_code=status_code)


@app.get("/ready", tags=["Health"])
async def readiness_check(request: Request):
    """
    Readiness probe - indicates if app is ready to receive traffic.
    """
    store = getattr(request.app.state, "store", None)
    if store is not None and await store.ping():
        return {"status": "ready"}
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "reason": "database_unavailable"}
    )


@app.get("/live", tags=["Health"])
async def liveness_check():
    """
    Liveness probe - indicates if app is alive.
    """
    return {"status": "alive"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )
