import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rewards import __version__
from rewards.config import Settings
from rewards.db.db import Base, SessionLocal, engine
from rewards.routes import (
    customers_router,
    rewards_router,
    transactions_router,
)
from rewards.services import init_sample_data

logger = logging.getLogger(__name__)


def configure_logging(level: str = Settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler - runs on startup and shutdown"""
    # Startup
    configure_logging()
    Base.metadata.create_all(bind=engine)
    if Settings.SEED_SAMPLE_DATA:
        with SessionLocal() as db:
            init_sample_data(db)
    logger.info("Rewards API started (database=%s)", engine.url.render_as_string(hide_password=True))
    yield
    # Shutdown
    engine.dispose()


app = FastAPI(
    title="Customer Rewards API",
    version=__version__,
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):  # type: ignore[override]
    """Handle validation errors with HTTP 400, matching the service-layer VALIDATION_ERROR code."""
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request payload.",
                "details": {"errors": jsonable_encoder(exc.errors())}
            }
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):  # type: ignore[override]
    """Handle general exceptions - log and return 500 error"""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred.",
                "details": {}
            }
        }
    )


@app.get("/api/health", tags=["health"])
def health() -> dict:
    return {"status": "ok"}


# Register routers
app.include_router(transactions_router)
app.include_router(customers_router)
app.include_router(rewards_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=Settings.API_HOST, port=Settings.API_PORT)
