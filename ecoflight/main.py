"""FastAPI application for the flight emissions estimator."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .logger import configure_logging
from .routes import analytics_router, calculator_router, finder_router, theme_router
from .services.singleton import get_calculator_service, get_config, get_theme_store

config = get_config()

# Configure logging
configure_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Theme preference is read once at startup
    theme = get_theme_store()
    get_calculator_service()
    logger.info(f"EcoFlight initialized (dark mode: {theme.dark_mode})")
    yield


# Initialize FastAPI app
app = FastAPI(title="EcoFlight Emissions API", version="1.0.0", lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculator_router)
app.include_router(theme_router)
app.include_router(finder_router)
app.include_router(analytics_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "EcoFlight Emissions API", "status": "running"}


@app.get("/health")
async def health():
    return {"ok": True}


def run() -> None:
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
