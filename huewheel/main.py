from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from huewheel.api.v1 import router as v1_router
from huewheel.config import config
from huewheel.schemas import HealthResponse
from huewheel.utils.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Sinks are installed here, never on library import
    configure_logging()
    yield


app = FastAPI(
    title="HueWheel Palette Service",
    description="Color conversion and harmony palette generation",
    version=config.VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(ok=True, version=config.VERSION, service=config.SERVICE_NAME)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "HueWheel Palette API",
        "version": config.VERSION,
        "docs": "/docs"
    }
