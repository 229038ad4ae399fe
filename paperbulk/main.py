from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import calculator, presets

logger = logging.getLogger("paperbulk")
logger.setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(
    title="Paper Bulk Calculator",
    description="Two-value paper calculator — gsm / caliper (μm, mm, 條) / bulk / lb",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculator.router, prefix="/api")
app.include_router(presets.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
