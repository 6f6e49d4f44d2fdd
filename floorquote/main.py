from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import estimates, line_items, pricing, rooms

logger = logging.getLogger("floorquote")

app = FastAPI(
    title="FloorQuote",
    description=f"Hardwood flooring estimate pricing for {settings.COMPANY_NAME}",
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
app.include_router(estimates.router, prefix="/api")
app.include_router(line_items.router, prefix="/api")
app.include_router(pricing.router, prefix="/api")
app.include_router(rooms.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "floorquote"}


@app.on_event("startup")
def log_startup():
    logger.info(
        "FloorQuote ready: default tier %s, species %s, tax %.4f",
        settings.DEFAULT_TIER, settings.DEFAULT_SPECIES, settings.DEFAULT_TAX_RATE,
    )
