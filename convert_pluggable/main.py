"""Unit Conversion Service - Main Application"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from convert_pluggable import __version__
from convert_pluggable.api.conversions import router as conversions_router
from convert_pluggable.api.units import router as units_router
from convert_pluggable.common.config import settings

logging.basicConfig(
    level=settings.app.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Unit Conversion Service",
    description="Convert quantities between units of mass, length, duration, "
                "pressure, energy, power, angle, force and temperature",
    version=__version__,
    debug=settings.app.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(conversions_router)
app.include_router(units_router)

@app.get("/")
async def root():
    return {"message": settings.app.name, "status": "running"}

@app.get("/health")
async def health():
    return {"status": "healthy"}
