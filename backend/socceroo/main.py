"""
Socceroo Group Stage Simulator - FastAPI Application

Main entry point for the web API.
"""

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import groups_router, simulations_router


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)


# Create FastAPI app
app = FastAPI(
    title="Socceroo Group Stage Simulator",
    description="Simulates a home-and-away football group stage and ranks the final table.",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

# CORS configuration
# In production, replace with specific frontend URL
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(groups_router, prefix="/api")
app.include_router(simulations_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Socceroo Group Stage Simulator API",
        "version": "1.0.0",
        "docs": "/api/docs",
        "health": "/api/health"
    }
