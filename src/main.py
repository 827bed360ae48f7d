"""
FastAPI Application: Hexagonal Architecture
Main entry point for Bank Statement Analyzer API
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from api.v1.routes import agent, analyze, health
from config import settings


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)


# Create FastAPI app
app = FastAPI(
    title="Bank Statement Analyzer API",
    description="Parses bank statement text and summarizes income, expenses and savings",
    version=settings.SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(health.router, prefix="/api/v1", tags=["Health"])
app.include_router(analyze.router, prefix="/api/v1", tags=["Analysis"])
app.include_router(agent.router, tags=["Agent"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Bank Statement Analyzer API",
        "version": settings.SERVICE_VERSION,
        "architecture": "Hexagonal (Ports & Adapters)",
        "docs": "/docs",
        "health": "/api/v1/health",
        "agent": f"/agent/{settings.DEFAULT_AGENT_ID}"
    }


def run():
    """Run the API with uvicorn"""
    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
