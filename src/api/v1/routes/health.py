"""
API Routes: Health Check
"""

from fastapi import APIRouter

from api.v1.schemas import HealthResponse
from config import settings
from infrastructure.parsing import list_supported_banks


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""

    return HealthResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        version=settings.SERVICE_VERSION,
        supported_banks=list_supported_banks()
    )
