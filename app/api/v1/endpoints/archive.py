import logging
from fastapi import APIRouter, HTTPException
from app.schemas import ArchiveFetchRequest, ArchiveFetchResponse
from app.services import AnalysisService

logger = logging.getLogger(__name__)

router = APIRouter()
analysis_service = AnalysisService()

@router.post("/fetch", response_model=ArchiveFetchResponse)
async def fetch_archive_data(request: ArchiveFetchRequest):
    """
    Fetch light-curve data for a target from the NASA archive.

    This is a simulation: the request waits and reports success without
    contacting any external service.
    """
    try:
        return await analysis_service.fetch_archive_data(request.api_key, request.target_id)
    except Exception as e:
        logger.warning("Archive fetch for %r failed: %r", request.target_id, e)
        raise HTTPException(status_code=502, detail="Failed to fetch data")
