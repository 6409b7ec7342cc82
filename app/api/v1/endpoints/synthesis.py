from fastapi import APIRouter, HTTPException
from app.schemas import (
    SynthesisRequest, SynthesisResponse, AnalysisHistoryResponse,
    LightCurveRequest, DatasetFeatureVector
)
from app.services import AnalysisService

router = APIRouter()
analysis_service = AnalysisService()

@router.post("/", response_model=SynthesisResponse)
async def synthesize_planets(request: SynthesisRequest):
    """
    Derive the planets of a system from one light-curve analysis.

    The primary planet is always returned. Depending on the dataset:
    - More than 5000 time points adds a companion planet
    - Flux standard deviation above 0.01 adds a transiting gas giant

    Pass `seed` to reproduce a previous result; the seed used is always returned.
    """
    try:
        return analysis_service.analyze(request.prediction, request.features, seed=request.seed)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.post("/features", response_model=DatasetFeatureVector)
async def extract_features(request: LightCurveRequest):
    """
    Summarize raw light-curve samples into the feature vector used for synthesis.
    """
    try:
        return analysis_service.extract_features(request.time, request.flux)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/history", response_model=AnalysisHistoryResponse)
async def get_history():
    """
    Most recent analyses, newest first.
    """
    return AnalysisHistoryResponse(
        analyses=analysis_service.history(),
        max_size=analysis_service.history_size
    )
