from pydantic import Field
from typing import List, Optional
from .base import CamelModel
from .planet import DatasetFeatureVector, PlanetRecord, PredictionRecord


class SynthesisRequest(CamelModel):
    prediction: PredictionRecord = Field(..., description="Result of the light-curve analysis")
    features: DatasetFeatureVector = Field(default_factory=DatasetFeatureVector, description="Dataset feature vector")
    seed: Optional[int] = Field(None, ge=0, description="Seed for reproducible variation")


class SynthesisResponse(CamelModel):
    planets: List[PlanetRecord] = Field(..., description="Derived planets, primary first")
    total_planets: int = Field(..., description="Number of derived planets")
    seed: int = Field(..., description="Seed used for the random draws")
    features: DatasetFeatureVector = Field(..., description="Feature vector the planets were derived from")


class AnalysisHistoryResponse(CamelModel):
    analyses: List[PredictionRecord] = Field(..., description="Most recent analyses, newest first")
    max_size: int = Field(..., description="History capacity")
