from .planet import DatasetFeatureVector, PredictionRecord, PlanetRecord, LightCurveRequest
from .orbit import OrbitState, BodyPosition
from .interaction import CursorHint, InteractionState, PointerEvent
from .scene import SceneCreateRequest, TickRequest, SceneView
from .synthesis import SynthesisRequest, SynthesisResponse, AnalysisHistoryResponse
from .archive import ArchiveFetchRequest, ArchiveFetchResponse

__all__ = [
    "DatasetFeatureVector", "PredictionRecord", "PlanetRecord", "LightCurveRequest",
    "OrbitState", "BodyPosition",
    "CursorHint", "InteractionState", "PointerEvent",
    "SceneCreateRequest", "TickRequest", "SceneView",
    "SynthesisRequest", "SynthesisResponse", "AnalysisHistoryResponse",
    "ArchiveFetchRequest", "ArchiveFetchResponse"
]
