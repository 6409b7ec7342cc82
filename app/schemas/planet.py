from pydantic import Field, field_validator
from pydantic import ConfigDict
from typing import List, Optional
from .base import CamelModel, coerce_float, coerce_count


class DatasetFeatureVector(CamelModel):
    """Aggregate statistics of one analyzed light-curve dataset"""
    time_points: int = Field(default=0, example=6000, description="Number of time samples")
    flux_points: int = Field(default=0, example=6000, description="Number of flux samples")
    time_range: float = Field(default=0.0, example=27.4, description="Observed time span (days)")
    flux_mean: float = Field(default=0.0, example=1.0, description="Mean normalized flux")
    flux_min: float = Field(default=0.0, example=0.985, description="Minimum normalized flux")
    flux_max: float = Field(default=0.0, example=1.012, description="Maximum normalized flux")
    flux_std_dev: float = Field(default=0.0, example=0.02, description="Standard deviation of the flux")

    @field_validator("time_points", "flux_points", mode="before")
    @classmethod
    def _count_or_zero(cls, value):
        return coerce_count(value)

    @field_validator("time_range", mode="before")
    @classmethod
    def _range_or_zero(cls, value):
        return max(0.0, coerce_float(value))

    @field_validator("flux_mean", "flux_min", "flux_max", "flux_std_dev", mode="before")
    @classmethod
    def _number_or_zero(cls, value):
        return coerce_float(value)


class PredictionRecord(CamelModel):
    """Opaque result of an upstream light-curve analysis"""
    planet_type: str = Field(default="Unknown", example="Super Earth", description="Planet category label")
    probability: float = Field(default=0.0, example=0.87, description="Detection probability")
    radius: float = Field(default=0.0, example=1.6, description="Planet Radius (R⊕)")
    distance_from_star: float = Field(default=0.0, example=1.05, description="Distance from host star (AU)")
    has_water: bool = Field(default=False, description="Water detected")
    has_atmosphere: bool = Field(default=False, description="Atmosphere detected")
    is_habitable: bool = Field(default=False, description="Potentially habitable")
    temperature: float = Field(default=0.0, example=265, description="Equilibrium Temperature (K)")
    confidence: float = Field(default=0.0, example=0.92, description="Model confidence")

    @field_validator("planet_type", mode="before")
    @classmethod
    def _type_or_unknown(cls, value):
        if value is None or str(value).strip() == "":
            return "Unknown"
        return str(value)

    @field_validator("probability", "radius", "distance_from_star", "temperature", "confidence", mode="before")
    @classmethod
    def _number_or_zero(cls, value):
        return coerce_float(value)

    @field_validator("probability", "confidence")
    @classmethod
    def _clamp_unit_interval(cls, value: float) -> float:
        return min(1.0, max(0.0, value))

    @field_validator("temperature")
    @classmethod
    def _non_negative_temperature(cls, value: float) -> float:
        return max(0.0, value)

    @field_validator("has_water", "has_atmosphere", "is_habitable", mode="before")
    @classmethod
    def _flag_or_false(cls, value):
        return False if value is None else value


class PlanetRecord(CamelModel):
    """One body of the system; immutable once created"""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., example=1, description="Identifier, unique within a batch")
    name: str = Field(..., example="Extracted Planet (Super Earth)")
    planet_type: str = Field(..., alias="type", example="Super Earth", description="Planet category label")
    radius: float = Field(..., example=1.6, description="Planet Radius (R⊕)")
    distance_from_star: float = Field(..., example=1.05, description="Distance from host star (AU)")
    temperature: float = Field(..., ge=0.0, example=265, description="Temperature (K)")
    has_water: bool = False
    has_atmosphere: bool = False
    is_habitable: bool = False
    probability: float = Field(default=0.0, ge=0.0, le=1.0)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    color: str = Field(default="#FFFFFF", description="Display tag")
    dataset_info: Optional[DatasetFeatureVector] = Field(None, description="Feature vector that produced this record")
    description: Optional[str] = Field(None, description="Short human readable description")


class LightCurveRequest(CamelModel):
    time: List[Optional[float]] = Field(default_factory=list, description="Sample timestamps (days)")
    flux: List[Optional[float]] = Field(default_factory=list, description="Normalized flux samples")
