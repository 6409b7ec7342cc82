"""
Planet Synthesis Module
Expands one analysis result into a small population of derived planets
"""

import logging
import numpy as np
from typing import List, Optional
from app.schemas import PlanetRecord, PredictionRecord, DatasetFeatureVector

logger = logging.getLogger(__name__)

COMPANION_TIME_POINTS_THRESHOLD = 5000
TRANSIT_FLUX_STD_THRESHOLD = 0.01

HABITABLE_COLOR = "#00BFFF"
NON_HABITABLE_COLOR = "#FF6B6B"
COMPANION_COLOR = "#32CD32"
TRANSIT_COLOR = "#FF8C00"


class PlanetSynthesisEngine:
    """Threshold-gated expansion of a prediction into 1 to 3 planet records"""

    def __init__(self, rng: np.random.Generator,
                 companion_time_points_threshold: int = COMPANION_TIME_POINTS_THRESHOLD,
                 transit_flux_std_threshold: float = TRANSIT_FLUX_STD_THRESHOLD):
        self.rng = rng
        self.companion_time_points_threshold = companion_time_points_threshold
        self.transit_flux_std_threshold = transit_flux_std_threshold

    def synthesize(self, prediction: PredictionRecord,
                   features: Optional[DatasetFeatureVector] = None) -> List[PlanetRecord]:
        """
        Derive the planet list for one analysis.

        The primary planet is always present. A companion is added for large
        datasets (many time points) and a transiting gas giant for high flux
        variation; both checks run against the same feature vector.
        """
        if prediction is None:
            raise ValueError("A prediction is required to synthesize planets")
        features = features if features is not None else DatasetFeatureVector()

        planets = [self._primary(prediction, features)]

        if features.time_points > self.companion_time_points_threshold:
            planets.append(self._companion(prediction, features))

        if features.flux_std_dev > self.transit_flux_std_threshold:
            planets.append(self._transit(prediction, features))

        logger.info(
            "Synthesized %d planet(s) from %s prediction (time_points=%d, flux_std_dev=%.4f)",
            len(planets), prediction.planet_type, features.time_points, features.flux_std_dev
        )
        return planets

    def _primary(self, prediction: PredictionRecord, features: DatasetFeatureVector) -> PlanetRecord:
        habitable_text = "Potentially habitable" if prediction.is_habitable else "Non-habitable"
        atmosphere_text = "atmosphere" if prediction.has_atmosphere else "no atmosphere"
        return PlanetRecord(
            id=1,
            name=f"Extracted Planet ({prediction.planet_type})",
            planet_type=prediction.planet_type,
            probability=prediction.probability,
            radius=prediction.radius,
            distance_from_star=prediction.distance_from_star,
            has_water=prediction.has_water,
            has_atmosphere=prediction.has_atmosphere,
            is_habitable=prediction.is_habitable,
            temperature=prediction.temperature,
            confidence=prediction.confidence,
            color=HABITABLE_COLOR if prediction.is_habitable else NON_HABITABLE_COLOR,
            dataset_info=features,
            description=f"AI-analyzed planet from your dataset. {habitable_text} world with {atmosphere_text}."
        )

    def _companion(self, prediction: PredictionRecord, features: DatasetFeatureVector) -> PlanetRecord:
        # Draw order is fixed so a seed always reproduces the same planet
        radius = prediction.radius * self._uniform(0.8, 1.2)
        distance = prediction.distance_from_star * self._uniform(0.7, 1.3)
        has_water = self._bernoulli(0.5)
        has_atmosphere = self._bernoulli(0.7)
        is_habitable = self._bernoulli(0.4)
        temperature = prediction.temperature * self._uniform(0.8, 1.2)

        return PlanetRecord(
            id=2,
            name=f"Companion {prediction.planet_type}",
            planet_type=prediction.planet_type,
            probability=prediction.probability * 0.8,
            radius=radius,
            distance_from_star=distance,
            has_water=has_water,
            has_atmosphere=has_atmosphere,
            is_habitable=is_habitable,
            temperature=temperature,
            confidence=prediction.confidence * 0.9,
            color=COMPANION_COLOR,
            dataset_info=features,
            description="Companion planet detected in the same system. Similar characteristics to the main planet."
        )

    def _transit(self, prediction: PredictionRecord, features: DatasetFeatureVector) -> PlanetRecord:
        radius = prediction.radius * self._uniform(0.5, 1.0)
        distance = prediction.distance_from_star * self._uniform(0.3, 0.7)
        has_atmosphere = self._bernoulli(0.3)
        temperature = prediction.temperature * self._uniform(1.2, 2.0)

        return PlanetRecord(
            id=3,
            name="Transit Planet",
            planet_type="Gas Giant",
            probability=prediction.probability * 0.7,
            radius=radius,
            distance_from_star=distance,
            has_water=False,
            has_atmosphere=has_atmosphere,
            is_habitable=False,
            temperature=temperature,
            confidence=prediction.confidence * 0.8,
            color=TRANSIT_COLOR,
            dataset_info=features,
            description=(
                "Gas giant planet detected through transit analysis. "
                "High flux variations indicate significant atmospheric activity."
            )
        )

    def _uniform(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))

    def _bernoulli(self, p: float) -> bool:
        return bool(self.rng.random() < p)
