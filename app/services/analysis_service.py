import asyncio
import logging
import time
import numpy as np
from collections import deque
from typing import List, Optional, Sequence
from app.schemas import (
    PredictionRecord, DatasetFeatureVector, SynthesisResponse,
    ArchiveFetchResponse
)
from app.settings import settings
from .planet_synthesis import PlanetSynthesisEngine

logger = logging.getLogger(__name__)


class AnalysisService:
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(AnalysisService, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._history = deque(maxlen=settings.history_size)
        self._initialized = True

    def analyze(self, prediction: PredictionRecord, features: Optional[DatasetFeatureVector] = None,
                seed: Optional[int] = None) -> SynthesisResponse:
        """Derive the planet population for one analysis and record it in the history"""
        features = features if features is not None else DatasetFeatureVector()
        seed = self._resolve_seed(seed)

        engine = PlanetSynthesisEngine(
            np.random.default_rng(seed),
            companion_time_points_threshold=settings.companion_time_points_threshold,
            transit_flux_std_threshold=settings.transit_flux_std_threshold
        )
        planets = engine.synthesize(prediction, features)
        self._history.appendleft(prediction)

        return SynthesisResponse(
            planets=planets,
            total_planets=len(planets),
            seed=seed,
            features=features
        )

    def history(self) -> List[PredictionRecord]:
        return list(self._history)

    @property
    def history_size(self) -> int:
        return self._history.maxlen

    def clear_history(self):
        self._history.clear()

    def _resolve_seed(self, seed: Optional[int]) -> int:
        if seed is not None:
            return seed
        if settings.random_seed is not None:
            return settings.random_seed
        # fresh entropy, echoed back so the run can be reproduced
        return int(np.random.default_rng().integers(0, 2**32))

    @staticmethod
    def extract_features(time_values: Sequence[Optional[float]], flux_values: Sequence[Optional[float]]) -> DatasetFeatureVector:
        """Summarize a light curve; samples that are missing or not finite are dropped"""
        times = np.asarray([np.nan if t is None else t for t in time_values], dtype=float)
        flux = np.asarray([np.nan if f is None else f for f in flux_values], dtype=float)
        times = times[np.isfinite(times)]
        flux = flux[np.isfinite(flux)]

        if flux.size == 0:
            flux_stats = dict(flux_mean=0.0, flux_min=0.0, flux_max=0.0, flux_std_dev=0.0)
        else:
            flux_stats = dict(
                flux_mean=float(np.mean(flux)),
                flux_min=float(np.min(flux)),
                flux_max=float(np.max(flux)),
                flux_std_dev=float(np.std(flux))
            )

        return DatasetFeatureVector(
            time_points=int(times.size),
            flux_points=int(flux.size),
            time_range=float(np.ptp(times)) if times.size else 0.0,
            **flux_stats
        )

    async def fetch_archive_data(self, api_key: str, target_id: str,
                                 delay: Optional[float] = None,
                                 timeout: Optional[float] = None) -> ArchiveFetchResponse:
        """
        Simulated call to the NASA archive.

        No network traffic happens; the call only waits for `delay` seconds
        under a `timeout`, like the real request would.
        """
        if not api_key or not target_id:
            raise ValueError("Please enter both API key and target ID")

        delay = settings.archive_fetch_delay if delay is None else delay
        timeout = settings.archive_fetch_timeout if timeout is None else timeout

        start_time = time.time()
        await asyncio.wait_for(asyncio.sleep(delay), timeout=timeout)
        elapsed = time.time() - start_time

        logger.info("Simulated archive fetch for %s finished in %.2fs", target_id, elapsed)
        return ArchiveFetchResponse(
            target_id=target_id,
            status="simulated",
            message="Data fetched successfully! (This is a simulation)",
            elapsed_seconds=elapsed
        )
