from __future__ import annotations

import numpy as np
import pytest
from fastapi.testclient import TestClient

from api import app
from app.schemas import DatasetFeatureVector, PredictionRecord
from app.services import AnalysisService, SceneService


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def prediction() -> PredictionRecord:
    return PredictionRecord(
        planet_type="Super Earth",
        probability=0.9,
        radius=1.5,
        distance_from_star=1.2,
        has_water=True,
        has_atmosphere=True,
        is_habitable=True,
        temperature=280.0,
        confidence=0.8,
    )


@pytest.fixture
def small_dataset() -> DatasetFeatureVector:
    return DatasetFeatureVector(
        time_points=1000,
        flux_points=1000,
        time_range=10.0,
        flux_mean=1.0,
        flux_min=0.99,
        flux_max=1.01,
        flux_std_dev=0.005,
    )


@pytest.fixture
def rich_dataset() -> DatasetFeatureVector:
    return DatasetFeatureVector(
        time_points=6000,
        flux_points=6000,
        time_range=27.0,
        flux_mean=1.0,
        flux_min=0.95,
        flux_max=1.05,
        flux_std_dev=0.02,
    )


@pytest.fixture(autouse=True)
def clean_services():
    SceneService().reset()
    AnalysisService().clear_history()
    yield
    SceneService().reset()
    AnalysisService().clear_history()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
