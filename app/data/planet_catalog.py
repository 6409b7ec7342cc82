from typing import List
from app.schemas import PlanetRecord

# Roster shown when a scene is created without analyzed planets
CATALOG_PLANETS = [
    {
        "id": 1,
        "name": "Kepler-452b",
        "planet_type": "Super Earth",
        "radius": 1.63,
        "distance_from_star": 1.046,
        "temperature": 265,
        "has_water": True,
        "has_atmosphere": True,
        "is_habitable": True,
        "probability": 0.97,
        "confidence": 0.91,
        "color": "#1E90FF",
        "description": "Earth's Cousin - Terrestrial world with deep blue oceans and green continents"
    },
    {
        "id": 2,
        "name": "Proxima Centauri b",
        "planet_type": "Rocky",
        "radius": 1.07,
        "distance_from_star": 0.0485,
        "temperature": 234,
        "has_water": False,
        "has_atmosphere": False,
        "is_habitable": True,
        "probability": 0.95,
        "confidence": 0.88,
        "color": "#B22222",
        "description": "Rocky, tidally-locked planet with dark red cratered surface"
    },
    {
        "id": 3,
        "name": "TRAPPIST-1e",
        "planet_type": "Ocean World",
        "radius": 0.92,
        "distance_from_star": 0.029,
        "temperature": 251,
        "has_water": True,
        "has_atmosphere": True,
        "is_habitable": True,
        "probability": 0.93,
        "confidence": 0.85,
        "color": "#4169E1",
        "description": "Ocean world dominated by deep blue water with volcanic islands"
    },
    {
        "id": 4,
        "name": "K2-18b",
        "planet_type": "Hycean",
        "radius": 2.61,
        "distance_from_star": 0.1429,
        "temperature": 255,
        "has_water": True,
        "has_atmosphere": True,
        "is_habitable": False,
        "probability": 0.9,
        "confidence": 0.8,
        "color": "#3F2A88",
        "description": "Hycean water-world with thick hydrogen atmosphere"
    },
]


def catalog_planets() -> List[PlanetRecord]:
    return [PlanetRecord(**planet) for planet in CATALOG_PLANETS]
