from .planet_catalog import CATALOG_PLANETS, catalog_planets

__all__ = ["CATALOG_PLANETS", "catalog_planets"]
