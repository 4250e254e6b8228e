"""Catalog records for transitsim."""

from transitsim.data.catalog import PlanetRecord, in_habitable_zone, planet_type

__all__ = ["PlanetRecord", "in_habitable_zone", "planet_type"]
