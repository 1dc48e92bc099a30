"""FastAPI dependency injection."""

from src.data.zone_catalog import list_zones
from src.models.zone import Zone


def get_zones() -> list[Zone]:
    return list_zones()
