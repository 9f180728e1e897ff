"""Route table model."""

from typing import Dict
from pydantic import BaseModel, Field

from ..config import DEFAULT_DISTANCE_KM, ROUTE_DATABASE


def route_key(departure: str, arrival: str) -> str:
    """Build the "FROM-TO" key used by the route table."""
    return f"{departure}-{arrival}"


class RouteTable(BaseModel):
    """Known route distances in km, keyed "FROM-TO".
    
    Entries are usually present in both directions, but nothing enforces it.
    """
    
    distances: Dict[str, int] = Field(default_factory=lambda: dict(ROUTE_DATABASE))
    default_distance_km: int = DEFAULT_DISTANCE_KM
    
    def lookup(self, departure: str, arrival: str) -> int:
        """Exact-match lookup with the default distance for unknown pairs."""
        distance = self.distances.get(route_key(departure, arrival))
        if not distance:
            return self.default_distance_km
        return distance
    
    def merged_with(self, extra: Dict[str, int]) -> "RouteTable":
        """Return a copy where `extra` entries override existing ones."""
        return RouteTable(
            distances={**self.distances, **extra},
            default_distance_km=self.default_distance_km,
        )
    
    class Config:
        json_schema_extra = {
            "example": {
                "distances": {"LHR-JFK": 5550, "JFK-LHR": 5550},
                "default_distance_km": 2500,
            }
        }
