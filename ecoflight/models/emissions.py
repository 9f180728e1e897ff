"""Emission factor and estimate models."""

from typing import Dict
from pydantic import BaseModel, Field

from ..config import (
    AVG_CAR_ANNUAL_EMISSION,
    AVG_CAR_EMISSION_PER_KM,
    DEFAULT_CABIN_CLASS,
    EMISSION_FACTORS,
    KG_CO2_PER_LITER_GASOLINE,
    TREE_ABSORPTION_PER_YEAR,
)


class EmissionFactorTable(BaseModel):
    """Per-class emission factors in kg CO2e per passenger-km."""
    
    factors: Dict[str, float] = Field(default_factory=lambda: dict(EMISSION_FACTORS))
    default_class: str = DEFAULT_CABIN_CLASS
    
    def factor_for(self, cabin_class: str) -> float:
        """Look up a cabin class factor; unrecognized classes use the default class."""
        factor = self.factors.get(cabin_class)
        # A zero factor counts as missing, like an unknown class
        if not factor:
            return self.factors[self.default_class]
        return factor
    
    class Config:
        json_schema_extra = {
            "example": {
                "factors": {"economy": 0.09, "premium": 0.14, "business": 0.26, "first": 0.40},
                "default_class": "economy",
            }
        }


class ComparisonConstants(BaseModel):
    """Constants used to turn a CO2e mass into everyday equivalents."""
    
    kg_co2_per_liter_gasoline: float = KG_CO2_PER_LITER_GASOLINE
    car_kg_co2_per_km: float = AVG_CAR_EMISSION_PER_KM
    car_kg_co2_per_year: float = AVG_CAR_ANNUAL_EMISSION
    tree_kg_co2_per_year: float = TREE_ABSORPTION_PER_YEAR


class EmissionsRequest(BaseModel):
    """Inputs to a single emissions estimate."""
    
    distance_km: float = Field(..., ge=0)
    cabin_class: str = DEFAULT_CABIN_CLASS
    passengers: int = Field(..., ge=1)


class EmissionsResult(BaseModel):
    """Computed emissions; derived per request and never stored."""
    
    total_co2e_kg: float
    per_passenger_co2e_kg: float


class Comparison(BaseModel):
    """One equivalence line, e.g. liters of gasoline burned."""
    
    icon: str
    text: str
    
    class Config:
        json_schema_extra = {
            "example": {
                "icon": "fas fa-gas-pump",
                "text": "Burning 217 liters of gasoline",
            }
        }
