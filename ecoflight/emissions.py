"""Emissions estimation, mass formatting, equivalence comparisons and offset pricing."""

from typing import List, Optional

from .config import METRIC_TON_THRESHOLD_KG, OFFSET_PRICE_PER_KG
from .models.emissions import (
    Comparison,
    ComparisonConstants,
    EmissionFactorTable,
    EmissionsRequest,
    EmissionsResult,
)
from .utils import format_number, round_half_up, to_fixed

_DEFAULT_FACTORS = EmissionFactorTable()
_DEFAULT_COMPARISONS = ComparisonConstants()

ICON_GASOLINE = "fas fa-gas-pump"
ICON_CAR = "fas fa-car"
ICON_CALENDAR = "fas fa-calendar"
ICON_TREE = "fas fa-tree"


def estimate_co2e(
    distance_km: float,
    cabin_class: str,
    passengers: int,
    factors: Optional[EmissionFactorTable] = None,
) -> float:
    """
    Calculate total CO2e for a flight.

    Formula: distance_km * emission_factor(cabin_class) * passengers.
    Unrecognized cabin classes use the economy factor.

    Args:
        distance_km: Flight distance in km
        cabin_class: Cabin class identifier (economy, premium, business, first)
        passengers: Number of passengers
        factors: Emission factor table (defaults to the standard factors)

    Returns:
        Total CO2e in kg
    """
    table = factors or _DEFAULT_FACTORS
    return distance_km * table.factor_for(cabin_class) * passengers


def per_passenger_co2e(total_co2e_kg: float, passengers: int) -> float:
    """Split a total estimate evenly across passengers (passengers >= 1)."""
    return total_co2e_kg / passengers


def estimate(request: EmissionsRequest, factors: Optional[EmissionFactorTable] = None) -> EmissionsResult:
    """Estimate total and per-passenger CO2e for a request."""
    total = estimate_co2e(request.distance_km, request.cabin_class, request.passengers, factors)
    return EmissionsResult(
        total_co2e_kg=total,
        per_passenger_co2e_kg=per_passenger_co2e(total, request.passengers),
    )


def format_mass(kg: float) -> str:
    """
    Format a CO2e mass for display.

    Examples:
        >>> format_mass(999)
        '999 kg'
        >>> format_mass(1000)
        '1.0 metric tons'
        >>> format_mass(2549)
        '2.5 metric tons'
    """
    if kg >= METRIC_TON_THRESHOLD_KG:
        return f"{to_fixed(kg / 1000, 1)} metric tons"
    return f"{format_number(round_half_up(kg))} kg"


def _thousands(value: float) -> str:
    # 12133 -> 12.1
    return format_number(round_half_up(value / 100) / 10)


def _rounded(value: float) -> str:
    return format_number(round_half_up(value))


def generate_comparisons(
    total_co2e_kg: float,
    constants: Optional[ComparisonConstants] = None,
) -> List[Comparison]:
    """
    Express a CO2e total as everyday equivalents.

    Totals of a metric ton or more get four items (gasoline and driving in
    thousands, months of car emissions, trees); smaller totals get three
    (gasoline, driving, trees).

    Args:
        total_co2e_kg: Total CO2e in kg
        constants: Equivalence constants (defaults to the standard ones)

    Returns:
        Comparisons in display order
    """
    c = constants or _DEFAULT_COMPARISONS

    liters_of_gasoline = total_co2e_kg / c.kg_co2_per_liter_gasoline
    km_by_car = total_co2e_kg / c.car_kg_co2_per_km
    car_months = (total_co2e_kg / c.car_kg_co2_per_year) * 12
    trees_needed = total_co2e_kg / c.tree_kg_co2_per_year

    trees = Comparison(
        icon=ICON_TREE,
        text=f"{_rounded(trees_needed)} trees needed to absorb this CO₂ in one year",
    )

    if total_co2e_kg >= METRIC_TON_THRESHOLD_KG:
        return [
            Comparison(
                icon=ICON_GASOLINE,
                text=f"Burning {_thousands(liters_of_gasoline)} thousand liters of gasoline",
            ),
            Comparison(
                icon=ICON_CAR,
                text=f"Driving {_thousands(km_by_car)} thousand km in an average car",
            ),
            Comparison(
                icon=ICON_CALENDAR,
                text=f"{_rounded(car_months)} months of an average car's emissions",
            ),
            trees,
        ]

    return [
        Comparison(icon=ICON_GASOLINE, text=f"Burning {_rounded(liters_of_gasoline)} liters of gasoline"),
        Comparison(icon=ICON_CAR, text=f"Driving {_rounded(km_by_car)} km in an average car"),
        trees,
    ]


def offset_cost(kg_co2: float, price_per_kg: float = OFFSET_PRICE_PER_KG) -> str:
    """
    Price a carbon offset in dollars, formatted with two decimals.

    Examples:
        >>> offset_cost(1000)
        '15.00'
    """
    return to_fixed(kg_co2 * price_per_kg, 2)
