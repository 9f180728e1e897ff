"""Service for emissions calculations."""

import logging
from typing import Dict, Optional, Union

from ..config import Config
from ..data_loader import load_route_table
from ..distance_resolver import DistanceResolver, build_resolver
from ..emissions import estimate, format_mass, generate_comparisons, offset_cost
from ..models.calculation import CalculationInput, CalculationResult
from ..models.emissions import ComparisonConstants, EmissionFactorTable, EmissionsRequest
from ..utils import format_number, parse_float_prefix, round_half_up
from ..validator import Validator

logger = logging.getLogger(__name__)

COMPARISON_HEADING = "This is equivalent to:"


def build_calculation_result(
    form: CalculationInput,
    distance_km: float,
    factors: Optional[EmissionFactorTable] = None,
    comparison_constants: Optional[ComparisonConstants] = None,
) -> CalculationResult:
    """
    Turn validated input and a resolved distance into display output.

    Total and per-passenger masses are formatted independently, each against
    its own metric-ton threshold.
    """
    result = estimate(
        EmissionsRequest(
            distance_km=distance_km,
            cabin_class=form.cabin_class,
            passengers=form.passengers,
        ),
        factors,
    )
    plural = "s" if form.passengers > 1 else ""

    return CalculationResult(
        departure=form.departure,
        arrival=form.arrival,
        cabin_class=form.cabin_class,
        passengers=form.passengers,
        distance_km=distance_km,
        distance_display=f"~{format_number(round_half_up(distance_km))} km",
        total_co2e_kg=result.total_co2e_kg,
        per_passenger_co2e_kg=result.per_passenger_co2e_kg,
        total_display=format_mass(result.total_co2e_kg),
        per_passenger_display=format_mass(result.per_passenger_co2e_kg),
        total_label=f"Total for {form.passengers} passenger{plural}",
        comparison_heading=COMPARISON_HEADING,
        comparisons=generate_comparisons(result.total_co2e_kg, comparison_constants),
    )


class CalculatorService:
    """Validates calculator input, resolves distances and builds estimates.
    
    Concurrent calculations are independent: nothing is deduplicated or
    cancelled. The only shared state is the count of calculations waiting on
    the resolver, which backs the loading flag.
    """
    
    def __init__(
        self,
        config: Optional[Config] = None,
        resolver: Optional[DistanceResolver] = None,
        factors: Optional[EmissionFactorTable] = None,
        comparison_constants: Optional[ComparisonConstants] = None,
    ):
        """
        Initialize calculator service.
        
        Args:
            config: Application configuration
            resolver: Distance resolver (built from config if omitted)
            factors: Emission factor table
            comparison_constants: Equivalence constants
        """
        self.config = config or Config()
        self.resolver = resolver or build_resolver(self.config, load_route_table(self.config.ROUTES_CSV))
        self.factors = factors or EmissionFactorTable()
        self.comparison_constants = comparison_constants or ComparisonConstants()
        self.validator = Validator()
        self.pending_calculations = 0
    
    @property
    def loading(self) -> bool:
        """True while at least one calculation is waiting on a distance."""
        return self.pending_calculations > 0
    
    async def calculate(
        self,
        departure: Optional[str],
        arrival: Optional[str],
        cabin_class: Optional[str],
        passengers: Union[str, int, float, None],
    ) -> CalculationResult:
        """
        Run a full calculation from raw form values.
        
        Raises:
            FormValidationError: If the form is invalid
            DistanceLookupError: If a remote resolver fails
        """
        form = self.validator.validate_calculation(departure, arrival, cabin_class, passengers)
        
        self.pending_calculations += 1
        try:
            distance_km = await self.resolver.resolve_distance(form.departure, form.arrival)
        finally:
            self.pending_calculations -= 1
        
        result = build_calculation_result(form, distance_km, self.factors, self.comparison_constants)
        logger.info(
            f"Calculated {form.departure}-{form.arrival} ({form.cabin_class}, {form.passengers} pax): "
            f"{distance_km} km, {result.total_co2e_kg:.1f} kg CO2e"
        )
        return result
    
    def get_offset(self, amount: Union[str, float, None]) -> Dict:
        """
        Price an offset for a raw amount input. Non-numeric input counts as 0 kg.
        
        Returns:
            Dictionary with the parsed amount and the formatted cost
        """
        amount_kg = parse_float_prefix(amount)
        return {"amount_kg": amount_kg, "cost": offset_cost(amount_kg)}
    
    def get_status(self) -> Dict:
        """Get the loading flag and number of in-flight calculations."""
        return {
            "loading": self.loading,
            "pending_calculations": self.pending_calculations,
        }
