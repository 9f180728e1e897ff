"""Tests for calculator service."""

import asyncio

import pytest
from ecoflight.config import Config
from ecoflight.distance_resolver import DistanceLookupError, DistanceResolver, RouteTableResolver
from ecoflight.models.calculation import CalculationInput
from ecoflight.models.route import RouteTable
from ecoflight.services.calculator_service import CalculatorService, build_calculation_result
from ecoflight.validator import FormValidationError


class FailingResolver(DistanceResolver):
    """Resolver that always fails like an unreachable service."""
    
    async def resolve_distance(self, departure, arrival):
        raise DistanceLookupError("Distance service unavailable")


class GatedResolver(DistanceResolver):
    """Resolver that waits until released, to observe the loading flag."""
    
    def __init__(self):
        self.release = None
    
    async def resolve_distance(self, departure, arrival):
        await self.release.wait()
        return 1000


@pytest.fixture
def calculator():
    """Create calculator service with an instant route table resolver."""
    return CalculatorService(
        config=Config(RESOLVER_DELAY_SECONDS=0),
        resolver=RouteTableResolver(RouteTable(), delay_seconds=0),
    )


def test_end_to_end_lax_ord_business(calculator):
    """Test LAX-ORD business for two passengers."""
    result = asyncio.run(calculator.calculate("LAX", "ORD", "business", 2))
    
    assert result.distance_km == 2800
    assert result.distance_display == "~2800 km"
    assert result.total_co2e_kg == pytest.approx(1456.0)
    assert result.total_display == "1.5 metric tons"
    assert result.per_passenger_co2e_kg == pytest.approx(728.0)
    assert result.per_passenger_display == "728 kg"
    assert result.total_label == "Total for 2 passengers"
    assert result.comparison_heading == "This is equivalent to:"
    assert len(result.comparisons) == 4


def test_single_passenger_label(calculator):
    """Test singular passenger label and low-emission comparisons."""
    result = asyncio.run(calculator.calculate("lhr", "jfk", "economy", "1"))
    
    assert result.departure == "LHR"
    assert result.arrival == "JFK"
    assert result.total_co2e_kg == pytest.approx(499.5)
    assert result.total_display == "500 kg"
    assert result.total_label == "Total for 1 passenger"
    assert len(result.comparisons) == 3


def test_unknown_route_and_class(calculator):
    """Test unknown routes use 2500 km and unknown classes use economy."""
    result = asyncio.run(calculator.calculate("AAA", "ZZZ", "galaxy", 1))
    assert result.distance_km == 2500
    assert result.total_co2e_kg == pytest.approx(225.0)
    assert result.total_display == "225 kg"


def test_total_and_per_passenger_formatted_independently(calculator):
    """Test each figure is checked against its own ton threshold."""
    result = asyncio.run(calculator.calculate("SFO", "DXB", "first", 3))
    # 13000 * 0.40 = 5200 kg each, 15600 kg total
    assert result.total_display == "15.6 metric tons"
    assert result.per_passenger_display == "5.2 metric tons"


def test_validation_error_skips_resolver(calculator):
    """Test invalid forms fail before any distance lookup."""
    calculator.resolver = FailingResolver()
    with pytest.raises(FormValidationError):
        asyncio.run(calculator.calculate("LHR", "LHR", "economy", 1))


def test_resolver_failure_propagates(calculator):
    """Test remote lookup failures reach the caller and clear loading."""
    calculator.resolver = FailingResolver()
    with pytest.raises(DistanceLookupError):
        asyncio.run(calculator.calculate("LHR", "JFK", "economy", 1))
    assert calculator.loading is False
    assert calculator.pending_calculations == 0


def test_loading_flag_while_resolving(calculator):
    """Test the loading flag is set while calculations are in flight."""
    resolver = GatedResolver()
    calculator.resolver = resolver
    
    async def scenario():
        resolver.release = asyncio.Event()
        first = asyncio.create_task(calculator.calculate("LHR", "JFK", "economy", 1))
        second = asyncio.create_task(calculator.calculate("LAX", "ORD", "first", 2))
        await asyncio.sleep(0)
        status_during = calculator.get_status()
        resolver.release.set()
        results = await asyncio.gather(first, second)
        return status_during, results
    
    status_during, results = asyncio.run(scenario())
    
    assert status_during == {"loading": True, "pending_calculations": 2}
    assert calculator.get_status() == {"loading": False, "pending_calculations": 0}
    assert [r.total_co2e_kg for r in results] == [pytest.approx(90.0), pytest.approx(800.0)]


def test_build_calculation_result_is_pure():
    """Test identical inputs build identical results."""
    form = CalculationInput(departure="CDG", arrival="BCN", cabin_class="premium", passengers=4)
    assert build_calculation_result(form, 850) == build_calculation_result(form, 850)


@pytest.mark.parametrize("amount,expected_kg,expected_cost", [
    ("1000", 1000.0, "15.00"),
    ("", 0.0, "0.00"),
    ("abc", 0.0, "0.00"),
    (None, 0.0, "0.00"),
    ("250kg", 250.0, "3.75"),
])
def test_get_offset(calculator, amount, expected_kg, expected_cost):
    """Test offset pricing from raw input."""
    assert calculator.get_offset(amount) == {"amount_kg": expected_kg, "cost": expected_cost}
