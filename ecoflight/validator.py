"""Validator module for calculator and route finder form input."""

import logging
from typing import Optional, Tuple, Union

from .config import DEFAULT_CABIN_CLASS
from .models.calculation import CalculationInput
from .utils import parse_int_prefix

logger = logging.getLogger(__name__)

MISSING_AIRPORTS = "Please enter both departure and arrival airports"
SAME_AIRPORTS = "Departure and arrival airports cannot be the same"
INVALID_PASSENGERS = "Please enter a valid number of passengers"
MISSING_ROUTE_ENDPOINTS = "Please enter both departure and destination"


class FormValidationError(Exception):
    """Raised when form input fails validation. Carries one user-facing message."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


def normalize_airport_code(code: Optional[str]) -> str:
    """Trim and upper-case an airport code ("" for None)."""
    return (code or "").strip().upper()


class Validator:
    """Validates form input before it reaches the emissions core."""

    def validate_calculation(
        self,
        departure: Optional[str],
        arrival: Optional[str],
        cabin_class: Optional[str],
        passengers: Union[str, int, float, None],
    ) -> CalculationInput:
        """
        Validate calculator form values.

        Checks run in order and the first failure wins: both airports given,
        airports differ, passengers is a positive integer. Cabin class is not
        checked; unknown classes are priced as economy downstream.

        Args:
            departure: Departure airport code (any case, may have whitespace)
            arrival: Arrival airport code
            cabin_class: Cabin class identifier
            passengers: Passenger count as entered (string or number)

        Returns:
            Normalized CalculationInput

        Raises:
            FormValidationError: On the first failed check
        """
        dep = normalize_airport_code(departure)
        arr = normalize_airport_code(arrival)

        if not dep or not arr:
            raise FormValidationError(MISSING_AIRPORTS, field="departure" if not dep else "arrival")

        if dep == arr:
            raise FormValidationError(SAME_AIRPORTS, field="arrival")

        count = parse_int_prefix(passengers)
        if count is None or count < 1:
            raise FormValidationError(INVALID_PASSENGERS, field="passengers")

        logger.debug(f"Validated calculation {dep}-{arr}, {cabin_class}, {count} pax")
        return CalculationInput(
            departure=dep,
            arrival=arr,
            cabin_class=cabin_class if cabin_class is not None else DEFAULT_CABIN_CLASS,
            passengers=count,
        )

    def validate_route_search(self, origin: Optional[str], destination: Optional[str]) -> Tuple[str, str]:
        """
        Validate eco route finder input. Values are trimmed but keep their case.

        Raises:
            FormValidationError: If either endpoint is empty
        """
        origin = (origin or "").strip()
        destination = (destination or "").strip()
        if not origin or not destination:
            raise FormValidationError(MISSING_ROUTE_ENDPOINTS)
        return origin, destination
