"""Eco route finder with fixed sample results."""

import asyncio
import logging
from typing import Dict, List, Optional

from ..models.eco_route import EcoRouteOption
from ..utils import format_date
from ..validator import Validator

logger = logging.getLogger(__name__)

MOCK_ROUTE_RESULTS: List[Dict[str, str]] = [
    {
        "airline": "EcoAir",
        "flight_no": "EA 123",
        "departure": "08:00",
        "arrival": "11:00",
        "duration": "3h 0m",
        "aircraft": "Boeing 787",
        "stops": "Non-stop",
        "emissions": "120 kg CO₂",
        "price": "$350",
    },
    {
        "airline": "GreenWings",
        "flight_no": "GW 456",
        "departure": "10:30",
        "arrival": "14:15",
        "duration": "3h 45m",
        "aircraft": "Airbus A350",
        "stops": "Non-stop",
        "emissions": "135 kg CO₂",
        "price": "$320",
    },
    {
        "airline": "SkyEco",
        "flight_no": "SE 789",
        "departure": "13:15",
        "arrival": "17:30",
        "duration": "4h 15m",
        "aircraft": "Boeing 787",
        "stops": "1 stop (DXB)",
        "emissions": "150 kg CO₂",
        "price": "$290",
    },
]


class RouteFinderService:
    """Returns the same sample options for every search, after a delay."""
    
    def __init__(self, delay_seconds: float = 1.5):
        self.delay_seconds = delay_seconds
        self.validator = Validator()
    
    async def search(self, origin: Optional[str], destination: Optional[str], travel_date: Optional[str] = None) -> Dict:
        """
        Search eco-friendly options between two places.
        
        Args:
            origin: Departure (free text)
            destination: Destination (free text)
            travel_date: Optional ISO date
            
        Returns:
            Dictionary with heading, formatted date and options
            
        Raises:
            FormValidationError: If origin or destination is empty
            ValueError: If travel_date is not an ISO date
        """
        origin, destination = self.validator.validate_route_search(origin, destination)
        formatted_date = format_date(travel_date) if travel_date else None
        
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        
        logger.info(f"Route search {origin} -> {destination}")
        return {
            "heading": f"Eco-Friendly Options from {origin} to {destination}",
            "date": formatted_date,
            "options": [EcoRouteOption(**r) for r in MOCK_ROUTE_RESULTS],
        }
