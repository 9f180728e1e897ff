"""Eco route option model."""

from pydantic import BaseModel


class EcoRouteOption(BaseModel):
    """A flight option shown by the eco route finder."""
    
    airline: str
    flight_no: str
    departure: str
    arrival: str
    duration: str
    aircraft: str
    stops: str
    emissions: str
    price: str
    
    class Config:
        json_schema_extra = {
            "example": {
                "airline": "EcoAir",
                "flight_no": "EA 123",
                "departure": "08:00",
                "arrival": "11:00",
                "duration": "3h 0m",
                "aircraft": "Boeing 787",
                "stops": "Non-stop",
                "emissions": "120 kg CO₂",
                "price": "$350",
            }
        }
