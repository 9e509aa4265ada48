"""
Ride Service: Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract of the rides endpoints.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation at /docs.

Design Decision:
    RideCreate accepts every field as `Any`. The ride rules (bounds, non-empty
    strings, check order, exact messages) live in services/validation.py so a
    bad value produces the catalog message with a 400 instead of Pydantic's
    generic 422 detail list.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class RideCreate(BaseModel):
    """
    Raw POST /rides body. Unknown keys are ignored; missing keys are None
    and rejected by the validation layer.
    """
    start_lat: Any = Field(default=None, description="Pickup latitude, -90 to 90", examples=[1])
    start_long: Any = Field(default=None, description="Pickup longitude, -180 to 180", examples=[2])
    end_lat: Any = Field(default=None, description="Dropoff latitude, -90 to 90", examples=[3])
    end_long: Any = Field(default=None, description="Dropoff longitude, -180 to 180", examples=[4])
    rider_name: Any = Field(default=None, description="Non-empty rider name", examples=["test"])
    driver_name: Any = Field(default=None, description="Non-empty driver name", examples=["test"])
    driver_vehicle: Any = Field(default=None, description="Non-empty vehicle name", examples=["test"])

    model_config = {"extra": "ignore"}


class NewRide(BaseModel):
    """Validated ride fields, ready to insert."""
    start_lat: float
    start_long: float
    end_lat: float
    end_long: float
    rider_name: str
    driver_name: str
    driver_vehicle: str


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class RideResponse(BaseModel):
    """
    Full representation of a stored ride.
    Returned by POST /rides, GET /rides/{id}, and as items of the list endpoints.
    """
    id: int = Field(description="Ride identifier")
    start_lat: float = Field(description="Pickup latitude")
    start_long: float = Field(description="Pickup longitude")
    end_lat: float = Field(description="Dropoff latitude")
    end_long: float = Field(description="Dropoff longitude")
    rider_name: str = Field(description="Rider name")
    driver_name: str = Field(description="Driver name")
    driver_vehicle: str = Field(description="Driver vehicle")
    created: datetime = Field(description="When the ride was recorded (ISO 8601)")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Error body shared by every endpoint.

    Example:
        {
            "error_code": "RIDES_NOT_FOUND_ERROR",
            "message": "Could not find any rides"
        }
    """
    error_code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
