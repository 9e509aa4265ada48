"""
Ride Service: Ride Input Validation
===================================

What:  Pure functions that check a POST /rides body against the ride rules.
How:   Checks run in a fixed order and the first failure raises
       ValidationError with a catalog message:

           1. start coordinates   START_COORDINATES_MESSAGE
           2. end coordinates     END_COORDINATES_MESSAGE
           3. rider_name          RIDER_NAME_MESSAGE
           4. driver_name         DRIVER_NAME_MESSAGE
           5. driver_vehicle      DRIVER_VEHICLE_MESSAGE

Who:   Called by RideService.create_ride before anything touches the database.
"""

import math
from typing import Any, Mapping

from ride_service.exceptions import ValidationError
from ride_service.schemas.ride import NewRide

START_COORDINATES_MESSAGE = (
    "Start latitude and longitude must be between -90 - 90 and -180 to 180 degrees respectively"
)
END_COORDINATES_MESSAGE = (
    "End latitude and longitude must be between -90 - 90 and -180 to 180 degrees respectively"
)
RIDER_NAME_MESSAGE = "Rider name must be a non empty string"
DRIVER_NAME_MESSAGE = "Driver name must be a non empty string"
DRIVER_VEHICLE_MESSAGE = "Driver vehicle name must be a non empty string"
PAGE_NUMBER_MESSAGE = "Page must be an integer"

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

# len(str(2 ** 63 - 1)); longer digit strings never name a stored row
MAX_INTEGER_DIGITS = 19
PAGE_OVERFLOW = 10 ** MAX_INTEGER_DIGITS


def is_number_in_range(value: Any, bounds: tuple) -> bool:
    """
    True when value is a finite real number within bounds (inclusive).

    bool is a subclass of int in Python but is never a coordinate.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if not math.isfinite(value):
        return False
    low, high = bounds
    return low <= value <= high


def is_valid_coordinate(lat: Any, long: Any) -> bool:
    return is_number_in_range(lat, LATITUDE_RANGE) and is_number_in_range(long, LONGITUDE_RANGE)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def validate_ride_payload(payload: Mapping[str, Any]) -> NewRide:
    """
    Validate a raw ride body and return the typed fields.

    Args:
        payload: Mapping of request fields. Missing keys count as invalid.

    Returns:
        NewRide with float coordinates and string names.

    Raises:
        ValidationError: First rule that fails, in the order listed in the
        module docstring.
    """
    if not is_valid_coordinate(payload.get("start_lat"), payload.get("start_long")):
        raise ValidationError(
            message=START_COORDINATES_MESSAGE,
            field="start",
            context={"start_lat": payload.get("start_lat"), "start_long": payload.get("start_long")},
        )

    if not is_valid_coordinate(payload.get("end_lat"), payload.get("end_long")):
        raise ValidationError(
            message=END_COORDINATES_MESSAGE,
            field="end",
            context={"end_lat": payload.get("end_lat"), "end_long": payload.get("end_long")},
        )

    for field, message in (
        ("rider_name", RIDER_NAME_MESSAGE),
        ("driver_name", DRIVER_NAME_MESSAGE),
        ("driver_vehicle", DRIVER_VEHICLE_MESSAGE),
    ):
        if not is_non_empty_string(payload.get(field)):
            raise ValidationError(message=message, field=field)

    return NewRide(
        start_lat=float(payload["start_lat"]),
        start_long=float(payload["start_long"]),
        end_lat=float(payload["end_lat"]),
        end_long=float(payload["end_long"]),
        rider_name=payload["rider_name"],
        driver_name=payload["driver_name"],
        driver_vehicle=payload["driver_vehicle"],
    )


def _significant_digits(digits: str) -> int:
    return len(digits.lstrip("0"))


def parse_positive_int(value: Any) -> int:
    """
    Parse a path segment as a strictly positive integer.

    Accepts ints and base-10 digit strings ("7", " 7"); rejects "abc", "1.5",
    "0", "-3" and booleans. Digit strings wider than a 64-bit integer are
    rejected before conversion.

    Raises:
        ValueError: value is not a positive integer.
    """
    if isinstance(value, bool):
        raise ValueError(f"not a positive integer: {value!r}")
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip()
        if not (text.isascii() and text.isdigit()):
            raise ValueError(f"not a positive integer: {value!r}")
        if _significant_digits(text) > MAX_INTEGER_DIGITS:
            raise ValueError(f"integer out of range: {text[:20]}...")
        number = int(text)
    if number < 1:
        raise ValueError(f"not a positive integer: {value!r}")
    return number


def parse_page_number(value: Any) -> int:
    """
    Parse a page path segment as an integer (may be zero or negative).

    A digit string wider than a 64-bit integer is clamped to PAGE_OVERFLOW
    (or -PAGE_OVERFLOW), which is past the last page either way.

    Raises:
        ValidationError: value is not an integer.
    """
    text = str(value).strip()
    sign = text[:1] if text[:1] in ("-", "+") else ""
    digits = text[len(sign):]
    if not (digits.isascii() and digits.isdigit()):
        raise ValidationError(
            message=PAGE_NUMBER_MESSAGE,
            field="page",
            context={"page": str(value)[:40]},
        )
    if _significant_digits(digits) > MAX_INTEGER_DIGITS:
        return -PAGE_OVERFLOW if sign == "-" else PAGE_OVERFLOW
    return int(text)
