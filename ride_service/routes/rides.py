"""
Ride Service: Ride Route Handlers
=================================

What:  POST /rides, GET /rides, GET /rides/page/{page}, GET /rides/{ride_id}.
How:   Extracts path/body data, delegates to RideService, returns JSON.
       Errors are raised as application exceptions and rendered by the
       global handlers in main.py.

Path parameters are declared as `str` and parsed here, so a malformed id
becomes a 404 RIDES_NOT_FOUND_ERROR (not FastAPI's 422) and a malformed page
becomes a 400 VALIDATION_ERROR.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ride_service.database import get_db_session
from ride_service.exceptions import NotFoundError
from ride_service.schemas.ride import ErrorResponse, RideCreate, RideResponse
from ride_service.services.ride_service import ride_service
from ride_service.services.validation import parse_page_number, parse_positive_int

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rides", tags=["Rides"])


@router.post(
    "",
    response_model=RideResponse,
    responses={
        200: {"description": "The stored ride, including its id", "model": RideResponse},
        400: {"description": "Invalid ride fields", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Record a ride",
)
async def create_ride(
    payload: RideCreate,
    db: AsyncSession = Depends(get_db_session),
) -> RideResponse:
    """
    Validate and store a ride.

    Checks run in order (start coordinates, end coordinates, rider name,
    driver name, driver vehicle) and the first failure is returned.
    """
    return await ride_service.create_ride(db=db, payload=payload.model_dump())


@router.get(
    "",
    response_model=List[RideResponse],
    responses={
        200: {"description": "All rides in insertion order"},
        404: {"description": "No rides recorded yet", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all rides",
)
async def list_rides(db: AsyncSession = Depends(get_db_session)) -> List[RideResponse]:
    return await ride_service.list_rides(db=db)


@router.get(
    "/page/{page}",
    response_model=List[RideResponse],
    responses={
        200: {"description": "One page of rides; empty past the last page"},
        400: {"description": "Page is not an integer", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List rides one page at a time",
)
async def list_rides_page(
    page: str,
    db: AsyncSession = Depends(get_db_session),
) -> List[RideResponse]:
    """
    Return page `page` (1-based) of the ride list.

    Page size comes from the RIDES_PAGE_SIZE setting.
    """
    return await ride_service.list_rides_page(db=db, page=parse_page_number(page))


@router.get(
    "/{ride_id}",
    response_model=RideResponse,
    responses={
        200: {"description": "The ride", "model": RideResponse},
        404: {"description": "Unknown or malformed ride id", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single ride by id",
)
async def get_ride(
    ride_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> RideResponse:
    try:
        parsed_id = parse_positive_int(ride_id)
    except ValueError:
        raise NotFoundError(resource_id=ride_id)
    return await ride_service.get_ride(db=db, ride_id=parsed_id)
