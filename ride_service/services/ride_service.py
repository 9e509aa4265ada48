"""
Ride Service: Ride Service (Business Logic)
===========================================

What:  Create and read rides: insert, full list, paginated list, lookup by id.
How:   Validates input with services/validation.py, then runs one SQLAlchemy
       statement per operation on the request's AsyncSession.
Who:   Called by the route handlers in routes/rides.py.

Design Decision:
    RideService is stateless. It receives the db session for each call, so
    tests can pass a real in-memory session or an AsyncMock.

Error Translation:
    Validation failures  → ValidationError (raised before any query)
    Empty table / no row → NotFoundError
    SQLAlchemyError      → DatabaseError (original error logged, never returned)
"""

import logging
from typing import Any, List, Mapping

from sqlalchemy import asc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ride_service.config import settings
from ride_service.exceptions import DatabaseError, NotFoundError
from ride_service.models.ride import Ride
from ride_service.schemas.ride import RideResponse
from ride_service.services.validation import validate_ride_payload

logger = logging.getLogger(__name__)

# Largest value a SQL BIGINT / SQLite INTEGER can bind
MAX_SQL_INTEGER = 2 ** 63 - 1


class RideService:
    """
    Business logic layer for ride operations.

    Responsibilities:
        - create_ride(): validate → insert → return the stored ride
        - list_rides(): every ride in insertion order, NotFoundError if none
        - list_rides_page(): one fixed-size page, empty list past the end
        - get_ride(): single ride by id, NotFoundError if absent
    """

    async def create_ride(self, db: AsyncSession, payload: Mapping[str, Any]) -> RideResponse:
        """
        Validate and store a new ride.

        Args:
            db: Async database session (injected by FastAPI)
            payload: Raw request fields

        Returns:
            RideResponse including the assigned id and created timestamp

        Raises:
            ValidationError: payload breaks a ride rule (nothing is written)
            DatabaseError: insert failed
        """
        new_ride = validate_ride_payload(payload)

        ride = Ride(**new_ride.model_dump())
        try:
            db.add(ride)
            # Flush assigns the autoincrement id; commit happens in get_db_session
            await db.flush()
            await db.refresh(ride)
        except SQLAlchemyError as e:
            logger.error("Database error creating ride: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "create_ride", "error_type": type(e).__name__})

        logger.info("Ride %s created (rider=%r, driver=%r)", ride.id, ride.rider_name, ride.driver_name)
        return RideResponse.model_validate(ride)

    async def list_rides(self, db: AsyncSession) -> List[RideResponse]:
        """
        Return every ride ordered by id (insertion order).

        Query plan:
            SELECT * FROM rides ORDER BY id ASC

        Raises:
            NotFoundError: the table is empty
            DatabaseError: query failed
        """
        try:
            result = await db.execute(select(Ride).order_by(asc(Ride.id)))
            rides = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing rides: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "list_rides", "error_type": type(e).__name__})

        if not rides:
            raise NotFoundError()

        return [RideResponse.model_validate(ride) for ride in rides]

    async def list_rides_page(
        self,
        db: AsyncSession,
        page: int,
        page_size: int | None = None,
    ) -> List[RideResponse]:
        """
        Return one page of rides in insertion order.

        Page n (1-based) holds rides [(n-1)*size, n*size). Pages below 1 or
        past the last ride return an empty list, never an error.

        Query plan:
            SELECT count(id) FROM rides
            SELECT * FROM rides ORDER BY id ASC LIMIT :size OFFSET :offset

        Args:
            db: Async database session
            page: 1-based page number
            page_size: Override of settings.rides_page_size (used in tests)
        """
        size = page_size or settings.rides_page_size
        if page < 1:
            return []

        offset = (page - 1) * size
        try:
            total = (await db.execute(select(func.count(Ride.id)))).scalar() or 0
            if offset >= total:
                return []

            result = await db.execute(
                select(Ride).order_by(asc(Ride.id)).limit(size).offset(offset)
            )
            rides = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing page %d: %s", page, str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": "list_rides_page", "page": page, "error_type": type(e).__name__}
            )

        return [RideResponse.model_validate(ride) for ride in rides]

    async def get_ride(self, db: AsyncSession, ride_id: int) -> RideResponse:
        """
        Retrieve a single ride by id.

        Query plan:
            SELECT * FROM rides WHERE id = :id  (primary key lookup)

        Raises:
            NotFoundError: no ride with that id
            DatabaseError: query failed
        """
        if ride_id < 1 or ride_id > MAX_SQL_INTEGER:
            raise NotFoundError(resource_id=str(ride_id))

        try:
            result = await db.execute(select(Ride).where(Ride.id == ride_id))
            ride = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching ride %s: %s", ride_id, str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": "get_ride", "ride_id": ride_id, "error_type": type(e).__name__}
            )

        if ride is None:
            raise NotFoundError(resource_id=str(ride_id))

        return RideResponse.model_validate(ride)


# ── Singleton Instance ────────────────────────────────────────────────────
ride_service = RideService()
