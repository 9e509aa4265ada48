"""
Ride Service: RideService Unit Tests
====================================

What:  Tests for RideService create / list / page / get.
How:   Most tests run against a real in-memory SQLite session (db_session);
       the database-failure paths use mock_db_session.
"""

import logging

import pytest
from sqlalchemy.exc import OperationalError

from ride_service.exceptions import DatabaseError, NotFoundError, ValidationError
from ride_service.services.ride_service import RideService


async def create_rides(service, db, count, payload):
    created = []
    for i in range(count):
        body = dict(payload, rider_name=f"rider-{i}")
        created.append(await service.create_ride(db, body))
    return created


class TestRideServiceCreate:
    """Tests for create_ride."""

    def setup_method(self):
        self.service = RideService()

    @pytest.mark.asyncio
    async def test_create_ride_assigns_id(self, db_session, ride_payload):
        ride = await self.service.create_ride(db_session, ride_payload)

        assert ride.id == 1
        assert ride.start_lat == 1.0
        assert ride.end_long == 4.0
        assert ride.rider_name == "test"
        assert ride.created is not None

    @pytest.mark.asyncio
    async def test_ids_increase(self, db_session, ride_payload):
        first, second = await create_rides(self.service, db_session, 2, ride_payload)
        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_invalid_ride_is_not_stored(self, db_session, ride_payload):
        with pytest.raises(ValidationError):
            await self.service.create_ride(db_session, dict(ride_payload, driver_name=""))

        with pytest.raises(NotFoundError):
            await self.service.list_rides(db_session)

    @pytest.mark.asyncio
    async def test_flush_failure_raises_database_error(self, mock_db_session, ride_payload):
        mock_db_session.flush.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_ride(mock_db_session, ride_payload)

        assert exc_info.value.message == "Unknown error"
        assert exc_info.value.context["operation"] == "create_ride"

    @pytest.mark.asyncio
    async def test_validation_runs_before_database(self, mock_db_session, ride_payload):
        with pytest.raises(ValidationError):
            await self.service.create_ride(mock_db_session, dict(ride_payload, start_lat=200))

        mock_db_session.add.assert_not_called()
        mock_db_session.flush.assert_not_awaited()


class TestRideServiceList:
    """Tests for list_rides."""

    def setup_method(self):
        self.service = RideService()

    @pytest.mark.asyncio
    async def test_empty_table_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError) as exc_info:
            await self.service.list_rides(db_session)
        assert exc_info.value.error_code == "RIDES_NOT_FOUND_ERROR"
        assert exc_info.value.message == "Could not find any rides"

    @pytest.mark.asyncio
    async def test_list_in_insertion_order(self, db_session, ride_payload):
        await create_rides(self.service, db_session, 3, ride_payload)

        rides = await self.service.list_rides(db_session)

        assert [r.id for r in rides] == [1, 2, 3]
        assert [r.rider_name for r in rides] == ["rider-0", "rider-1", "rider-2"]

    @pytest.mark.asyncio
    async def test_query_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with pytest.raises(DatabaseError):
            await self.service.list_rides(mock_db_session)


class TestRideServicePage:
    """Tests for list_rides_page."""

    def setup_method(self):
        self.service = RideService()

    @pytest.mark.asyncio
    async def test_pages_split_by_size(self, db_session, ride_payload):
        await create_rides(self.service, db_session, 5, ride_payload)

        page1 = await self.service.list_rides_page(db_session, page=1, page_size=2)
        page2 = await self.service.list_rides_page(db_session, page=2, page_size=2)
        page3 = await self.service.list_rides_page(db_session, page=3, page_size=2)

        assert [r.id for r in page1] == [1, 2]
        assert [r.id for r in page2] == [3, 4]
        assert [r.id for r in page3] == [5]

    @pytest.mark.asyncio
    async def test_default_page_size_from_settings(self, db_session, ride_payload):
        await create_rides(self.service, db_session, 12, ride_payload)

        page1 = await self.service.list_rides_page(db_session, page=1)
        page2 = await self.service.list_rides_page(db_session, page=2)

        assert len(page1) == 10
        assert len(page2) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page", [0, -1, 4, 10 ** 30])
    async def test_out_of_range_pages_are_empty(self, db_session, ride_payload, page):
        await create_rides(self.service, db_session, 3, ride_payload)

        assert await self.service.list_rides_page(db_session, page=page, page_size=1) == []

    @pytest.mark.asyncio
    async def test_page_on_empty_table_is_empty(self, db_session):
        assert await self.service.list_rides_page(db_session, page=1) == []


class TestRideServiceGet:
    """Tests for get_ride."""

    def setup_method(self):
        self.service = RideService()

    @pytest.mark.asyncio
    async def test_get_existing_ride(self, db_session, ride_payload):
        created = await self.service.create_ride(db_session, ride_payload)

        ride = await self.service.get_ride(db_session, created.id)

        assert ride.id == created.id
        assert ride.driver_vehicle == "test"

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await self.service.get_ride(db_session, 999)

    @pytest.mark.asyncio
    async def test_id_beyond_integer_range_is_not_found(self, mock_db_session):
        with pytest.raises(NotFoundError):
            await self.service.get_ride(mock_db_session, 2 ** 70)
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_query_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get_ride(mock_db_session, 1)

        assert exc_info.value.context == {
            "operation": "get_ride",
            "ride_id": 1,
            "error_type": "OperationalError",
        }

    @pytest.mark.asyncio
    async def test_query_failure_is_logged_with_traceback(self, mock_db_session, caplog):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with caplog.at_level(logging.ERROR, logger="ride_service.services.ride_service"):
            with pytest.raises(DatabaseError):
                await self.service.get_ride(mock_db_session, 1)

        record = caplog.records[-1]
        assert "fetching ride 1" in record.getMessage()
        assert record.exc_info is not None
