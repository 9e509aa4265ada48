# Services package init
"""
Ride Service: Services Layer
============================

Business logic between the routes (HTTP) and the database (persistence).

Service Inventory:
    - validation.py:    Pure checks for ride bodies and path numbers
    - ride_service.py:  RideService, create / list / page / get
"""
