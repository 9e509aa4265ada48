"""
Ride Service: Application Package Initializer
=============================================

What: Marks the `ride_service` directory as a Python package.
Who:  Used by uvicorn (`ride_service.main:app`), pytest, and the `ride-service` script.

Architecture Note:
    The backend follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (Validation + Queries)  │  ← Ride rules, persistence calls
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
