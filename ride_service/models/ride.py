"""
Ride Service: Ride SQLAlchemy Model
===================================

What:  ORM model representing the `rides` table.
How:   Inherits from the shared DeclarativeBase; `init_schema` creates the
       table from this class at startup.
Who:   Used by RideService for inserts and reads.

Table Design:
    - id: Integer autoincrement primary key, assigned by the datastore.
      Clients address rides by this number (GET /rides/{id}) and pages are
      ordered by it, so insertion order == id order.
    - start_* / end_*: Pickup and dropoff coordinates in decimal degrees.
      Bounds are enforced by the validation layer before insert.
    - rider_name / driver_name / driver_vehicle: Free text, non-empty.
    - created: UTC creation timestamp.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from ride_service.database import Base


class Ride(Base):
    """
    A single recorded ride.

    Lifecycle:
        Created once via POST /rides, read thereafter by list, page or id.
        Never updated or deleted by the service.
    """

    __tablename__ = "rides"

    # ── Primary Key ───────────────────────────────────────────────────────
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Ride identifier, assigned on insert",
    )

    # ── Coordinates ───────────────────────────────────────────────────────
    start_lat: Mapped[float] = mapped_column(Float, nullable=False, comment="Pickup latitude [-90, 90]")
    start_long: Mapped[float] = mapped_column(Float, nullable=False, comment="Pickup longitude [-180, 180]")
    end_lat: Mapped[float] = mapped_column(Float, nullable=False, comment="Dropoff latitude [-90, 90]")
    end_long: Mapped[float] = mapped_column(Float, nullable=False, comment="Dropoff longitude [-180, 180]")

    # ── People & Vehicle ──────────────────────────────────────────────────
    rider_name: Mapped[str] = mapped_column(Text, nullable=False)
    driver_name: Mapped[str] = mapped_column(Text, nullable=False)
    driver_vehicle: Mapped[str] = mapped_column(Text, nullable=False)

    # ── Timestamps ────────────────────────────────────────────────────────
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this ride was recorded (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Ride(id={self.id}, rider='{self.rider_name}', driver='{self.driver_name}')>"
