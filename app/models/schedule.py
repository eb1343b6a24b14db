import enum
from datetime import datetime

from sqlalchemy import String, Integer, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base


class ScheduleStatus(str, enum.Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (
        CheckConstraint("available_seats >= 0", name="ck_schedule_available_seats_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    route_id: Mapped[int] = mapped_column(ForeignKey("routes.id"), index=True)
    departure_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    arrival_time: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    fare_amount: Mapped[int] = mapped_column(Integer)  # INR
    available_seats: Mapped[int] = mapped_column(Integer)
    status: Mapped[str] = mapped_column(String(20), default=ScheduleStatus.ACTIVE.value)  # active, cancelled, completed
    vehicle_id: Mapped[str] = mapped_column(String(40), nullable=True)
