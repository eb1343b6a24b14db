import logging

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import InvalidInput, NotFound, SeatsUnavailable, format_validation_errors
from app.models.booking import Booking
from app.models.schedule import Schedule, ScheduleStatus
from app.schemas.booking import BookingCreate

logger = logging.getLogger(__name__)


def create_booking(
    db: Session,
    *,
    schedule_id: int,
    passenger_name: str,
    passenger_phone: str,
    seat_number: str,
    total_amount: int,
    passenger_email: str | None = None,
    payment_method: str | None = None,
    user_id: int | None = None,
    decrement_seats: bool | None = None,
) -> Booking:
    try:
        data = BookingCreate(
            userId=user_id,
            scheduleId=schedule_id,
            passengerName=passenger_name,
            passengerPhone=passenger_phone,
            passengerEmail=passenger_email,
            seatNumber=seat_number,
            totalAmount=total_amount,
            paymentMethod=payment_method,
        )
    except ValidationError as e:
        raise InvalidInput("Invalid booking data", errors=format_validation_errors(e.errors()))

    if decrement_seats is None:
        decrement_seats = settings.BOOKING_DECREMENTS_SEATS

    # Row lock so the seat check and the decrement cannot interleave with another booking
    schedule = db.execute(
        select(Schedule).where(Schedule.id == data.scheduleId).with_for_update()
    ).scalar_one_or_none()
    if not schedule:
        db.rollback()
        raise NotFound("Schedule not found")

    if schedule.status != ScheduleStatus.ACTIVE.value or schedule.available_seats < 1:
        db.rollback()
        raise SeatsUnavailable("No seats available")

    taken = db.query(Booking.id).filter(
        Booking.schedule_id == schedule.id,
        Booking.seat_number == data.seatNumber,
    ).first()
    if taken:
        db.rollback()
        raise SeatsUnavailable(f"Seat {data.seatNumber} is already booked")

    if decrement_seats:
        schedule.available_seats -= 1

    booking = Booking(
        user_id=data.userId,
        schedule_id=schedule.id,
        passenger_name=data.passengerName,
        passenger_phone=data.passengerPhone,
        passenger_email=str(data.passengerEmail) if data.passengerEmail else None,
        seat_number=data.seatNumber,
        total_amount=data.totalAmount,
        status="confirmed",
        payment_method=data.paymentMethod,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info("booking %s confirmed on schedule %s seat %s (seats left %s)",
                booking.id, schedule.id, booking.seat_number, schedule.available_seats)
    return booking


def list_bookings(db: Session) -> list[Booking]:
    return db.query(Booking).order_by(Booking.id.asc()).all()

def list_bookings_by_user(db: Session, user_id: int) -> list[Booking]:
    return db.query(Booking).filter(Booking.user_id == user_id).order_by(Booking.id.asc()).all()

def get_booking(db: Session, booking_id: int) -> Booking | None:
    return db.get(Booking, booking_id)
