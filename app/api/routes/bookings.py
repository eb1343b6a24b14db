import logging
import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InvalidInput, NotFound, SeatsUnavailable
from app.db.session import get_db
from app.schemas.booking import BookingCreate, BookingOut, booking_out
from app.services import booking_service

router = APIRouter(tags=["bookings"])
logger = logging.getLogger(__name__)


@router.post("/bookings", response_model=BookingOut, status_code=201)
def create_booking(body: BookingCreate, db: Session = Depends(get_db)):
    try:
        booking = booking_service.create_booking(
            db,
            schedule_id=body.scheduleId,
            passenger_name=body.passengerName,
            passenger_phone=body.passengerPhone,
            passenger_email=body.passengerEmail,
            seat_number=body.seatNumber,
            total_amount=body.totalAmount,
            payment_method=body.paymentMethod,
            user_id=body.userId,
        )
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail={"message": e.message, "errors": e.errors})
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except SeatsUnavailable as e:
        raise HTTPException(status_code=400, detail=e.message)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("booking on schedule %s failed", body.scheduleId)
        raise HTTPException(status_code=500, detail="Failed to create booking")
    return booking_out(booking)


def _leading_int(value: Optional[str]) -> Optional[int]:
    """Integer formed by the leading digits of `value` ("7abc" -> 7), or None if it does not start with digits."""
    m = re.match(r"\s*(\d+)", value or "")
    return int(m.group(1)) if m else None


@router.get("/bookings", response_model=list[BookingOut])
def list_bookings(userId: Optional[str] = None, db: Session = Depends(get_db)):
    """All bookings, or one user's bookings when `userId` starts with digits (anything else is ignored)."""
    user_id = _leading_int(userId)
    try:
        if user_id:
            bookings = booking_service.list_bookings_by_user(db, user_id)
        else:
            bookings = booking_service.list_bookings(db)
    except SQLAlchemyError:
        logger.exception("listing bookings failed")
        raise HTTPException(status_code=500, detail="Failed to fetch bookings")
    return [booking_out(b) for b in bookings]


@router.get("/bookings/{booking_id}", response_model=BookingOut)
def get_booking(booking_id: int, db: Session = Depends(get_db)):
    try:
        b = booking_service.get_booking(db, booking_id)
    except SQLAlchemyError:
        logger.exception("fetching booking %s failed", booking_id)
        raise HTTPException(status_code=500, detail="Failed to fetch booking")
    if not b:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking_out(b)
