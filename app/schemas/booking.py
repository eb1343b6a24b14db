from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from app.core.dates import isoformat_utc

class BookingCreate(BaseModel):
    userId: Optional[int] = None
    scheduleId: int
    passengerName: str = Field(min_length=3, description="Name must be at least 3 characters")
    passengerPhone: str = Field(min_length=10, description="Phone number must be at least 10 digits")
    passengerEmail: Optional[EmailStr] = None
    seatNumber: str = Field(min_length=1)
    totalAmount: int = Field(ge=1)
    paymentMethod: Optional[str] = None

class BookingOut(BaseModel):
    id: int
    userId: Optional[int] = None
    scheduleId: int
    bookingDate: Optional[str] = None
    passengerName: str
    passengerPhone: str
    passengerEmail: Optional[str] = None
    seatNumber: str
    totalAmount: int
    status: str
    paymentMethod: Optional[str] = None


def booking_out(b) -> BookingOut:
    return BookingOut(
        id=b.id,
        userId=b.user_id,
        scheduleId=b.schedule_id,
        bookingDate=isoformat_utc(b.booking_date),
        passengerName=b.passenger_name,
        passengerPhone=b.passenger_phone,
        passengerEmail=b.passenger_email,
        seatNumber=b.seat_number,
        totalAmount=b.total_amount,
        status=b.status,
        paymentMethod=b.payment_method,
    )
