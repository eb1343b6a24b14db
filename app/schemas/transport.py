from pydantic import BaseModel
from typing import List, Optional

from app.core.dates import isoformat_utc


class ProviderOut(BaseModel):
    id: int
    name: str
    type: str
    logoUrl: Optional[str] = None
    contactInfo: Optional[str] = None
    rating: Optional[float] = None

class ScheduleOut(BaseModel):
    id: int
    routeId: int
    departureTime: str
    arrivalTime: str
    fareAmount: int
    availableSeats: int
    status: str
    vehicleId: Optional[str] = None

class OfferOut(BaseModel):
    id: int
    title: str
    description: str
    discount: Optional[int] = None
    validUntil: Optional[str] = None
    imageUrl: Optional[str] = None
    applicableTypes: List[str]

class RouteWithDetails(BaseModel):
    """Provider + Route + Schedule flattened for search results and trip pages."""
    id: int
    providerId: int
    providerName: str
    providerLogo: Optional[str] = None
    providerType: str
    source: str
    destination: str
    duration: int
    distance: Optional[int] = None
    stopsCount: int = 0
    routeNumber: Optional[str] = None
    fareAmount: int
    departureTime: str
    arrivalTime: str
    availableSeats: int
    status: str
    scheduleId: int
    vehicleId: Optional[str] = None

class FareBreakdown(BaseModel):
    baseFare: int
    gst: int
    serviceCharge: int
    totalAmount: int

class Seat(BaseModel):
    number: str
    status: str  # available, booked

class SeatMap(BaseModel):
    scheduleId: int
    transportType: str
    assignedSeating: bool
    rows: List[List[Seat]]
    availableCount: int


def provider_out(p) -> ProviderOut:
    return ProviderOut(
        id=p.id,
        name=p.name,
        type=p.type,
        logoUrl=p.logo_url,
        contactInfo=p.contact_info,
        rating=p.rating,
    )

def schedule_out(s) -> ScheduleOut:
    return ScheduleOut(
        id=s.id,
        routeId=s.route_id,
        departureTime=isoformat_utc(s.departure_time),
        arrivalTime=isoformat_utc(s.arrival_time),
        fareAmount=s.fare_amount,
        availableSeats=s.available_seats,
        status=s.status,
        vehicleId=s.vehicle_id,
    )

def offer_out(o) -> OfferOut:
    return OfferOut(
        id=o.id,
        title=o.title,
        description=o.description,
        discount=o.discount,
        validUntil=isoformat_utc(o.valid_until),
        imageUrl=o.image_url,
        applicableTypes=list(o.applicable_types or []),
    )
