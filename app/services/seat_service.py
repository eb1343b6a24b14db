"""Seat maps for a schedule.

Seat inventory is not modelled per seat; the map is a placeholder layout for
the provider's transport type with a fixed share of seats shown as taken.
The placeholder picks are seeded by the schedule id so a map is stable across
requests, and seats already named by bookings on the schedule are always taken.
"""
import random
import string

from sqlalchemy.orm import Session

from app.models.booking import Booking
from app.models.provider import TransportType
from app.schemas.transport import Seat, SeatMap
from app.services import catalog_service

METRO_STANDING_SLOTS = 20


def _layout(transport_type: TransportType) -> list[list[str]]:
    if transport_type == TransportType.BUS:
        # rows A-E, 4 seats per row
        return [[f"{row}{n}" for n in range(1, 5)] for row in "ABCDE"]
    if transport_type == TransportType.TRAIN:
        return [[f"{row}{letter}" for letter in string.ascii_uppercase[:6]] for row in range(1, 9)]
    if transport_type == TransportType.FLIGHT:
        # 2-2-2 cabin, 5 rows
        return [[f"{row}{letter}" for letter in string.ascii_uppercase[:6]] for row in range(1, 6)]
    if transport_type == TransportType.METRO:
        return [[f"T{n}" for n in range(1, METRO_STANDING_SLOTS + 1)]]
    raise ValueError(f"no seat layout for {transport_type!r}")


_PLACEHOLDER_BOOKED_SHARE = {
    TransportType.BUS: 0.2,
    TransportType.TRAIN: 0.3,
    TransportType.FLIGHT: 0.4,
    TransportType.METRO: 0.0,
}


def build_seat_map(db: Session, schedule_id: int) -> SeatMap | None:
    schedule = catalog_service.get_schedule(db, schedule_id)
    if not schedule:
        return None
    route = catalog_service.get_route(db, schedule.route_id)
    provider = catalog_service.get_provider(db, route.provider_id) if route else None
    if not provider:
        return None
    transport_type = TransportType(provider.type)

    layout = _layout(transport_type)
    seats = [number for row in layout for number in row]

    rng = random.Random(schedule.id)
    booked = set(rng.sample(seats, int(len(seats) * _PLACEHOLDER_BOOKED_SHARE[transport_type])))
    taken = db.query(Booking.seat_number).filter(Booking.schedule_id == schedule.id).all()
    booked.update(r.seat_number for r in taken)

    rows = [
        [Seat(number=number, status="booked" if number in booked else "available") for number in row]
        for row in layout
    ]
    return SeatMap(
        scheduleId=schedule.id,
        transportType=transport_type.value,
        assignedSeating=transport_type != TransportType.METRO,
        rows=rows,
        availableCount=sum(1 for row in rows for seat in row if seat.status == "available"),
    )
