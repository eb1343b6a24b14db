"""CRUD over providers, routes, schedules, popular routes and offers.

Every create_* commits and returns the refreshed row. Missing required fields,
broken invariants and unresolved references raise InvalidInput; get_* returns
None for an unknown id.
"""
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.core.dates import as_utc
from app.core.errors import InvalidInput
from app.models.provider import Provider, TransportType
from app.models.route import Route
from app.models.schedule import Schedule, ScheduleStatus
from app.models.popular_route import PopularRoute
from app.models.offer import Offer


def _require(**fields) -> None:
    missing = [
        name for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise InvalidInput(
            "Missing required fields: " + ", ".join(missing),
            errors=[{"field": name, "message": "required"} for name in missing],
        )


def _transport_type(value) -> TransportType:
    t = TransportType.parse(value)
    if t is None:
        raise InvalidInput("Invalid transport type", errors=[{"field": "type", "message": f"unknown transport type {value!r}"}])
    return t


# Providers

def list_providers(db: Session) -> list[Provider]:
    return db.query(Provider).order_by(Provider.id.asc()).all()

def list_providers_by_type(db: Session, transport_type) -> list[Provider]:
    t = _transport_type(transport_type)
    return db.query(Provider).filter(Provider.type == t.value).order_by(Provider.id.asc()).all()

def get_provider(db: Session, provider_id: int) -> Provider | None:
    return db.get(Provider, provider_id)

def create_provider(db: Session, *, name: str, type, logo_url: str | None = None,
                    contact_info: str | None = None, rating: float | None = None) -> Provider:
    _require(name=name, type=type)
    p = Provider(
        name=name.strip(),
        type=_transport_type(type).value,
        logo_url=logo_url,
        contact_info=contact_info,
        rating=rating,
    )
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


# Routes

def list_routes(db: Session) -> list[Route]:
    return db.query(Route).order_by(Route.id.asc()).all()

def list_routes_by_type(db: Session, transport_type) -> list[Route]:
    t = _transport_type(transport_type)
    return (
        db.query(Route)
        .join(Provider, Provider.id == Route.provider_id)
        .filter(Provider.type == t.value)
        .order_by(Route.id.asc())
        .all()
    )

def list_routes_by_provider(db: Session, provider_id: int) -> list[Route]:
    return db.query(Route).filter(Route.provider_id == provider_id).order_by(Route.id.asc()).all()

def find_routes(db: Session, source: str, destination: str, transport_type=None) -> list[Route]:
    """Routes with exactly this source and destination (case-sensitive), optionally of one transport type."""
    q = db.query(Route).filter(Route.source == source, Route.destination == destination)
    if transport_type is not None:
        t = _transport_type(transport_type)
        q = q.join(Provider, Provider.id == Route.provider_id).filter(Provider.type == t.value)
    return q.order_by(Route.id.asc()).all()

def get_route(db: Session, route_id: int) -> Route | None:
    return db.get(Route, route_id)

def create_route(db: Session, *, provider_id: int, source: str, destination: str, duration: int,
                 distance: int | None = None, stops_count: int = 0, route_number: str | None = None) -> Route:
    _require(provider_id=provider_id, source=source, destination=destination, duration=duration)
    if duration < 1:
        raise InvalidInput("duration must be >= 1", errors=[{"field": "duration", "message": "must be >= 1"}])
    if stops_count is not None and stops_count < 0:
        raise InvalidInput("stops_count must be >= 0", errors=[{"field": "stops_count", "message": "must be >= 0"}])
    if not get_provider(db, provider_id):
        raise InvalidInput("provider not found", errors=[{"field": "provider_id", "message": f"no provider {provider_id}"}])
    r = Route(
        provider_id=provider_id,
        source=source,
        destination=destination,
        duration=duration,
        distance=distance,
        stops_count=stops_count or 0,
        route_number=route_number,
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    return r


# Schedules

def list_schedules(db: Session) -> list[Schedule]:
    return db.query(Schedule).order_by(Schedule.id.asc()).all()

def list_schedules_by_route(db: Session, route_id: int) -> list[Schedule]:
    return db.query(Schedule).filter(Schedule.route_id == route_id).order_by(Schedule.id.asc()).all()

def get_schedule(db: Session, schedule_id: int) -> Schedule | None:
    return db.get(Schedule, schedule_id)

def create_schedule(db: Session, *, route_id: int, departure_time: datetime, arrival_time: datetime,
                    fare_amount: int, available_seats: int, status: str = ScheduleStatus.ACTIVE.value,
                    vehicle_id: str | None = None) -> Schedule:
    _require(route_id=route_id, departure_time=departure_time, arrival_time=arrival_time,
             fare_amount=fare_amount, available_seats=available_seats)
    if available_seats < 0:
        raise InvalidInput("available_seats must be >= 0", errors=[{"field": "available_seats", "message": "must be >= 0"}])
    if fare_amount < 0:
        raise InvalidInput("fare_amount must be >= 0", errors=[{"field": "fare_amount", "message": "must be >= 0"}])
    if as_utc(arrival_time) <= as_utc(departure_time):
        raise InvalidInput("arrival_time must be after departure_time",
                           errors=[{"field": "arrival_time", "message": "must be after departure_time"}])
    try:
        status = ScheduleStatus(status or ScheduleStatus.ACTIVE.value).value
    except ValueError:
        raise InvalidInput("Invalid schedule status", errors=[{"field": "status", "message": f"unknown status {status!r}"}])
    if not get_route(db, route_id):
        raise InvalidInput("route not found", errors=[{"field": "route_id", "message": f"no route {route_id}"}])
    s = Schedule(
        route_id=route_id,
        departure_time=as_utc(departure_time),
        arrival_time=as_utc(arrival_time),
        fare_amount=fare_amount,
        available_seats=available_seats,
        status=status,
        vehicle_id=vehicle_id,
    )
    db.add(s)
    db.commit()
    db.refresh(s)
    return s

def update_schedule_availability(db: Session, schedule_id: int, available_seats: int) -> Schedule | None:
    if available_seats is None or available_seats < 0:
        raise InvalidInput("available_seats must be >= 0", errors=[{"field": "available_seats", "message": "must be >= 0"}])
    s = db.get(Schedule, schedule_id)
    if not s:
        return None
    s.available_seats = available_seats
    db.commit()
    db.refresh(s)
    return s


# Popular routes

def list_popular_routes(db: Session) -> list[PopularRoute]:
    return db.query(PopularRoute).order_by(PopularRoute.count.desc(), PopularRoute.id.asc()).all()

def create_popular_route(db: Session, *, route_id: int, schedule_id: int, count: int = 0) -> PopularRoute:
    _require(route_id=route_id, schedule_id=schedule_id)
    if not get_route(db, route_id):
        raise InvalidInput("route not found", errors=[{"field": "route_id", "message": f"no route {route_id}"}])
    if not get_schedule(db, schedule_id):
        raise InvalidInput("schedule not found", errors=[{"field": "schedule_id", "message": f"no schedule {schedule_id}"}])
    pr = PopularRoute(route_id=route_id, schedule_id=schedule_id, count=count or 0)
    db.add(pr)
    db.commit()
    db.refresh(pr)
    return pr


# Offers

def list_offers(db: Session, active_only: bool = False, now: datetime | None = None) -> list[Offer]:
    offers = db.query(Offer).order_by(Offer.id.asc()).all()
    if not active_only:
        return offers
    now = as_utc(now or datetime.now(timezone.utc))
    return [o for o in offers if o.valid_until is None or as_utc(o.valid_until) >= now]

def get_offer(db: Session, offer_id: int) -> Offer | None:
    return db.get(Offer, offer_id)

def create_offer(db: Session, *, title: str, description: str, applicable_types,
                 discount: int | None = None, valid_until: datetime | None = None,
                 image_url: str | None = None) -> Offer:
    _require(title=title, description=description, applicable_types=applicable_types)
    if isinstance(applicable_types, str):
        applicable_types = [applicable_types]
    if not applicable_types:
        raise InvalidInput("applicable_types must not be empty",
                           errors=[{"field": "applicable_types", "message": "must not be empty"}])
    types = []
    for value in applicable_types:
        t = _transport_type(value).value
        if t not in types:
            types.append(t)
    if discount is not None and not 0 < discount <= 100:
        raise InvalidInput("discount must be between 1 and 100", errors=[{"field": "discount", "message": "must be between 1 and 100"}])
    o = Offer(
        title=title,
        description=description,
        discount=discount,
        valid_until=as_utc(valid_until) if valid_until else None,
        image_url=image_url,
        applicable_types=types,
    )
    db.add(o)
    db.commit()
    db.refresh(o)
    return o
