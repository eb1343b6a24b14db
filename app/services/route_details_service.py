from sqlalchemy.orm import Session

from app.core.dates import isoformat_utc
from app.models.provider import Provider
from app.models.route import Route
from app.models.schedule import Schedule
from app.schemas.transport import RouteWithDetails
from app.services import catalog_service


def compose_route_details(route: Route, schedule: Schedule, provider: Provider) -> RouteWithDetails:
    return RouteWithDetails(
        id=route.id,
        providerId=provider.id,
        providerName=provider.name,
        providerLogo=provider.logo_url or None,
        providerType=provider.type,
        source=route.source,
        destination=route.destination,
        duration=route.duration,
        distance=route.distance or None,
        stopsCount=route.stops_count or 0,
        routeNumber=route.route_number or None,
        fareAmount=schedule.fare_amount,
        departureTime=isoformat_utc(schedule.departure_time),
        arrivalTime=isoformat_utc(schedule.arrival_time),
        availableSeats=schedule.available_seats,
        status=schedule.status,
        scheduleId=schedule.id,
        vehicleId=schedule.vehicle_id or None,
    )


def get_route_with_details(db: Session, route_id: int, schedule_id: int) -> RouteWithDetails | None:
    """Route + Schedule + Provider view, or None if any link in the chain is missing."""
    route = catalog_service.get_route(db, route_id)
    schedule = catalog_service.get_schedule(db, schedule_id)
    if not route or not schedule or schedule.route_id != route.id:
        return None
    provider = catalog_service.get_provider(db, route.provider_id)
    if not provider:
        return None
    return compose_route_details(route, schedule, provider)


def list_popular_routes_with_details(db: Session) -> list[RouteWithDetails]:
    out = []
    for pr in catalog_service.list_popular_routes(db):
        details = get_route_with_details(db, pr.route_id, pr.schedule_id)
        if details is not None:
            out.append(details)
    return out
