from datetime import date as date_type

from sqlalchemy.orm import Session

from app.core.dates import as_utc
from app.core.errors import InvalidInput
from app.models.provider import TransportType
from app.models.schedule import Schedule, ScheduleStatus
from app.schemas.transport import RouteWithDetails
from app.services import catalog_service
from app.services.route_details_service import compose_route_details


def is_bookable(schedule: Schedule, on_date: date_type | None = None) -> bool:
    """Active, has at least one seat, and departs on `on_date` (UTC calendar date) when given."""
    if on_date is not None and as_utc(schedule.departure_time).date() != on_date:
        return False
    return schedule.available_seats > 0 and schedule.status == ScheduleStatus.ACTIVE.value


def search_routes(
    db: Session,
    source: str,
    destination: str,
    transport_type,
    date: date_type | None = None,
) -> list[RouteWithDetails]:
    """Bookable departures from `source` to `destination` with one transport type, earliest first.

    City names match exactly (case-sensitive). A route whose provider cannot be
    resolved is skipped rather than failing the search.
    """
    t = TransportType.parse(transport_type)
    if t is None:
        raise InvalidInput("Invalid transport type", errors=[{"field": "type", "message": f"unknown transport type {transport_type!r}"}])

    found = []
    for route in catalog_service.find_routes(db, source, destination, t):
        provider = catalog_service.get_provider(db, route.provider_id)
        if not provider:
            continue
        for schedule in catalog_service.list_schedules_by_route(db, route.id):
            if not is_bookable(schedule, date):
                continue
            found.append((as_utc(schedule.departure_time), compose_route_details(route, schedule, provider)))

    found.sort(key=lambda pair: pair[0])
    return [details for _, details in found]
