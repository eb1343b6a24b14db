import logging
from datetime import date as date_type
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.provider import TransportType
from app.schemas.transport import FareBreakdown, RouteWithDetails, ScheduleOut, SeatMap, schedule_out
from app.services import catalog_service
from app.services.fare_service import fare_breakdown
from app.services.route_details_service import get_route_with_details
from app.services.search_service import search_routes
from app.services.seat_service import build_seat_map

router = APIRouter(tags=["trips"])
logger = logging.getLogger(__name__)


@router.get("/routes/search", response_model=list[RouteWithDetails])
def search(
    source: str,
    destination: str,
    transport_type: str = Query(alias="type"),
    date: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Bookable departures for a source/destination pair and transport type, earliest first.

    `date` (YYYY-MM-DD) restricts results to departures on that day; empty means no date filter.
    """
    on_date = None
    if date and date.strip():
        try:
            on_date = date_type.fromisoformat(date.strip())
        except ValueError:
            raise HTTPException(status_code=400, detail={
                "message": "Invalid search parameters",
                "errors": [{"field": "date", "message": "must be a date in YYYY-MM-DD format"}],
            })
    t = TransportType.parse(transport_type)
    if t is None:
        raise HTTPException(status_code=400, detail="Invalid transport type")
    try:
        return search_routes(db, source, destination, t, on_date)
    except SQLAlchemyError:
        logger.exception("route search %s -> %s (%s) failed", source, destination, t.value)
        raise HTTPException(status_code=500, detail="Failed to search routes")


@router.get("/routes/{route_id}/schedules/{schedule_id}", response_model=RouteWithDetails)
def route_details(route_id: int, schedule_id: int, db: Session = Depends(get_db)):
    try:
        details = get_route_with_details(db, route_id, schedule_id)
    except SQLAlchemyError:
        logger.exception("route details %s/%s failed", route_id, schedule_id)
        raise HTTPException(status_code=500, detail="Failed to fetch route details")
    if details is None:
        raise HTTPException(status_code=404, detail="Route or schedule not found")
    return details


@router.get("/routes/{route_id}/schedules/{schedule_id}/fare", response_model=FareBreakdown)
def route_fare(route_id: int, schedule_id: int, db: Session = Depends(get_db)):
    """Fare summary shown before payment: base fare, GST, service charge and total."""
    try:
        details = get_route_with_details(db, route_id, schedule_id)
    except SQLAlchemyError:
        logger.exception("fare lookup %s/%s failed", route_id, schedule_id)
        raise HTTPException(status_code=500, detail="Failed to fetch fare")
    if details is None:
        raise HTTPException(status_code=404, detail="Route or schedule not found")
    return fare_breakdown(details.fareAmount)


@router.get("/routes/{route_id}/schedules", response_model=list[ScheduleOut])
def route_schedules(route_id: int, db: Session = Depends(get_db)):
    try:
        return [schedule_out(s) for s in catalog_service.list_schedules_by_route(db, route_id)]
    except SQLAlchemyError:
        logger.exception("listing schedules for route %s failed", route_id)
        raise HTTPException(status_code=500, detail="Failed to fetch schedules")


@router.get("/schedules/{schedule_id}/seats", response_model=SeatMap)
def schedule_seats(schedule_id: int, db: Session = Depends(get_db)):
    try:
        seat_map = build_seat_map(db, schedule_id)
    except SQLAlchemyError:
        logger.exception("seat map for schedule %s failed", schedule_id)
        raise HTTPException(status_code=500, detail="Failed to fetch seats")
    if seat_map is None:
        raise HTTPException(status_code=404, detail="Schedule not found")
    return seat_map
