import logging
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, ProgrammingError

from app.db.session import SessionLocal
from app.models.provider import Provider, TransportType
from app.services import catalog_service

logger = logging.getLogger(__name__)


def _at(day: date, hh: int, mm: int = 0, days_later: int = 0) -> datetime:
    return datetime.combine(day + timedelta(days=days_later), time(hh, mm), tzinfo=timezone.utc)


def seed_demo_data(db: Session, today: date | None = None) -> dict:
    """Insert the demo dataset and return the created rows by name. Does not check for existing data."""
    today = today or datetime.now(timezone.utc).date()
    now = datetime.now(timezone.utc)
    out = {}

    # providers
    out["gsrtc"] = catalog_service.create_provider(
        db, name="GSRTC", type=TransportType.BUS, contact_info="+91 79 2254 3273", rating=4.2)
    out["metro"] = catalog_service.create_provider(
        db, name="Ahmedabad Metro", type=TransportType.METRO, contact_info="+91 79 2327 6500", rating=4.5)
    out["railways"] = catalog_service.create_provider(
        db, name="Indian Railways", type=TransportType.TRAIN, contact_info="+91 139", rating=4.0)
    out["air_india"] = catalog_service.create_provider(
        db, name="Air India", type=TransportType.FLIGHT, contact_info="+91 124 625 2400", rating=3.7)

    # routes
    out["bus_amd_surat"] = catalog_service.create_route(
        db, provider_id=out["gsrtc"].id, source="Ahmedabad", destination="Surat",
        duration=180, distance=270, stops_count=2, route_number="AS-1234")
    out["bus_amd_vadodara"] = catalog_service.create_route(
        db, provider_id=out["gsrtc"].id, source="Ahmedabad", destination="Vadodara",
        duration=120, distance=120, stops_count=1, route_number="AV-5678")
    out["metro_east_west"] = catalog_service.create_route(
        db, provider_id=out["metro"].id, source="Thaltej Gam", destination="Apparel Park",
        duration=45, distance=21, stops_count=17, route_number="Metro Line 1")
    out["train_amd_mumbai"] = catalog_service.create_route(
        db, provider_id=out["railways"].id, source="Ahmedabad", destination="Mumbai",
        duration=420, distance=550, stops_count=8, route_number="12934 KARNAVATI")
    out["flight_amd_delhi"] = catalog_service.create_route(
        db, provider_id=out["air_india"].id, source="Ahmedabad", destination="Delhi",
        duration=90, distance=950, stops_count=0, route_number="AI-101")

    # schedules for today
    out["bus_surat_0700"] = catalog_service.create_schedule(
        db, route_id=out["bus_amd_surat"].id, departure_time=_at(today, 7), arrival_time=_at(today, 10),
        fare_amount=350, available_seats=35, vehicle_id="GJ-01-XX-1234")
    out["bus_surat_1400"] = catalog_service.create_schedule(
        db, route_id=out["bus_amd_surat"].id, departure_time=_at(today, 14), arrival_time=_at(today, 17),
        fare_amount=350, available_seats=42, vehicle_id="GJ-01-XX-5678")
    out["bus_vadodara_0830"] = catalog_service.create_schedule(
        db, route_id=out["bus_amd_vadodara"].id, departure_time=_at(today, 8, 30), arrival_time=_at(today, 10, 30),
        fare_amount=190, available_seats=28, vehicle_id="GJ-01-YY-9012")
    out["metro_0800"] = catalog_service.create_schedule(
        db, route_id=out["metro_east_west"].id, departure_time=_at(today, 8), arrival_time=_at(today, 8, 45),
        fare_amount=30, available_seats=200, vehicle_id="METRO-EW-1")
    out["metro_0900"] = catalog_service.create_schedule(
        db, route_id=out["metro_east_west"].id, departure_time=_at(today, 9), arrival_time=_at(today, 9, 45),
        fare_amount=30, available_seats=180, vehicle_id="METRO-EW-2")
    # overnight: arrives the next morning
    out["train_mumbai_2200"] = catalog_service.create_schedule(
        db, route_id=out["train_amd_mumbai"].id, departure_time=_at(today, 22), arrival_time=_at(today, 5, days_later=1),
        fare_amount=550, available_seats=124, vehicle_id="12934-KARNAVATI")
    out["flight_delhi_1015"] = catalog_service.create_schedule(
        db, route_id=out["flight_amd_delhi"].id, departure_time=_at(today, 10, 15), arrival_time=_at(today, 11, 45),
        fare_amount=3500, available_seats=120, vehicle_id="AI-101")

    # popular routes for the homepage
    for route_key, schedule_key, count in (
        ("bus_amd_surat", "bus_surat_0700", 150),
        ("bus_amd_vadodara", "bus_vadodara_0830", 120),
        ("metro_east_west", "metro_0800", 450),
        ("train_amd_mumbai", "train_mumbai_2200", 300),
    ):
        catalog_service.create_popular_route(
            db, route_id=out[route_key].id, schedule_id=out[schedule_key].id, count=count)

    # offers
    out["offer_gsrtc"] = catalog_service.create_offer(
        db, title="20% off on GSRTC routes",
        description="Use code GSRTC20 to get 20% off on all GSRTC bus routes",
        discount=20, valid_until=now + timedelta(days=30), applicable_types=[TransportType.BUS])
    out["offer_metro_pass"] = catalog_service.create_offer(
        db, title="Metro Monthly Pass",
        description="Get 30% off on monthly metro passes for regular commuters",
        discount=30, valid_until=now + timedelta(days=60), applicable_types=[TransportType.METRO])
    out["offer_monsoon"] = catalog_service.create_offer(
        db, title="Monsoon Special",
        description="Flat ₹100 off on all bookings made during the monsoon season",
        discount=None, valid_until=now + timedelta(days=90), applicable_types=list(TransportType))
    return out


def run(db=None) -> bool:
    """Seed the demo dataset once. Returns True if data was inserted."""
    owns_session = db is None
    if owns_session:
        db = SessionLocal()
    try:
        # If migrations haven't been applied yet, seeding must not crash the API.
        try:
            db.execute(text("SELECT 1 FROM transport_providers LIMIT 1"))
        except (ProgrammingError, OperationalError):
            db.rollback()
            logger.warning("[seed] transport_providers table not found yet. Skipping seeding (run alembic upgrade head).")
            return False

        if db.query(Provider.id).first():
            logger.info("[seed] providers already present, nothing to do")
            return False

        logger.info("[seed] seeding database with demo data")
        seed_demo_data(db)
        logger.info("[seed] database seeded")
        return True
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    from app.core.logging import configure_logging

    configure_logging()
    run()
