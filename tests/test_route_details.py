from app.models.schedule import Schedule
from app.services import catalog_service
from app.services.route_details_service import get_route_with_details, list_popular_routes_with_details


def test_route_with_details(db, demo):
    r, s = demo["train_amd_mumbai"], demo["train_mumbai_2200"]
    details = get_route_with_details(db, r.id, s.id)
    assert details.providerName == "Indian Railways"
    assert details.providerType == "train"
    assert details.providerLogo is None
    assert details.duration == 420
    assert details.distance == 550
    assert details.stopsCount == 8
    assert details.fareAmount == 550
    assert details.departureTime == "2026-10-19T22:00:00Z"
    assert details.arrivalTime == "2026-10-20T05:00:00Z"
    assert details.vehicleId == "12934-KARNAVATI"


def test_missing_links_give_none(db, demo):
    r, s = demo["bus_amd_surat"], demo["bus_surat_0700"]
    assert get_route_with_details(db, 999, s.id) is None
    assert get_route_with_details(db, r.id, 999) is None
    # schedule of a different route
    assert get_route_with_details(db, r.id, demo["metro_0800"].id) is None


def test_missing_provider_gives_none(db, demo):
    r, s = demo["flight_amd_delhi"], demo["flight_delhi_1015"]
    db.delete(demo["air_india"])
    db.commit()
    assert get_route_with_details(db, r.id, s.id) is None


def test_popular_routes_most_booked_first(db, demo):
    popular = list_popular_routes_with_details(db)
    assert [(p.source, p.destination) for p in popular] == [
        ("Thaltej Gam", "Apparel Park"),
        ("Ahmedabad", "Mumbai"),
        ("Ahmedabad", "Surat"),
        ("Ahmedabad", "Vadodara"),
    ]


def test_popular_routes_skip_unresolved(db, demo):
    extra = catalog_service.create_schedule(
        db, route_id=demo["flight_amd_delhi"].id, departure_time=demo["flight_delhi_1015"].departure_time,
        arrival_time=demo["flight_delhi_1015"].arrival_time, fare_amount=4200, available_seats=12)
    catalog_service.create_popular_route(db, route_id=demo["flight_amd_delhi"].id, schedule_id=extra.id, count=999)
    db.delete(db.get(Schedule, extra.id))
    db.commit()

    popular = list_popular_routes_with_details(db)
    assert len(popular) == 4
    assert all(p.scheduleId != extra.id for p in popular)
