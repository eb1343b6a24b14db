from sqlalchemy.exc import OperationalError

from app.services import catalog_service

BOOKING = {
    "passengerName": "Jane Doe",
    "passengerPhone": "9876543210",
    "seatNumber": "A1",
    "totalAmount": 350,
}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_transport_providers(client, demo):
    res = client.get("/api/transport-providers")
    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["GSRTC", "Ahmedabad Metro", "Indian Railways", "Air India"]
    assert res.json()[0] == {
        "id": demo["gsrtc"].id, "name": "GSRTC", "type": "bus", "logoUrl": None,
        "contactInfo": "+91 79 2254 3273", "rating": 4.2,
    }


def test_transport_providers_by_type(client, demo):
    res = client.get("/api/transport-providers/train")
    assert res.status_code == 200
    assert [p["name"] for p in res.json()] == ["Indian Railways"]


def test_transport_providers_invalid_type(client, demo):
    res = client.get("/api/transport-providers/boat")
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid transport type"}


def test_store_failure_is_500(client, demo, monkeypatch):
    def boom(db):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(catalog_service, "list_providers", boom)
    res = client.get("/api/transport-providers")
    assert res.status_code == 500
    assert res.json() == {"message": "Failed to fetch transport providers"}


def test_popular_routes(client, demo):
    res = client.get("/api/popular-routes")
    assert res.status_code == 200
    body = res.json()
    assert len(body) == 4
    assert body[0]["providerName"] == "Ahmedabad Metro"
    assert body[0]["scheduleId"] == demo["metro_0800"].id


def test_offers(client, demo):
    res = client.get("/api/offers")
    assert res.status_code == 200
    assert {o["title"] for o in res.json()} == {"20% off on GSRTC routes", "Metro Monthly Pass", "Monsoon Special"}
    assert res.json()[0]["applicableTypes"] == ["bus"]


def test_search(client, demo):
    res = client.get("/api/routes/search", params={
        "source": "Ahmedabad", "destination": "Surat", "type": "bus", "date": "2026-10-19"})
    assert res.status_code == 200
    body = res.json()
    assert [r["departureTime"] for r in body] == ["2026-10-19T07:00:00Z", "2026-10-19T14:00:00Z"]
    assert body[0]["fareAmount"] == 350
    assert body[0]["availableSeats"] == 35


def test_search_other_day_is_empty(client, demo):
    res = client.get("/api/routes/search", params={
        "source": "Ahmedabad", "destination": "Surat", "type": "bus", "date": "2026-10-20"})
    assert res.status_code == 200
    assert res.json() == []


def test_search_missing_params(client, demo):
    res = client.get("/api/routes/search", params={"source": "Ahmedabad", "type": "bus"})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid search parameters"
    assert any(e["field"] == "destination" for e in res.json()["errors"])


def test_search_bad_date(client, demo):
    res = client.get("/api/routes/search", params={
        "source": "Ahmedabad", "destination": "Surat", "type": "bus", "date": "19/10/2026"})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid search parameters"


def test_search_invalid_type(client, demo):
    res = client.get("/api/routes/search", params={"source": "Ahmedabad", "destination": "Surat", "type": "car"})
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid transport type"}


def test_route_details(client, demo):
    r, s = demo["bus_amd_surat"], demo["bus_surat_0700"]
    res = client.get(f"/api/routes/{r.id}/schedules/{s.id}")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == r.id
    assert body["scheduleId"] == s.id
    assert body["providerName"] == "GSRTC"
    assert body["distance"] == 270


def test_route_details_not_found(client, demo):
    res = client.get(f"/api/routes/{demo['bus_amd_surat'].id}/schedules/999")
    assert res.status_code == 404
    assert res.json() == {"message": "Route or schedule not found"}


def test_route_details_bad_ids(client, demo):
    res = client.get("/api/routes/abc/schedules/1")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid parameters"


def test_route_fare(client, demo):
    r, s = demo["bus_amd_surat"], demo["bus_surat_0700"]
    res = client.get(f"/api/routes/{r.id}/schedules/{s.id}/fare")
    assert res.status_code == 200
    assert res.json() == {"baseFare": 350, "gst": 18, "serviceCharge": 14, "totalAmount": 382}


def test_route_schedules(client, demo):
    r = demo["bus_amd_surat"]
    res = client.get(f"/api/routes/{r.id}/schedules")
    assert res.status_code == 200
    assert [s["vehicleId"] for s in res.json()] == ["GJ-01-XX-1234", "GJ-01-XX-5678"]
    assert res.json()[0]["routeId"] == r.id


def test_route_schedules_bad_id(client, demo):
    res = client.get("/api/routes/x/schedules")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid route ID"


def test_seats(client, demo):
    res = client.get(f"/api/schedules/{demo['bus_surat_0700'].id}/seats")
    assert res.status_code == 200
    assert res.json()["transportType"] == "bus"
    assert client.get("/api/schedules/999/seats").status_code == 404


def test_create_and_fetch_booking(client, demo):
    s = demo["bus_surat_0700"]
    res = client.post("/api/bookings", json={"scheduleId": s.id, **BOOKING})
    assert res.status_code == 201
    created = res.json()
    assert created["status"] == "confirmed"
    assert created["scheduleId"] == s.id
    assert created["passengerEmail"] is None

    fetched = client.get(f"/api/bookings/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created

    trip = client.get(f"/api/routes/{demo['bus_amd_surat'].id}/schedules/{s.id}").json()
    assert trip["availableSeats"] == 34


def test_create_booking_invalid_body(client, demo):
    res = client.post("/api/bookings", json={"scheduleId": demo["bus_surat_0700"].id, **BOOKING, "passengerName": "Jo"})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid booking data"
    assert [e["field"] for e in res.json()["errors"]] == ["passengerName"]
    assert client.get("/api/bookings").json() == []


def test_create_booking_unknown_schedule(client, demo):
    res = client.post("/api/bookings", json={"scheduleId": 999, **BOOKING})
    assert res.status_code == 404
    assert res.json() == {"message": "Schedule not found"}


def test_create_booking_no_seats(client, db, demo):
    s = demo["bus_surat_0700"]
    catalog_service.update_schedule_availability(db, s.id, 0)
    res = client.post("/api/bookings", json={"scheduleId": s.id, **BOOKING})
    assert res.status_code == 400
    assert res.json() == {"message": "No seats available"}


def test_list_bookings_by_user(client, demo):
    s = demo["metro_0800"]
    client.post("/api/bookings", json={"scheduleId": s.id, "userId": 7, **BOOKING})
    client.post("/api/bookings", json={"scheduleId": s.id, "userId": 8, **BOOKING, "seatNumber": "T2"})

    assert [b["userId"] for b in client.get("/api/bookings", params={"userId": "7"}).json()] == [7]
    assert len(client.get("/api/bookings").json()) == 2
    # non-numeric userId falls back to every booking
    assert len(client.get("/api/bookings", params={"userId": "abc"}).json()) == 2


def test_get_booking_errors(client, demo):
    res = client.get("/api/bookings/abc")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid booking ID"

    res = client.get("/api/bookings/4242")
    assert res.status_code == 404
    assert res.json() == {"message": "Booking not found"}


def test_search_empty_date_means_any_day(client, demo):
    res = client.get("/api/routes/search", params={
        "source": "Ahmedabad", "destination": "Surat", "type": "bus", "date": ""})
    assert res.status_code == 200
    assert [r["departureTime"] for r in res.json()] == ["2026-10-19T07:00:00Z", "2026-10-19T14:00:00Z"]


def test_validation_message_follows_method(client, demo):
    # GET and POST share /api/bookings; only the POST validates a body
    res = client.post("/api/bookings", json={"passengerName": "Jane Doe"})
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid booking data"
    assert client.get("/api/bookings").status_code == 200


def test_create_booking_seat_taken(client, demo):
    s = demo["bus_surat_0700"]
    assert client.post("/api/bookings", json={"scheduleId": s.id, **BOOKING}).status_code == 201
    res = client.post("/api/bookings", json={"scheduleId": s.id, **BOOKING, "passengerName": "John Roe"})
    assert res.status_code == 400
    assert res.json() == {"message": "Seat A1 is already booked"}
    assert len(client.get("/api/bookings").json()) == 1


def test_list_bookings_user_id_leading_digits(client, demo):
    s = demo["metro_0800"]
    client.post("/api/bookings", json={"scheduleId": s.id, "userId": 7, **BOOKING})
    client.post("/api/bookings", json={"scheduleId": s.id, "userId": 8, **BOOKING, "seatNumber": "T2"})
    assert [b["userId"] for b in client.get("/api/bookings", params={"userId": "7abc"}).json()] == [7]
