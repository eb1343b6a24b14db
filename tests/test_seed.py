from app import seed
from app.core.dates import as_utc
from app.models.booking import Booking
from app.models.offer import Offer
from app.models.popular_route import PopularRoute
from app.models.provider import Provider
from app.models.route import Route
from app.models.schedule import Schedule


def test_seed_runs_once(db):
    assert seed.run(db) is True
    assert seed.run(db) is False
    assert db.query(Provider).count() == 4
    assert db.query(Route).count() == 5
    assert db.query(Schedule).count() == 7
    assert db.query(PopularRoute).count() == 4
    assert db.query(Offer).count() == 3
    assert db.query(Booking).count() == 0


def test_seed_skipped_when_providers_exist(db):
    db.add(Provider(name="GSRTC", type="bus"))
    db.commit()
    assert seed.run(db) is False
    assert db.query(Route).count() == 0


def test_seeded_schedules_are_consistent(db, demo):
    for s in db.query(Schedule).all():
        assert as_utc(s.arrival_time) > as_utc(s.departure_time)
        assert s.available_seats > 0
        assert s.status == "active"


def test_seeded_offers(db, demo):
    offers = {o.title: o for o in db.query(Offer).all()}
    assert offers["Monsoon Special"].applicable_types == ["flight", "train", "bus", "metro"]
    assert offers["Monsoon Special"].discount is None
    assert offers["20% off on GSRTC routes"].applicable_types == ["bus"]
