import datetime
import math

import pytest

from rotorkit.orbit import (
    INS,
    RE,
    W0,
    Observer,
    SatDateTime,
    Satellite,
    Sun,
    date_from_day_number,
    day_number,
)

LINE1 = "1 25544U 98067A   08264.51782528 -.00002182  00000-0 -11606-4 0  2927"
LINE2 = "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537"


def _norm(v):
    return math.sqrt(sum(c * c for c in v))


def _dates(start, count, step=1):
    day = start
    for _ in range(count):
        yield day
        day += datetime.timedelta(days=step)


def test_day_number_matches_calendar_differences():
    base = datetime.date(2000, 1, 1)
    base_dn = day_number(2000, 1, 1)
    for d in _dates(datetime.date(1960, 1, 1), 400, step=97):
        assert day_number(d.year, d.month, d.day) - base_dn == (d - base).days


def test_date_from_day_number_inverts_day_number():
    for d in _dates(datetime.date(2019, 12, 1), 500):
        assert date_from_day_number(day_number(d.year, d.month, d.day)) == (
            d.year,
            d.month,
            d.day,
        )


def test_gettime_round_trip():
    when = SatDateTime(2014, 1, 1, 1, 30, 0)
    assert when.gettime() == (2014, 1, 1, 1, 30, 0)


def test_default_is_day_zero():
    when = SatDateTime()
    assert (when.dn, when.tn) == (0, 0.0)


def test_ascii_format():
    assert SatDateTime(2014, 1, 1, 1, 30, 0).ascii() == "01/01/2014 01:30:00"


def test_add_carries_into_days():
    when = SatDateTime(2014, 1, 1, 0, 0, 0)
    when.add(1.5)
    assert when.gettime() == (2014, 1, 2, 12, 0, 0)


def test_add_crosses_month_end():
    when = SatDateTime(2014, 1, 31, 0, 0, 0)
    when.add(1.0)
    assert when.gettime()[:3] == (2014, 2, 1)


def test_roundup_within_day():
    when = SatDateTime(2014, 1, 1, 1, 30, 0)
    when.roundup(0.25)
    assert when.tn == 0.25
    assert when.gettime()[3:] == (6, 0, 0)


def test_roundup_rolls_into_next_day():
    when = SatDateTime(2014, 1, 1, 22, 30, 0)
    start = when.dn
    when.roundup(0.25)
    assert when.dn == start + 1
    assert when.tn == 0.0


def test_copy_is_independent():
    when = SatDateTime(2014, 1, 1, 12, 0, 0)
    other = when.copy()
    other.add(1.0)
    assert (other.dn, other.tn) == (when.dn + 1, when.tn)


def test_observer_at_origin():
    obs = Observer("origin", 0.0, 0.0, 0.0)
    assert obs.o == pytest.approx((RE, 0.0, 0.0))
    assert obs.v == pytest.approx((0.0, RE * W0, 0.0))


def test_observer_basis_is_orthonormal():
    obs = Observer("station", 40.0, -75.0, 100.0)
    for vec in (obs.u, obs.e, obs.n):
        assert _norm(vec) == pytest.approx(1.0)
    dots = [
        sum(a * b for a, b in zip(obs.u, obs.e)),
        sum(a * b for a, b in zip(obs.u, obs.n)),
        sum(a * b for a, b in zip(obs.e, obs.n)),
    ]
    assert dots == pytest.approx([0.0, 0.0, 0.0])
    assert obs.height_km == pytest.approx(0.1)


def test_tle_fields():
    sat = Satellite("ISS", LINE1, LINE2)
    assert sat.number == 25544
    assert sat.epoch_year == 2008
    assert sat.eccentricity == pytest.approx(0.0006703)
    assert sat.inclination == pytest.approx(math.radians(51.6416))
    assert sat.mean_motion == pytest.approx(2 * math.pi * 15.72125391)
    assert sat.revolution_number == 56353
    assert sat.epoch_day == day_number(2008, 1, 0) + 264
    assert sat.epoch_fraction == pytest.approx(0.51782528)


def test_short_lines_rejected():
    with pytest.raises(ValueError):
        Satellite("bad", LINE1[:30], LINE2)
    with pytest.raises(ValueError):
        Satellite("bad", LINE1, LINE2[:40])


def test_predict_requires_elements():
    with pytest.raises(RuntimeError):
        Satellite().predict(SatDateTime(2008, 9, 20, 12, 0, 0))


def test_lat_lon_requires_prediction():
    sat = Satellite("ISS", LINE1, LINE2)
    with pytest.raises(RuntimeError):
        sat.lat_lon()


@pytest.fixture
def predicted():
    sat = Satellite("ISS", LINE1, LINE2)
    sat.predict(SatDateTime(2008, 9, 20, 12, 0, 0))
    return sat


def test_position_length_equals_radius(predicted):
    assert _norm(predicted.s) == pytest.approx(predicted.radius)
    assert _norm(predicted.sat) == pytest.approx(predicted.radius)


def test_low_earth_orbit_altitude(predicted):
    assert 300 < predicted.radius - RE < 450


def test_latitude_bounded_by_inclination(predicted):
    sat = predicted
    when = SatDateTime(2008, 9, 20, 12, 0, 0)
    for _ in range(50):
        when.add(0.01)
        sat.predict(when)
        lat, lon = sat.lat_lon()
        assert abs(lat) <= math.degrees(sat.inclination) + 1e-6
        assert -180 <= lon <= 180


def test_overhead_from_subsatellite_point(predicted):
    lat, lon = predicted.lat_lon()
    alt, az = predicted.alt_az(Observer("below", lat, lon, 0.0))
    assert alt > 85
    assert 0 <= az < 360


def test_sun_vector_is_unit_and_bounded():
    sun = Sun()
    when = SatDateTime(2014, 1, 1, 0, 0, 0)
    for _ in range(40):
        sun.predict(when)
        assert _norm(sun.h) == pytest.approx(1.0)
        lat, _ = sun.lat_lon()
        assert abs(lat) <= math.degrees(INS) + 1e-9
        when.add(9.0)


def test_sun_solstices():
    sun = Sun()
    sun.predict(SatDateTime(2014, 6, 21, 12, 0, 0))
    assert sun.lat_lon()[0] > 23
    sun.predict(SatDateTime(2014, 12, 21, 12, 0, 0))
    assert sun.lat_lon()[0] < -23


def test_sun_alt_az_in_range():
    sun = Sun()
    sun.predict(SatDateTime(2014, 3, 20, 12, 0, 0))
    alt, az = sun.alt_az(Observer("station", 40.0, -75.0, 0.0))
    assert -90 <= alt <= 90
    assert 0 <= az < 360


def test_sun_requires_prediction():
    with pytest.raises(RuntimeError):
        Sun().lat_lon()