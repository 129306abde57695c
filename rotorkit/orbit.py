"""Plan13 satellite and sun position prediction."""

from __future__ import annotations

import math
import re

Vec3 = tuple[float, float, float]

# Earth and orbit constants
RE = 6378.137  # equatorial radius, km
FL = 1.0 / 298.257224  # flattening
GM = 3.986e5  # gravitational constant, km^3/s^2
J2 = 1.08263e-3  # second zonal harmonic
YM = 365.25  # mean year, days
YT = 365.2421874  # tropical year, days
WW = 2.0 * math.pi / YT  # earth's rotation rate about the sun, rad/day
WE = 2.0 * math.pi + WW  # earth's rotation rate, rad/day
W0 = WE / 86400.0  # earth's rotation rate, rad/s

# Sun constants for the reference year
YG = 2014.0
G0 = 99.5828
MAS0 = 356.4105
MASD = 0.98560028
EQC1 = 0.03340
EQC2 = 0.00035
INS = math.radians(23.4375)
CNS = math.cos(INS)
SNS = math.sin(INS)

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

_LINE1_MIN_LENGTH = 43
_LINE2_MIN_LENGTH = 68


def day_number(year: int, month: int, day: int) -> int:
    """Plan13 day number of a calendar date."""
    if month < 3:
        month += 12
        year -= 1
    return int(year * YM) + int((month + 1) * 30.6) + day - 428


def date_from_day_number(day_number: int) -> tuple[int, int, int]:
    """Calendar date (year, month, day) of a Plan13 day number."""
    dt = day_number + 428
    year = int((dt - 122.1) / 365.25)
    dt -= int(year * 365.25)
    month = int(dt / 30.61)
    dt -= int(month * 30.6)
    month -= 1
    if month > 12:
        month -= 12
        year += 1
    return year, month, dt


class SatDateTime:
    """A moment in time as a day number and a fraction of the day."""

    def __init__(
        self,
        year: int | None = None,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> None:
        self.dn = 0
        self.tn = 0.0
        if year is not None:
            self.settime(year, month, day, hour, minute, second)

    def settime(
        self, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> None:
        self.dn = day_number(year, month, day)
        self.tn = (hour + minute / 60.0 + second / 3600.0) / 24.0

    def gettime(self) -> tuple[int, int, int, int, int, int]:
        """Return (year, month, day, hour, minute, second), truncating each part."""
        year, month, day = date_from_day_number(self.dn)
        t = self.tn * 24.0
        hour = int(t)
        t = (t - hour) * 60
        minute = int(t)
        t = (t - minute) * 60
        second = int(t)
        return year, month, day, hour, minute, second

    def ascii(self) -> str:
        """Format as MM/DD/YYYY HH:MM:SS."""
        year, month, day, hour, minute, second = self.gettime()
        return f"{month:02d}/{day:02d}/{year:4d} {hour:02d}:{minute:02d}:{second:02d}"

    def add(self, days: float) -> None:
        self.tn += days
        self._normalise()

    def roundup(self, interval: float) -> None:
        """Advance to the next multiple of ``interval`` days within the day."""
        self.tn += interval - math.fmod(self.tn, interval)
        self._normalise()

    def copy(self) -> SatDateTime:
        other = SatDateTime()
        other.dn = self.dn
        other.tn = self.tn
        return other

    def _normalise(self) -> None:
        whole = int(self.tn)
        self.dn += whole
        self.tn -= whole

    def __repr__(self) -> str:
        return f"SatDateTime({self.ascii()!r})"


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _alt_az(target: Vec3, observer: Observer) -> tuple[float, float]:
    r = (
        target[0] - observer.o[0],
        target[1] - observer.o[1],
        target[2] - observer.o[2],
    )
    length = math.sqrt(_dot(r, r))
    r = (r[0] / length, r[1] / length, r[2] / length)
    u = _dot(r, observer.u)
    e = _dot(r, observer.e)
    n = _dot(r, observer.n)
    az = math.degrees(math.atan2(e, n))
    if az < 0.0:
        az += 360.0
    return math.degrees(math.asin(u)), az


class Observer:
    """A ground station; vectors are geocentric, distances in km."""

    def __init__(self, name: str, latitude: float, longitude: float, height: float) -> None:
        self.name = name
        self.lat_rad = math.radians(latitude)
        self.lon_rad = math.radians(longitude)
        self.height_km = height / 1000

        la, lo = self.lat_rad, self.lon_rad
        self.u: Vec3 = (math.cos(la) * math.cos(lo), math.cos(la) * math.sin(lo), math.sin(la))
        self.e: Vec3 = (-math.sin(lo), math.cos(lo), 0.0)
        self.n: Vec3 = (-math.sin(la) * math.cos(lo), -math.sin(la) * math.sin(lo), math.cos(la))

        rp = RE * (1 - FL)
        xx = RE * RE
        zz = rp * rp
        d = math.sqrt(xx * math.cos(la) ** 2 + zz * math.sin(la) ** 2)
        rx = xx / d + self.height_km
        rz = zz / d + self.height_km

        self.o: Vec3 = (rx * self.u[0], rx * self.u[1], rz * self.u[2])
        self.v: Vec3 = (-self.o[1] * W0, self.o[0] * W0, 0.0)


def _field(line: str, start: int, end: int) -> str:
    return line[start:end]


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


class Satellite:
    """A satellite described by a two-line element set."""

    def __init__(self, name: str = "", line1: str | None = None, line2: str | None = None) -> None:
        self.name = name
        self._loaded = False
        self._predicted = False
        if line1 is not None or line2 is not None:
            if line1 is None or line2 is None:
                raise ValueError("both element lines are required")
            self.tle(name, line1, line2)

    def tle(self, name: str, line1: str, line2: str) -> None:
        """Load orbital elements from the two lines of a TLE."""
        if len(line1) < _LINE1_MIN_LENGTH:
            raise ValueError(f"element line 1 too short: {len(line1)} characters")
        if len(line2) < _LINE2_MIN_LENGTH:
            raise ValueError(f"element line 2 too short: {len(line2)} characters")
        self.name = name

        self.number = _parse_int(_field(line2, 2, 7))
        year = _parse_int(_field(line1, 18, 20))
        self.epoch_year = year + 2000 if year < 58 else year + 1900

        te = _parse_float(_field(line1, 20, 32))
        self.decay = math.radians(_parse_float(_field(line1, 33, 43)))

        self.inclination = math.radians(_parse_float(_field(line2, 8, 16)))
        self.raan = math.radians(_parse_float(_field(line2, 17, 25)))
        self.eccentricity = _parse_float(_field(line2, 26, 33)) / 1e7
        self.arg_perigee = math.radians(_parse_float(_field(line2, 34, 42)))
        self.mean_anomaly = math.radians(_parse_float(_field(line2, 43, 51)))
        self.mean_motion = 2.0 * math.pi * _parse_float(_field(line2, 52, 63))
        self.revolution_number = _parse_int(_field(line2, 63, 68))

        self.epoch_day = day_number(self.epoch_year, 1, 0) + int(te)
        self.epoch_fraction = te - int(te)

        self.n0 = self.mean_motion / 86400
        self.a0 = (GM / (self.n0 * self.n0)) ** (1.0 / 3.0)
        self.b0 = self.a0 * math.sqrt(1.0 - self.eccentricity**2)
        pc = RE * self.a0 / (self.b0 * self.b0)
        self.pc = 1.5 * J2 * pc * pc * self.mean_motion
        ci = math.cos(self.inclination)
        self.qd = -self.pc * ci
        self.wd = self.pc * (5 * ci * ci - 1) / 2
        self.dc = -2 * self.decay / (3 * self.mean_motion)

        self._loaded = True
        self._predicted = False

    def predict(self, when: SatDateTime) -> None:
        """Compute position and velocity at ``when``."""
        if not self._loaded:
            raise RuntimeError("no orbital elements loaded; call tle() first")

        teg = self.epoch_day - day_number(int(YG), 1, 0) + self.epoch_fraction
        ghae = math.radians(G0) + teg * WE

        t = (when.dn - self.epoch_day) + (when.tn - self.epoch_fraction)
        dt = self.dc * t / 2.0
        kd = 1.0 + 4.0 * dt
        kdp = 1.0 - 7.0 * dt

        m = self.mean_anomaly + self.mean_motion * t * (1.0 - 3.0 * dt)
        dr = int(m / (2.0 * math.pi))
        m -= dr * 2.0 * math.pi
        self.orbit_number = self.revolution_number + dr

        ec = self.eccentricity
        ea = m
        while True:
            c_ea = math.cos(ea)
            s_ea = math.sin(ea)
            dnom = 1.0 - ec * c_ea
            d = (ea - ec * s_ea - m) / dnom
            ea -= d
            if abs(d) < 1e-5:
                break

        a = self.a0 * kd
        b = self.b0 * kd
        self.radius = a * dnom

        sx = a * (c_ea - ec)
        sy = b * s_ea
        vx = -a * s_ea / dnom * self.n0
        vy = b * c_ea / dnom * self.n0

        ap = self.arg_perigee + self.wd * t * kdp
        cw, sw = math.cos(ap), math.sin(ap)
        raan = self.raan + self.qd * t * kdp
        cq, sq = math.cos(raan), math.sin(raan)
        ci, si = math.cos(self.inclination), math.sin(self.inclination)

        # Rows of the matrix from orbit-plane to celestial coordinates.
        cx = (cw * cq - sw * ci * sq, -sw * cq - cw * ci * sq, si * sq)
        cy = (cw * sq + sw * ci * cq, -sw * sq + cw * ci * cq, -si * cq)
        cz = (sw * si, cw * si, ci)

        self.sat: Vec3 = (
            sx * cx[0] + sy * cx[1],
            sx * cy[0] + sy * cy[1],
            sx * cz[0] + sy * cz[1],
        )
        self.vel: Vec3 = (
            vx * cx[0] + vy * cx[1],
            vx * cy[0] + vy * cy[1],
            vx * cz[0] + vy * cz[1],
        )

        ghaa = ghae + WE * t
        cg, sg = math.cos(-ghaa), math.sin(-ghaa)
        self.s: Vec3 = (
            self.sat[0] * cg - self.sat[1] * sg,
            self.sat[0] * sg + self.sat[1] * cg,
            self.sat[2],
        )
        self.v: Vec3 = (
            self.vel[0] * cg - self.vel[1] * sg,
            self.vel[0] * sg + self.vel[1] * cg,
            self.vel[2],
        )
        self._predicted = True

    def lat_lon(self) -> tuple[float, float]:
        """Sub-satellite point (latitude, longitude) in degrees."""
        self._require_prediction()
        lat = math.degrees(math.asin(self.s[2] / self.radius))
        lon = math.degrees(math.atan2(self.s[1], self.s[0]))
        return lat, lon

    def alt_az(self, observer: Observer) -> tuple[float, float]:
        """(elevation, azimuth) in degrees as seen by ``observer``."""
        self._require_prediction()
        return _alt_az(self.s, observer)

    def _require_prediction(self) -> None:
        if not self._predicted:
            raise RuntimeError("no position computed; call predict() first")


class Sun:
    """The sun's direction as a geocentric unit vector."""

    def __init__(self) -> None:
        self._predicted = False

    def predict(self, when: SatDateTime) -> None:
        t = (when.dn - day_number(int(YG), 1, 0)) + when.tn
        ghae = math.radians(G0) + t * WE
        mrse = math.radians(G0) + t * WW + math.pi
        mase = math.radians(MAS0 + t * MASD)
        tas = mrse + EQC1 * math.sin(mase) + EQC2 * math.sin(2.0 * mase)

        c, s = math.cos(tas), math.sin(tas)
        self.sun: Vec3 = (c, s * CNS, s * SNS)
        c, s = math.cos(-ghae), math.sin(-ghae)
        self.h: Vec3 = (
            self.sun[0] * c - self.sun[1] * s,
            self.sun[0] * s + self.sun[1] * c,
            self.sun[2],
        )
        self._predicted = True

    def lat_lon(self) -> tuple[float, float]:
        """Sub-solar point (latitude, longitude) in degrees."""
        self._require_prediction()
        return math.degrees(math.asin(self.h[2])), math.degrees(math.atan2(self.h[1], self.h[0]))

    def alt_az(self, observer: Observer) -> tuple[float, float]:
        """(elevation, azimuth) from the unit sun vector; not a true solar position."""
        self._require_prediction()
        return _alt_az(self.h, observer)

    def _require_prediction(self) -> None:
        if not self._predicted:
            raise RuntimeError("no position computed; call predict() first")