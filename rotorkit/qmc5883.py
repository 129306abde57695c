"""Driver for the QMC5883L three-axis magnetometer."""

from __future__ import annotations

import math
import struct

from rotorkit.i2c import I2CBus

QMC5883_ADDR = 0x0D

DATA_REGISTER = 0x00
CONTROL_REGISTER_1 = 0x09
CONTROL_REGISTER_2 = 0x0A
SET_RESET_PERIOD_REGISTER = 0x0B

MODE_STANDBY = 0b00000000
MODE_CONTINUOUS = 0b00000001

ODR_10HZ = 0b00000000
ODR_50HZ = 0b00000100
ODR_100HZ = 0b00001000
ODR_200HZ = 0b00001100

RNG_2G = 0b00000000
RNG_8G = 0b00010000

OSR_512 = 0b00000000
OSR_256 = 0b01000000
OSR_128 = 0b10000000
OSR_64 = 0b11000000

SOFT_RESET = 0x80


def azimuth(a: int, b: int) -> float:
    """Angle of (b, a) in degrees, in the range 0 to 360."""
    angle = math.degrees(math.atan2(a, b))
    return angle + 360 if angle < 0 else angle


class MechaQMC5883:
    """A QMC5883L magnetometer on an I2C bus."""

    def __init__(self, bus: I2CBus, address: int = QMC5883_ADDR) -> None:
        self._bus = bus
        self.address = address

    def init(self) -> None:
        """Set the set/reset period and start 200 Hz continuous measurement at 8 G."""
        self._write_register(SET_RESET_PERIOD_REGISTER, 0x01)
        self.set_mode(MODE_CONTINUOUS, ODR_200HZ, RNG_8G, OSR_512)

    def set_mode(self, mode: int, odr: int, rng: int, osr: int) -> None:
        self._write_register(CONTROL_REGISTER_1, mode | odr | rng | osr)

    def soft_reset(self) -> None:
        self._write_register(CONTROL_REGISTER_2, SOFT_RESET)

    def read(self) -> tuple[int, int, int]:
        """Read the three axes as signed counts, low byte first."""
        self._bus.write(self.address, bytes([DATA_REGISTER]))
        data = self._bus.read(self.address, 6)
        x, y, z = struct.unpack("<hhh", data)
        return x, y, z

    def read_with_azimuth(self) -> tuple[int, int, int, float]:
        """Read the axes and the heading computed from Y over X."""
        x, y, z = self.read()
        return x, y, z, azimuth(y, x)

    def _write_register(self, register: int, value: int) -> None:
        self._bus.write(self.address, bytes([register, value & 0xFF]))