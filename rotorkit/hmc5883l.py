"""Driver for the HMC5883L three-axis magnetometer."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from rotorkit.i2c import I2CBus

HMC5883L_ADDRESS = 0x1E
CONFIGURATION_REGISTER_A = 0x00
CONFIGURATION_REGISTER_B = 0x01
MODE_REGISTER = 0x02
DATA_REGISTER_BEGIN = 0x03

INVALID_SCALE_MESSAGE = (
    "Entered scale was not valid, valid gauss values are: "
    "0.88, 1.3, 1.9, 2.5, 4.0, 4.7, 5.6, 8.1"
)

# gauss range -> (gain register setting, milligauss per count)
_SCALES: dict[float, tuple[int, float]] = {
    0.88: (0x00, 0.73),
    1.3: (0x01, 0.92),
    1.9: (0x02, 1.22),
    2.5: (0x03, 1.52),
    4.0: (0x04, 2.27),
    4.7: (0x05, 2.56),
    5.6: (0x06, 3.03),
    8.1: (0x07, 4.35),
}


@dataclass(frozen=True)
class MagnetometerRaw:
    """Raw signed counts from the three axes."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class MagnetometerScaled:
    """Axis readings multiplied by the current scale."""

    x: float
    y: float
    z: float


class MeasurementMode(IntEnum):
    CONTINUOUS = 0x00
    SINGLE_SHOT = 0x01
    IDLE = 0x03


class HMC5883L:
    """An HMC5883L magnetometer on an I2C bus."""

    def __init__(self, bus: I2CBus) -> None:
        self._bus = bus
        self.scale = 1.0

    def read_raw_axis(self) -> MagnetometerRaw:
        """Read the six data registers; the device orders them X, Z, Y."""
        data = self._read(DATA_REGISTER_BEGIN, 6)
        x, z, y = struct.unpack(">hhh", data)
        return MagnetometerRaw(x=x, y=y, z=z)

    def read_scaled_axis(self) -> MagnetometerScaled:
        raw = self.read_raw_axis()
        return MagnetometerScaled(
            x=raw.x * self.scale, y=raw.y * self.scale, z=raw.z * self.scale
        )

    def set_scale(self, gauss: float) -> None:
        """Select the field range; raises ValueError for an unsupported range."""
        try:
            setting, scale = _SCALES[gauss]
        except KeyError:
            raise ValueError(INVALID_SCALE_MESSAGE) from None
        self.scale = scale
        # The gain setting lives in the top three bits of the register.
        self._write(CONFIGURATION_REGISTER_B, setting << 5)

    def set_measurement_mode(self, mode: int) -> None:
        self._write(MODE_REGISTER, MeasurementMode(mode))

    def _write(self, register: int, value: int) -> None:
        self._bus.write(HMC5883L_ADDRESS, bytes([register, value]))

    def _read(self, register: int, length: int) -> bytes:
        self._bus.write(HMC5883L_ADDRESS, bytes([register]))
        return self._bus.read(HMC5883L_ADDRESS, length)