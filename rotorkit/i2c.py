"""Two-wire (I2C) bus interface and an in-memory bus for simulation and tests."""

from __future__ import annotations

import abc
from collections import defaultdict, deque

MAX_ADDRESS = 0x7F


class I2CError(Exception):
    """Raised when a transfer on the bus fails."""


def _check_address(address: int) -> None:
    if not 0 <= address <= MAX_ADDRESS:
        raise ValueError(f"I2C address out of range: {address!r}")


class I2CBus(abc.ABC):
    """A bus that can write bytes to, and read bytes from, 7-bit addressed devices."""

    @abc.abstractmethod
    def write(self, address: int, data: bytes) -> None:
        """Send ``data`` to the device at ``address`` in one transmission."""

    @abc.abstractmethod
    def read(self, address: int, length: int) -> bytes:
        """Request ``length`` bytes from the device at ``address``."""


class MemoryBus(I2CBus):
    """A bus that records every write and answers reads from queued responses."""

    def __init__(self) -> None:
        self.writes: list[tuple[int, bytes]] = []
        self._responses: defaultdict[int, deque[bytes]] = defaultdict(deque)

    def write(self, address: int, data: bytes) -> None:
        _check_address(address)
        self.writes.append((address, bytes(data)))

    def queue_response(self, address: int, data: bytes) -> None:
        """Queue ``data`` as the answer to the next read from ``address``."""
        _check_address(address)
        self._responses[address].append(bytes(data))

    def read(self, address: int, length: int) -> bytes:
        _check_address(address)
        if length < 0:
            raise ValueError(f"read length must not be negative: {length!r}")
        pending = self._responses.get(address)
        if not pending:
            raise I2CError(f"no device responded at address 0x{address:02X}")
        data = pending.popleft()
        if len(data) < length:
            raise I2CError(
                f"device at 0x{address:02X} sent {len(data)} bytes, {length} requested"
            )
        return data[:length]