import pytest

from rotorkit.i2c import I2CBus, I2CError, MemoryBus


def test_memory_bus_is_an_i2c_bus():
    bus = MemoryBus()
    assert isinstance(bus, I2CBus)
    assert bus.writes == []


def test_write_is_recorded_with_address():
    bus = MemoryBus()
    bus.write(0x1E, [0x02, 0x00])
    bus.write(0x0D, b"\x0a\x80")
    assert bus.writes == [(0x1E, b"\x02\x00"), (0x0D, b"\x0a\x80")]


def test_responses_are_returned_in_order():
    bus = MemoryBus()
    bus.queue_response(0x1E, b"\x01\x02")
    bus.queue_response(0x1E, b"\x03\x04")
    assert bus.read(0x1E, 2) == b"\x01\x02"
    assert bus.read(0x1E, 2) == b"\x03\x04"


def test_responses_are_kept_per_address():
    bus = MemoryBus()
    bus.queue_response(0x1E, b"\xaa")
    bus.queue_response(0x0D, b"\xbb")
    assert bus.read(0x0D, 1) == b"\xbb"
    assert bus.read(0x1E, 1) == b"\xaa"


def test_longer_response_is_truncated():
    bus = MemoryBus()
    bus.queue_response(0x20, b"\x01\x02\x03")
    assert bus.read(0x20, 2) == b"\x01\x02"


def test_read_without_response_raises():
    bus = MemoryBus()
    with pytest.raises(I2CError):
        bus.read(0x1E, 6)


def test_short_response_raises():
    bus = MemoryBus()
    bus.queue_response(0x1E, b"\x01\x02")
    with pytest.raises(I2CError):
        bus.read(0x1E, 6)


def test_invalid_address_rejected():
    bus = MemoryBus()
    with pytest.raises(ValueError):
        bus.write(0x80, b"\x00")


def test_negative_length_rejected():
    bus = MemoryBus()
    bus.queue_response(0x10, b"\x00")
    with pytest.raises(ValueError):
        bus.read(0x10, -1)