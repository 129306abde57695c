# rotorkit

Building blocks for an antenna rotator controller, in plain Python with no
third-party dependencies.

## What is inside

- `rotorkit.orbit` — Plan13 satellite and sun position prediction:
  `SatDateTime` (day number plus fraction of a day, with `add`, `roundup`,
  `gettime` and `ascii`), `Observer`, `Satellite` (loaded from two-line
  elements with `tle`, then `predict`, `lat_lon` and `alt_az`) and `Sun`.
  `Sun.alt_az` works from the unit sun vector and is not a true solar
  position.
- `rotorkit.display` — `Display`, a character-LCD screen that stages changes
  in a pending buffer and writes only what changed. `service()` pushes
  changes at most once per `update_time_ms`, blinks text carrying
  `Attribute.BLINK` every 500 ms, and restores the earlier screen when a timed
  message runs out. It drives any object with the `LcdDevice` methods
  `begin`, `clear`, `no_cursor`, `set_cursor` and `print`.
- `rotorkit.layout` — `LayoutDisplay`, a `Display` that can centre text,
  align it left or right, pad it or fit it to a field, place it in a corner,
  and show one to four centred lines as a timed message
  (`print_center_timed_message(..., ms_to_display=...)`).
- `rotorkit.language` — display text for nine languages (`Language`,
  `DisplayStrings`, `get_strings`), including `compass_point(heading)` for the
  nearest of the sixteen compass points.
- Drivers that talk through an `I2CBus` (`rotorkit.i2c`):
  - `rotorkit.hmc5883l.HMC5883L` — magnetometer; `set_scale` raises
    `ValueError` for an unsupported range.
  - `rotorkit.qmc5883.MechaQMC5883` — magnetometer, with `read` and
    `read_with_azimuth`.
  - `rotorkit.fabo_lcd.FaBoLCD` — HD44780 LCD behind a PCF8574 expander; it
    has the methods `Display` needs.
- `rotorkit.i2c.MemoryBus` — an in-memory bus that records every write in
  `writes` and answers reads from responses queued with `queue_response`;
  a read with nothing queued raises `I2CError`.

## Installation

```
pip install rotorkit
```

## Where is the satellite?

```python
from rotorkit.orbit import Observer, Satellite, SatDateTime

line1 = "1 25544U 98067A   21001.00000000  .00001000  00000-0  10000-4 0  9990"
line2 = "2 25544  51.6400 100.0000 0001000  90.0000 270.0000 15.50000000100000"

station = Observer("home", 40.0, -75.0, 100.0)
sat = Satellite("demo", line1, line2)
sat.predict(SatDateTime(2021, 1, 1, 12, 0, 0))
elevation, azimuth = sat.alt_az(station)
latitude, longitude = sat.lat_lon()
```

## A simulated compass

```python
from rotorkit.i2c import MemoryBus
from rotorkit.qmc5883 import MechaQMC5883

bus = MemoryBus()
compass = MechaQMC5883(bus, 0x0D)
compass.init()
bus.queue_response(0x0D, bytes([0x10, 0x00, 0x20, 0x00, 0x00, 0x00]))
x, y, z, heading = compass.read_with_azimuth()
```

## A screen on a simulated LCD

```python
from rotorkit.fabo_lcd import FaBoLCD
from rotorkit.i2c import MemoryBus
from rotorkit.language import get_strings
from rotorkit.layout import LayoutDisplay

lcd = FaBoLCD(MemoryBus(), 0x20, sleep=lambda seconds: None)
screen = LayoutDisplay(lcd, 16, 2)
screen.initialize()

text = get_strings("english")
screen.print_left(text.az_space + "123", 0)
screen.print_right(text.compass_point(123), 0)
screen.service(force_update=1)
print(screen.live_text())
```

## What it does not do

rotorkit offers parts, not a finished controller. There is no command-line
program, no serial command protocol, no motor or relay control, and no main
loop tying orbit prediction, sensors and the screen together; the caller
wires these up and calls `Display.service()` itself. Besides the two
magnetometers, no other position sensor has a driver here, and the only bus
provided is the in-memory `MemoryBus`: talking to real hardware needs an
`I2CBus` subclass of your own.

## Running the tests

```
pip install rotorkit[test]
pytest
```