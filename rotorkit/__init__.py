"""Antenna rotator toolkit: orbit prediction, buffered LCD screen, display text and I2C drivers."""

__version__ = "0.1.0"

__all__ = [
    "display",
    "fabo_lcd",
    "hmc5883l",
    "i2c",
    "language",
    "layout",
    "orbit",
    "qmc5883",
]