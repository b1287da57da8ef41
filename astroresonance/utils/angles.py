"""Angle utilities shared across AstroResonance modules."""

from __future__ import annotations

import math

__all__ = [
    "CIRCLE",
    "HALF_CIRCLE",
    "norm360",
    "delta_angle",
    "separation",
    "midpoint",
    "split_degrees",
    "parse_degrees",
    "ZODIAC_SIGNS",
    "zodiac_position",
]

CIRCLE = 360.0
HALF_CIRCLE = 180.0
SIGN_SPAN = 30.0

# (name, glyph) from Aries onwards
ZODIAC_SIGNS: tuple[tuple[str, str], ...] = (
    ("Aries", "♈"),
    ("Taurus", "♉"),
    ("Gemini", "♊"),
    ("Cancer", "♋"),
    ("Leo", "♌"),
    ("Virgo", "♍"),
    ("Libra", "♎"),
    ("Scorpio", "♏"),
    ("Sagittarius", "♐"),
    ("Capricorn", "♑"),
    ("Aquarius", "♒"),
    ("Pisces", "♓"),
)


def norm360(x: float) -> float:
    """Normalize angle to [0, 360)."""

    y = math.fmod(x, CIRCLE)
    if y < 0:
        y += CIRCLE
    # fmod of a tiny negative value can round up to a full turn
    return 0.0 if y >= CIRCLE else y


def delta_angle(a: float, b: float) -> float:
    """Smallest signed delta from ``a``→``b`` in degrees in (-180, 180].

    When the separation is exactly 180 degrees the orientation is ambiguous.
    The forward direction keeps the next representable float below 180 and
    the reverse direction receives its negation, so that
    ``delta(a, b) == -delta(b, a)`` holds everywhere.
    """

    raw = b - a
    delta = (raw + HALF_CIRCLE) % CIRCLE - HALF_CIRCLE
    if delta == -HALF_CIRCLE:
        tie = math.nextafter(HALF_CIRCLE, 0.0)
        return tie if raw >= 0.0 else -tie
    return delta


def separation(a: float, b: float) -> float:
    """Return the unsigned shortest separation between two angles, 0..180."""

    d = abs(norm360(a) - norm360(b))
    if d > HALF_CIRCLE:
        d = CIRCLE - d
    return d


def midpoint(a: float, b: float) -> float:
    """Return the circular midpoint between ``a`` and ``b`` on the shorter arc."""

    a = norm360(float(a))
    b = norm360(float(b))
    return norm360(a + delta_angle(a, b) / 2.0)


def split_degrees(value: float) -> tuple[int, int, int]:
    """Split decimal degrees into whole degrees, minutes and rounded seconds."""

    total = int(round(abs(float(value)) * 3600.0))
    degrees, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return degrees, minutes, seconds


def parse_degrees(text: str) -> float:
    """Parse ``"12.5"`` or sexagesimal ``"12 30 0"`` into decimal degrees.

    Raises :class:`ValueError` when the text holds no number or more than
    three components.
    """

    parts = text.replace("°", " ").replace("'", " ").replace('"', " ").split()
    if not parts or len(parts) > 3:
        raise ValueError(f"cannot read degrees from {text!r}")
    values = [float(part) for part in parts]
    degrees = values[0]
    sign = -1.0 if degrees < 0 or parts[0].startswith("-") else 1.0
    magnitude = abs(degrees)
    if len(values) > 1:
        magnitude += values[1] / 60.0
    if len(values) > 2:
        magnitude += values[2] / 3600.0
    return sign * magnitude


def zodiac_position(value: float) -> tuple[int, int, int]:
    """Return ``(sign index, degrees, minutes)`` of a longitude within its sign.

    Minutes are rounded; a value rounding up to 30° moves into the next sign.
    """

    total = int(round(norm360(float(value)) * 60.0)) % int(CIRCLE * 60)
    sign, within = divmod(total, int(SIGN_SPAN * 60))
    degrees, minutes = divmod(within, 60)
    return sign, degrees, minutes
