"""Small vector and numeric helpers shared by the UI code."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)


def distance(a: Vector2, b: Vector2) -> float:
    """Euclidean distance between two points."""
    return (a - b).length


def normalize_vector(v: Vector2) -> Vector2:
    """Unit vector in the direction of ``v``; a zero vector is returned unchanged."""
    mag = v.length
    if mag > 0:
        return Vector2(v.x / mag, v.y / mag)
    return v


def clamp_value(value: float, minimum: float, maximum: float) -> float:
    """Restrict ``value`` to the range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def lerp(start: float, end: float, amount: float) -> float:
    """Linear interpolation between ``start`` and ``end``."""
    return start + amount * (end - start)


def random_range(
    minimum: float, maximum: float, rng: random.Random | None = None
) -> float:
    """Random value in [minimum, maximum], quantised to 1000 steps."""
    source = rng if rng is not None else random
    return minimum + (maximum - minimum) * source.randint(0, 999) / 999.0


def random_velocity(speed: float, rng: random.Random | None = None) -> Vector2:
    """Velocity of the given speed in a random whole-degree direction."""
    source = rng if rng is not None else random
    angle = math.radians(source.randint(0, 360))
    return Vector2(math.cos(angle) * speed, math.sin(angle) * speed)


def pulse_value(minimum: float, maximum: float, frequency: float, time: float) -> float:
    """Value oscillating between ``minimum`` and ``maximum`` at time ``time``."""
    return minimum + (maximum - minimum) * (0.5 + 0.5 * math.sin(time * frequency))