"""Numeric precision settings and physical constants shared across the engine."""

from __future__ import annotations

import math

Real = float

R_PI: Real = 3.14159
PI: Real = math.pi
HALF_PI: Real = PI * 0.5
TAU: Real = PI * 2

REAL_EPSILON: Real = 1.1920929e-07
REAL_MAX: Real = 3.4028234663852886e38

SLEEP_EPSILON: Real = 0.01
RESTITUTION_THRESHOLD: Real = 0.5


def is_valid(v: Real) -> bool:
    """Return True if ``v`` is a finite number (neither infinite nor NaN)."""
    return math.isfinite(v)