"""Fixed-precision display strings for coordinates and distances."""

from __future__ import annotations

from pdbgeom.config import COORDINATE_DECIMALS, DISTANCE_DECIMALS, DISTANCE_UNIT


def format_coordinate(value: float, decimals: int = COORDINATE_DECIMALS) -> str:
    return f"{value:.{decimals}f}"


def format_distance(value: float, decimals: int = DISTANCE_DECIMALS) -> str:
    """Format a distance with its unit, e.g. ``"1.503 Å"``."""
    return f"{value:.{decimals}f} {DISTANCE_UNIT}"
