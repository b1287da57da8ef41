"""Core numeric helpers for harmonic analysis."""

from .harmonics import (
    arc,
    arc_in_harmonic,
    calculate_strength,
    find_multiplicity,
    harmonic_arc,
    prime_factors,
)

__all__ = [
    "arc",
    "arc_in_harmonic",
    "harmonic_arc",
    "prime_factors",
    "find_multiplicity",
    "calculate_strength",
]
