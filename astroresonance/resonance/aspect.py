"""A single harmonic match recognised for a pair of points."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from ..core.harmonics import calculate_strength, find_multiplicity, prime_factors

__all__ = ["EXACT_EPSILON", "MAX_DEPTH", "Aspect"]

EXACT_EPSILON = 1e-9
MAX_DEPTH = sys.maxsize

# (upper depth bound, verbal level, star rating)
_DEPTH_RANKS: tuple[tuple[int, str, str], ...] = (
    (1, "approximate", "★"),
    (2, "confident", "★★"),
    (5, "deep", "★★★"),
    (12, "precise", "★★★★"),
    (24, "deeply precise", "★★★★★"),
)
_BEYOND_RANK = ("extremely precise", "✰✰✰✰✰")


@dataclass(frozen=True)
class Aspect:
    """Harmonic resonance of a pair: ``harmonic`` with its quality figures.

    ``clearance`` is measured in the frame of the harmonic chart, so it is
    directly comparable with the orb. ``depth`` tells through how many
    successive multiples of ``harmonic`` the match stays inside the orb.
    """

    harmonic: int
    multiplicity: int
    clearance: float
    strength: float
    depth: int

    @classmethod
    def from_match(cls, harmonic: int, clearance: float, arc: float, orb: float) -> Aspect:
        """Build an aspect for ``arc`` matched at ``harmonic`` with ``clearance``."""

        if clearance <= EXACT_EPSILON:
            depth = MAX_DEPTH
        else:
            depth = int(math.floor(orb / clearance))
        return cls(
            harmonic=harmonic,
            multiplicity=find_multiplicity(harmonic, arc, orb),
            clearance=clearance,
            strength=calculate_strength(orb, clearance),
            depth=depth,
        )

    @property
    def multipliers(self) -> list[int]:
        return prime_factors(self.harmonic)

    @property
    def is_exact(self) -> bool:
        return self.depth == MAX_DEPTH

    def has_resonance(self, harmonic: int) -> bool:
        """True when the match still reads as a conjunction in ``harmonic``."""

        return harmonic % self.harmonic == 0 and harmonic // self.harmonic <= self.depth

    def _rank(self) -> tuple[str, str]:
        for bound, level, stars in _DEPTH_RANKS:
            if self.depth <= bound:
                return level, stars
        return _BEYOND_RANK

    @property
    def strength_level(self) -> str:
        return self._rank()[0]

    @property
    def strength_rating(self) -> str:
        return self._rank()[1]

    @property
    def weighted_strength(self) -> float:
        """Strength damped for higher harmonics, used to rank report lines."""

        return self.strength / math.sqrt(math.log(self.harmonic + 1.0))
