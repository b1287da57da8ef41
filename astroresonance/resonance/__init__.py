"""Harmonic resonance analysis: aspects, batches, matrix, patterns, tables."""

from .aspect import Aspect
from .batch import ResonanceBatch
from .matrix import ResonanceMatrix
from .pattern import Pattern
from .tables import AspectTable, PatternAnalysis, PatternTable

__all__ = [
    "Aspect",
    "ResonanceBatch",
    "ResonanceMatrix",
    "Pattern",
    "PatternAnalysis",
    "PatternTable",
    "AspectTable",
]
