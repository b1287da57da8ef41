"""Shared utility helpers."""

from .angles import delta_angle, midpoint, norm360, split_degrees

__all__ = ["delta_angle", "midpoint", "norm360", "split_degrees"]
