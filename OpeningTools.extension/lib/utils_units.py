# -*- coding: utf-8 -*-

"""Length conversion between millimeters and Revit internal units (feet).

Opening clearances and dedupe radii are configured in millimeters; all
geometry in the opening pipeline is in feet.

Example:
    >>> from utils_units import mm_to_ft, ft_to_mm
    >>> mm_to_ft(30)
    0.0984251968503937
    >>> ft_to_mm(1.0)
    304.8
"""
from typing import Optional, Union


MM_PER_FOOT: float = 304.8

Number = Union[float, int, str]


def _as_float(value: Number) -> float:
    if isinstance(value, str):
        # "30,5" is how clearances come out of Russian-locale configs
        value = value.strip().replace(',', '.')
    return float(value)


def mm_to_ft(mm: Optional[Number]) -> Optional[float]:
    """Convert millimeters to feet.

    Args:
        mm: Value in millimeters (number or numeric string). None passes through.

    Returns:
        Value in feet, or None.
    """
    if mm is None:
        return None
    return _as_float(mm) / MM_PER_FOOT


def ft_to_mm(ft: Optional[Number]) -> Optional[float]:
    """Convert feet to millimeters. None passes through."""
    if ft is None:
        return None
    return _as_float(ft) * MM_PER_FOOT


def opening_size_mm(size_ft: Optional[float], step_mm: int = 1) -> Optional[int]:
    """Opening size in whole millimeters for reports, rounded to ``step_mm``."""
    if size_ft is None:
        return None
    mm = ft_to_mm(size_ft)
    step = max(int(step_mm or 1), 1)
    return int(round(mm / step) * step)
