# -*- coding: utf-8 -*-
"""Value types shared by the intersection and placement pipeline.

Points and vectors are plain (x, y, z) tuples in Revit internal units (feet).
"""
import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple


Vec3 = Tuple[float, float, float]

# Revit's InvalidElementId; every hit found in the host document carries it.
NO_LINK: int = -1

DUCT = 'duct'
PIPE = 'pipe'


def to_xyz_tuple(p) -> Vec3:
    """Return (x, y, z) tuple from a sequence or object with X/Y/Z."""
    if hasattr(p, 'X') and hasattr(p, 'Y') and hasattr(p, 'Z'):
        return (float(p.X), float(p.Y), float(p.Z))
    try:
        return (float(p[0]), float(p[1]), float(p[2]))
    except Exception:
        raise ValueError('Unsupported point type: {0}'.format(type(p)))


def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(v: Vec3, k: float) -> Vec3:
    return (v[0] * k, v[1] * k, v[2] * k)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def length(v: Vec3) -> float:
    return math.sqrt(dot(v, v))


def distance(a: Vec3, b: Vec3) -> float:
    return length(sub(a, b))


def normalize(v: Vec3) -> Optional[Vec3]:
    n = length(v)
    if n < 1e-9:
        return None
    return (v[0] / n, v[1] / n, v[2] / n)


def point_along(origin: Vec3, direction: Vec3, t: float) -> Vec3:
    """Return origin + direction * t."""
    return add(origin, scale(direction, t))


@dataclass(frozen=True)
class LinearRun:
    """Straight duct or pipe snapshot taken at scan time."""

    id: Any
    start: Vec3
    direction: Vec3
    length: float
    diameter: float
    discipline: str = DUCT


@dataclass(frozen=True)
class HitKey:
    """Logical identity of a hit: the struck barrier in its link context."""

    barrier_id: Any
    link_id: Any = NO_LINK


@dataclass(frozen=True)
class RawHit:
    """One surface intersection reported by a ray caster."""

    proximity: float
    barrier_id: Any
    link_id: Any = NO_LINK

    @property
    def key(self) -> HitKey:
        return HitKey(self.barrier_id, self.link_id)


@dataclass(frozen=True)
class Barrier:
    """Wall record as seen by the resolver. `element` is the host object."""

    id: Any
    level_id: Any = None
    element: Any = None


@dataclass(frozen=True)
class Placement:
    """Everything needed to create one opening instance."""

    point: Vec3
    barrier: Barrier
    level: Any
    width: float
    height: float
    run_id: Any = None
    discipline: str = DUCT
