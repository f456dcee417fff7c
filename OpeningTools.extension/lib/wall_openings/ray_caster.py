# -*- coding: utf-8 -*-
"""Ray casting against barrier solids.

A caster answers one question: which barrier surfaces does the forward ray
from ``origin`` along ``direction`` cross? Hits come back in no particular
order and one physical wall usually yields several hits (one per face).

``BoxBarrierCaster`` is the pure-Python kernel used outside Revit; the Revit
implementation lives in ``wall_openings.revit_host``.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple

from wall_openings.errors import NoSamplingContext
from wall_openings.model import NO_LINK, RawHit, Vec3, dot, normalize, to_xyz_tuple


EPS = 1e-9


class RayCaster(object):
    """Interface: cast(origin, direction) -> iterable of RawHit."""

    def cast(self, origin: Vec3, direction: Vec3) -> Iterable[RawHit]:
        raise NotImplementedError


@dataclass(frozen=True)
class WallBox:
    """Straight vertical wall: baseline in plan, thickness, base and height."""

    id: Any
    start: Tuple[float, float]
    end: Tuple[float, float]
    thickness: float
    base_z: float
    height: float
    link_id: Any = NO_LINK
    kind: str = 'wall'


def is_wall(barrier) -> bool:
    return getattr(barrier, 'kind', None) == 'wall'


def _wall_frame(wall: WallBox):
    """Return (origin, axes, extents) of the wall box.

    Axes are the baseline direction, the horizontal normal and Z; extents are
    (min, max) along each axis relative to the origin.
    """
    sx, sy = float(wall.start[0]), float(wall.start[1])
    ex, ey = float(wall.end[0]), float(wall.end[1])
    u = normalize((ex - sx, ey - sy, 0.0))
    if u is None:
        return None
    n = (-u[1], u[0], 0.0)
    z = (0.0, 0.0, 1.0)
    seg = ((ex - sx) ** 2 + (ey - sy) ** 2) ** 0.5
    half = float(wall.thickness) / 2.0
    origin = (sx, sy, float(wall.base_z))
    extents = ((0.0, seg), (-half, half), (0.0, float(wall.height)))
    return origin, (u, n, z), extents


def ray_box_hits(origin: Vec3, direction: Vec3, wall: WallBox, tol: float = 1e-7) -> List[float]:
    """Return the ray parameter of every box face the forward ray crosses.

    A ray entering and leaving the wall produces two values; grazing an edge
    can produce more. Values are not sorted.
    """
    frame = _wall_frame(wall)
    if frame is None:
        return []
    box_origin, axes, extents = frame

    rel = (origin[0] - box_origin[0], origin[1] - box_origin[1], origin[2] - box_origin[2])
    local_o = [dot(rel, a) for a in axes]
    local_d = [dot(direction, a) for a in axes]

    found = []
    for i in range(3):
        if abs(local_d[i]) < EPS:
            continue
        for plane in extents[i]:
            t = (plane - local_o[i]) / local_d[i]
            if t < -tol:
                continue
            inside = True
            for j in range(3):
                if j == i:
                    continue
                c = local_o[j] + local_d[j] * t
                lo, hi = extents[j]
                if c < lo - tol or c > hi + tol:
                    inside = False
                    break
            if inside:
                found.append(max(t, 0.0))
    return found


class BoxBarrierCaster(RayCaster):
    """Cast rays against a collection of WallBox barriers.

    Args:
        barriers: Barrier solids forming the sampling context. ``None`` means
            there is no context to sample; an empty collection is valid.
        accept: Predicate selecting which barriers count (walls by default).
    """

    def __init__(self, barriers: Optional[Iterable[WallBox]], accept: Callable[[Any], bool] = is_wall):
        if barriers is None:
            raise NoSamplingContext()
        self._barriers = [b for b in barriers if accept(b)]

    def cast(self, origin, direction):
        o = to_xyz_tuple(origin)
        d = normalize(to_xyz_tuple(direction))
        if d is None:
            return []
        hits = []
        for wall in self._barriers:
            for t in ray_box_hits(o, d, wall):
                hits.append(RawHit(proximity=t, barrier_id=wall.id, link_id=wall.link_id))
        return hits
