# -*- coding: utf-8 -*-
"""Centerline extraction for straight ducts and pipes."""
from wall_openings.errors import UnsupportedGeometry
from wall_openings.model import DUCT, LinearRun, distance, normalize, sub, to_xyz_tuple


def _endpoints(curve):
    """Return (start, end) tuples for a Revit Line or a pair of points."""
    if hasattr(curve, 'GetEndPoint'):
        return to_xyz_tuple(curve.GetEndPoint(0)), to_xyz_tuple(curve.GetEndPoint(1))
    if isinstance(curve, (tuple, list)) and len(curve) == 2:
        return to_xyz_tuple(curve[0]), to_xyz_tuple(curve[1])
    raise UnsupportedGeometry('Unsupported curve type: {0}'.format(type(curve).__name__))


def _is_straight(curve):
    if isinstance(curve, (tuple, list)):
        return True
    # Revit Line exposes Direction; Arc, NurbSpline and friends do not.
    return hasattr(curve, 'Direction') and hasattr(curve, 'GetEndPoint')


def extract_centerline(curve):
    """Return (origin, unit direction, length) of a straight curve.

    Args:
        curve: Revit ``Line`` (or anything with ``GetEndPoint``/``Direction``)
            or a ``(start, end)`` pair of points.

    Raises:
        UnsupportedGeometry: curve is missing, not straight or degenerate.
    """
    if curve is None:
        raise UnsupportedGeometry('Element has no location curve')
    if not _is_straight(curve):
        raise UnsupportedGeometry('Curve is not a straight line: {0}'.format(type(curve).__name__))

    start, end = _endpoints(curve)
    direction = normalize(sub(end, start))
    if direction is None:
        raise UnsupportedGeometry('Zero-length curve')
    return start, direction, distance(start, end)


def _element_id(element):
    eid = getattr(element, 'Id', None)
    try:
        return eid.IntegerValue
    except AttributeError:
        return eid


def run_from_element(element, discipline=DUCT):
    """Snapshot a duct or pipe element into a LinearRun.

    Raises:
        UnsupportedGeometry: no straight location curve or no round diameter.
    """
    location = getattr(element, 'Location', None)
    curve = getattr(location, 'Curve', None)
    origin, direction, seg_length = extract_centerline(curve)

    try:
        # Rectangular and oval ducts throw on Diameter
        diameter = float(element.Diameter)
    except Exception as ex:
        raise UnsupportedGeometry('Element has no round diameter') from ex
    if diameter <= 0:
        raise UnsupportedGeometry('Non-positive diameter: {0}'.format(diameter))

    return LinearRun(
        id=_element_id(element),
        start=origin,
        direction=direction,
        length=seg_length,
        diameter=diameter,
        discipline=discipline,
    )
