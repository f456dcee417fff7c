# -*- coding: utf-8 -*-
"""Collapse raw ray hits into one logical hit per struck wall.

A ray crossing a wall reports each face it passes through, so the same wall
shows up two or more times. Hits are grouped by ``HitKey`` (barrier id plus
link id); only hits within the run length are kept.

Tie-break policies:
    FIRST_SEEN: keep the first hit of a group in iteration order. The caster
        does not order hits by proximity, so the kept hit is not necessarily
        the closest one.
    MIN_PROXIMITY: keep the closest hit of a group.
"""
from typing import Dict, Iterable, List

from wall_openings.model import HitKey, RawHit


FIRST_SEEN = 'first_seen'
MIN_PROXIMITY = 'min_proximity'

POLICIES = (FIRST_SEEN, MIN_PROXIMITY)


def check_policy(policy: str) -> str:
    if policy not in POLICIES:
        raise ValueError('Unknown dedupe policy: {0!r} (expected one of {1})'.format(policy, ', '.join(POLICIES)))
    return policy


def within_run(hits: Iterable[RawHit], run_length: float) -> List[RawHit]:
    """Keep hits with proximity <= run_length (inclusive)."""
    return [h for h in hits if h.proximity <= run_length]


def dedupe_hits(hits: Iterable[RawHit], run_length: float, policy: str = FIRST_SEEN) -> List[RawHit]:
    """Return logical hits for one ray.

    Args:
        hits: Raw hits of one ray cast, any order.
        run_length: Length of the run; hits beyond it are dropped.
        policy: FIRST_SEEN or MIN_PROXIMITY.

    Returns:
        One hit per (barrier id, link id), in order of first appearance.
    """
    check_policy(policy)

    kept: Dict[HitKey, RawHit] = {}
    for hit in within_run(hits, run_length):
        key = hit.key
        current = kept.get(key)
        if current is None:
            kept[key] = hit
        elif policy == MIN_PROXIMITY and hit.proximity < current.proximity:
            kept[key] = hit
    return list(kept.values())
