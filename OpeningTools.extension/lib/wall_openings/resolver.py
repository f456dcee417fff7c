# -*- coding: utf-8 -*-
"""Turn one logical hit into a placement: point, host wall, level, size."""
from wall_openings.errors import DanglingBarrierReference, MissingLevel
from wall_openings.model import Placement, point_along


def opening_size(diameter, clearance):
    """Opening width/height for a round run: diameter plus clearance."""
    return diameter + clearance


def resolve_placement(hit, run, model, clearance):
    """Resolve a logical hit of ``run`` against the host document ``model``.

    ``model`` must provide ``get_barrier(barrier_id, link_id)`` and
    ``get_level(level_id)``, both returning None when nothing is found.

    Raises:
        DanglingBarrierReference: the struck wall no longer resolves.
        MissingLevel: the wall has no level.
    """
    point = point_along(run.start, run.direction, hit.proximity)

    barrier = model.get_barrier(hit.barrier_id, hit.link_id)
    if barrier is None:
        raise DanglingBarrierReference('Barrier {0} (link {1}) not found'.format(hit.barrier_id, hit.link_id))

    level = model.get_level(barrier.level_id) if barrier.level_id is not None else None
    if level is None:
        raise MissingLevel('Barrier {0} has no level'.format(barrier.id))

    size = opening_size(run.diameter, clearance)
    return Placement(
        point=point,
        barrier=barrier,
        level=level,
        width=size,
        height=size,
        run_id=run.id,
        discipline=run.discipline,
    )
