# -*- coding: utf-8 -*-
"""Per-discipline batch: cast, dedupe, resolve and create openings.

All openings of one discipline are created inside a single edit scope. Item
errors skip one run or one hit; anything else rolls the whole scope back.

State flow::

    NOT_STARTED -> TEMPLATE_ACTIVATED -> SCOPE_OPEN -> COMMITTED
                                                    -> ROLLED_BACK
"""
import logging
import traceback

from wall_openings.dedupe import FIRST_SEEN, check_policy, dedupe_hits
from wall_openings.errors import ItemError
from wall_openings.geometry import run_from_element
from wall_openings.model import DUCT, LinearRun, distance
from wall_openings.resolver import resolve_placement


NOT_STARTED = 'not_started'
TEMPLATE_ACTIVATED = 'template_activated'
SCOPE_OPEN = 'scope_open'
COMMITTED = 'committed'
ROLLED_BACK = 'rolled_back'

SKIP_EXISTING = 'existing_opening'


def ensure_active(template):
    """Activate the opening template once; no-op when already active."""
    if not template.is_active:
        template.activate()
    return template


class BatchReport(object):
    """Outcome of one discipline batch."""

    def __init__(self, name, discipline=DUCT):
        self.name = name
        self.discipline = discipline
        self.state = NOT_STARTED
        self.history = [NOT_STARTED]
        self.created = 0
        self.runs = 0
        self.skipped = {}
        self.error = None

    def enter(self, state):
        self.state = state
        self.history.append(state)

    def skip(self, reason):
        self.skipped[reason] = self.skipped.get(reason, 0) + 1

    @property
    def skipped_total(self):
        return sum(self.skipped.values())

    @property
    def committed(self):
        return self.state == COMMITTED

    def as_dict(self):
        return {
            'name': self.name,
            'discipline': self.discipline,
            'state': self.state,
            'runs': self.runs,
            'placed': self.created,
            'skipped': self.skipped_total,
            'skipped_by_reason': dict(self.skipped),
            'error': self.error,
        }


class DisciplineBatch(object):
    """Create openings for every run of one discipline in one edit scope.

    Args:
        name: Edit scope (transaction) name.
        template: Opening template with ``is_active`` and ``activate()``.
        caster: Ray caster with ``cast(origin, direction)``.
        model: Host document model: ``get_barrier``, ``get_level``,
            ``create_placeholder`` and ``edit_scope``.
        clearance: Added to the run diameter, internal units.
        discipline: 'duct' or 'pipe'; used when snapshotting elements.
        policy: Dedupe tie-break policy.
        existing: Optional {barrier_id: [points]} of openings already in the
            host document; placements closer than ``existing_radius`` to one
            of them on the same wall are skipped.
    """

    def __init__(self, name, template, caster, model, clearance,
                 discipline=DUCT, policy=FIRST_SEEN, existing=None,
                 existing_radius=0.0, logger=None):
        self.name = name
        self.template = template
        self.caster = caster
        self.model = model
        self.clearance = clearance
        self.discipline = discipline
        self.policy = check_policy(policy)
        self.existing = existing or {}
        self.existing_radius = existing_radius
        self.logger = logger or logging.getLogger(__name__)

    def _snapshot(self, item):
        if isinstance(item, LinearRun):
            return item
        return run_from_element(item, self.discipline)

    def logical_hits(self, run):
        hits = self.caster.cast(run.start, run.direction)
        return dedupe_hits(hits, run.length, self.policy)

    def _near_existing(self, placement):
        points = self.existing.get(placement.barrier.id) or []
        for p in points:
            if distance(p, placement.point) <= self.existing_radius:
                return True
        return False

    def plan(self, run, report):
        """Resolve placements of one run, skipping failed hits."""
        placements = []
        for hit in self.logical_hits(run):
            try:
                placement = resolve_placement(hit, run, self.model, self.clearance)
            except ItemError as ex:
                self.logger.debug('Run %s, hit %s skipped: %s', run.id, hit.barrier_id, ex)
                report.skip(ex.reason)
                continue
            if self.existing and self._near_existing(placement):
                report.skip(SKIP_EXISTING)
                continue
            placements.append(placement)
        return placements

    def run(self, items):
        """Process all runs; returns a BatchReport.

        ``items`` is an iterable of runs or a callable returning one. Errors from
        activation or collection end the batch as rolled back.
        """
        report = BatchReport(self.name, self.discipline)

        created = 0
        try:
            ensure_active(self.template)
            report.enter(TEMPLATE_ACTIVATED)
            if callable(items):
                items = items()

            with self.model.edit_scope(self.name):
                report.enter(SCOPE_OPEN)
                for item in items or []:
                    report.runs += 1
                    try:
                        run = self._snapshot(item)
                    except ItemError as ex:
                        self.logger.debug('Run skipped: %s', ex)
                        report.skip(ex.reason)
                        continue

                    for placement in self.plan(run, report):
                        self.model.create_placeholder(placement, self.template)
                        created += 1
        except Exception as ex:
            report.error = str(ex) or type(ex).__name__
            report.enter(ROLLED_BACK)
            self.logger.error('%s: rolled back after %d openings: %s', self.name, created, report.error)
            self.logger.debug(traceback.format_exc())
            return report

        report.created = created
        report.enter(COMMITTED)
        self.logger.info('%s: placed %d, skipped %d', self.name, created, report.skipped_total)
        return report
