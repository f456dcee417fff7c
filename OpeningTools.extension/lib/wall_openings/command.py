# -*- coding: utf-8 -*-
"""Add wall openings for ducts and pipes.

Pre-flight (documents, opening family, 3D view) runs before any transaction.
Ducts and pipes are then processed in two independent edit scopes, so
committed duct openings survive a failed pipe batch.

The ``host`` object supplies the Revit side (see ``revit_host.RevitHost``):

    locate_documents(title_pattern) -> (arch_doc, mep_doc)
    find_template(doc, family_name, category) -> template
    build_caster(doc) -> caster
    document_model(doc, rules) -> model
    collect_runs(mep_doc, discipline) -> iterable of elements or LinearRun
    existing_openings(model) -> {barrier_id: [points]}
    notify(title, message)
"""
import logging
from functools import partial

from utils_units import mm_to_ft
from wall_openings.batch import DisciplineBatch
from wall_openings.dedupe import check_policy
from wall_openings.errors import FatalError
from wall_openings.model import DUCT, PIPE


SUCCEEDED = 'Succeeded'
CANCELLED = 'Cancelled'


class CommandResult(object):

    def __init__(self, status, reports=None, error=None):
        self.status = status
        self.reports = reports or []
        self.error = error

    @property
    def succeeded(self):
        return self.status == SUCCEEDED

    @property
    def placed(self):
        return sum(r.created for r in self.reports)

    @property
    def skipped(self):
        return sum(r.skipped_total for r in self.reports)

    def as_dict(self):
        data = {
            'status': self.status,
            'placed': self.placed,
            'skipped': self.skipped,
            'batches': [r.as_dict() for r in self.reports],
        }
        if self.error:
            data['error'] = self.error
        return data


def _preflight(host, rules):
    arch_doc, mep_doc = host.locate_documents(rules['mep_doc_title_pattern'])
    template = host.find_template(arch_doc, rules['opening_family_name'], rules['opening_category'])
    caster = host.build_caster(arch_doc)
    return arch_doc, mep_doc, template, caster


def run_command(host, rules, logger=None):
    """Run the whole command. Returns CommandResult (Succeeded / Cancelled)."""
    logger = logger or logging.getLogger(__name__)
    policy = check_policy(rules.get('dedupe_policy') or 'first_seen')

    try:
        arch_doc, mep_doc, template, caster = _preflight(host, rules)
    except FatalError as ex:
        logger.warning('Command cancelled: %s', ex.message)
        host.notify(rules.get('alert_title') or ex.title, ex.message)
        return CommandResult(CANCELLED, error=ex.message)

    model = host.document_model(arch_doc, rules)
    clearance = mm_to_ft(rules['clearance_mm'])

    existing = {}
    radius = 0.0
    if rules.get('enable_existing_dedupe'):
        existing = host.existing_openings(model)
        radius = mm_to_ft(rules.get('existing_dedupe_radius_mm') or 0)

    reports = []
    for discipline, tx_key in ((DUCT, 'duct_transaction_name'), (PIPE, 'pipe_transaction_name')):
        batch = DisciplineBatch(
            rules[tx_key],
            template,
            caster,
            model,
            clearance,
            discipline=discipline,
            policy=policy,
            existing=existing,
            existing_radius=radius,
            logger=logger,
        )
        reports.append(batch.run(partial(host.collect_runs, mep_doc, discipline)))

    return CommandResult(SUCCEEDED, reports)
