# -*- coding: utf-8 -*-
"""Адаптеры Revit API для команды отверстий (Infrastructure Layer).

- Поиск документов АР и ОВ
- Поиск типа семейства отверстия
- Трассировка лучей через ReferenceIntersector по 3D виду
- Чтение стен/уровней и создание экземпляров отверстий
"""
from utils_revit import alert, ensure_symbol_active, get_comments, get_logger, set_comments, set_double_param, tx
from utils_units import opening_size_mm
import opening_tags

from wall_openings.errors import DocumentNotFound, NoSamplingContext, TemplateNotFound
from wall_openings.model import DUCT, NO_LINK, PIPE, Barrier, RawHit, to_xyz_tuple
from wall_openings.ray_caster import RayCaster

try:
    from pyrevit import DB
except ImportError:
    DB = None


def id_value(element_id):
    """Integer value of an ElementId (``Value`` on Revit 2024+)."""
    if element_id is None:
        return None
    value = getattr(element_id, 'Value', None)
    if value is None:
        value = element_id.IntegerValue
    return int(value)


def _is_invalid_id(element_id):
    return element_id is None or id_value(element_id) == NO_LINK


# ====================================================================
# ДОКУМЕНТЫ
# ====================================================================

def locate_documents(app, active_doc, title_pattern):
    """Return (arch_doc, mep_doc).

    The active document is the architectural one; the MEP document is the
    first other open document whose title contains ``title_pattern``.
    """
    if active_doc is None:
        raise DocumentNotFound()
    for d in app.Documents:
        title = getattr(d, 'Title', None) or u''
        if title == active_doc.Title:
            continue
        if title_pattern in title:
            return active_doc, d
    raise DocumentNotFound()


def find_sampling_view(doc):
    """First non-template 3D view of ``doc``; raises NoSamplingContext."""
    for view in DB.FilteredElementCollector(doc).OfClass(DB.View3D):
        if not view.IsTemplate:
            return view
    raise NoSamplingContext()


# ====================================================================
# ТИП СЕМЕЙСТВА ОТВЕРСТИЯ
# ====================================================================

class RevitTemplate(object):
    """Opening FamilySymbol with idempotent activation."""

    def __init__(self, doc, symbol):
        self.doc = doc
        self.symbol = symbol

    @property
    def is_active(self):
        return bool(self.symbol.IsActive)

    def activate(self):
        ensure_symbol_active(self.doc, self.symbol)


def find_template(doc, family_name, category_name):
    """Find the first FamilySymbol of ``family_name`` in the category.

    Args:
        category_name: BuiltInCategory member name, e.g. 'OST_GenericModel'.
    """
    bic = getattr(DB.BuiltInCategory, category_name)
    collector = DB.FilteredElementCollector(doc).OfClass(DB.FamilySymbol).OfCategory(bic)
    for symbol in collector:
        if getattr(symbol, 'FamilyName', None) == family_name:
            return RevitTemplate(doc, symbol)
    raise TemplateNotFound()


# ====================================================================
# ТРАССИРОВКА
# ====================================================================

class ReferenceIntersectorCaster(RayCaster):
    """Ray caster over walls of the host document, sampled in a 3D view."""

    def __init__(self, view3d):
        self.view = view3d
        self.intersector = DB.ReferenceIntersector(
            DB.ElementClassFilter(DB.Wall),
            DB.FindReferenceTarget.Element,
            view3d,
        )

    @classmethod
    def from_document(cls, doc):
        return cls(find_sampling_view(doc))

    def cast(self, origin, direction):
        hits = []
        found = self.intersector.Find(DB.XYZ(*to_xyz_tuple(origin)), DB.XYZ(*to_xyz_tuple(direction)))
        for rwc in found or []:
            ref = rwc.GetReference()
            hits.append(RawHit(
                proximity=float(rwc.Proximity),
                barrier_id=id_value(ref.ElementId),
                link_id=id_value(ref.LinkedElementId),
            ))
        return hits


# ====================================================================
# ДОКУМЕНТ АР
# ====================================================================

class RevitDocumentModel(object):
    """Architectural document: walls, levels and opening instances."""

    def __init__(self, doc, rules, logger=None):
        self.doc = doc
        self.width_param = rules.get('width_param_name') or 'Width'
        self.height_param = rules.get('height_param_name') or 'Height'
        self.tag_prefix = rules.get('comment_tag') or opening_tags.DEFAULT_TAG_PREFIX
        self.logger = logger
        self._tags = {}

    def get_barrier(self, barrier_id, link_id=NO_LINK):
        # Walls from linked models cannot host an instance in this document
        if link_id != NO_LINK:
            return None
        wall = self.doc.GetElement(DB.ElementId(barrier_id))
        if wall is None or not isinstance(wall, DB.Wall):
            return None
        level_id = getattr(wall, 'LevelId', None)
        return Barrier(
            id=barrier_id,
            level_id=None if _is_invalid_id(level_id) else level_id,
            element=wall,
        )

    def get_level(self, level_id):
        level = self.doc.GetElement(level_id)
        if level is None or not isinstance(level, DB.Level):
            return None
        return level

    def _tag(self, discipline):
        # One timestamp per discipline batch
        if discipline not in self._tags:
            self._tags[discipline] = opening_tags.generate_tag(discipline, prefix=self.tag_prefix)
        return self._tags[discipline]

    def create_placeholder(self, placement, template):
        inst = self.doc.Create.NewFamilyInstance(
            DB.XYZ(*placement.point),
            template.symbol,
            placement.barrier.element,
            placement.level,
            DB.Structure.StructuralType.NonStructural,
        )
        if not set_double_param(inst, self.width_param, placement.width):
            raise RuntimeError('Parameter "{0}" not found or read-only'.format(self.width_param))
        if not set_double_param(inst, self.height_param, placement.height):
            raise RuntimeError('Parameter "{0}" not found or read-only'.format(self.height_param))
        set_comments(inst, self._tag(placement.discipline))

        if self.logger is not None:
            size = opening_size_mm(placement.width)
            self.logger.debug('Opening %sx%s mm in wall %s for run %s', size, size, placement.barrier.id, placement.run_id)
        return inst

    def edit_scope(self, name):
        return tx(name, self.doc)

    def existing_opening_points(self):
        """{wall id: [points]} of tagged openings already in the document."""
        points = {}
        collector = DB.FilteredElementCollector(self.doc).OfClass(DB.FamilyInstance).WhereElementIsNotElementType()
        for inst in collector:
            if not opening_tags.is_opening_tag(get_comments(inst), self.tag_prefix):
                continue
            host = getattr(inst, 'Host', None)
            location = getattr(inst, 'Location', None)
            point = getattr(location, 'Point', None)
            if host is None or point is None:
                continue
            points.setdefault(id_value(host.Id), []).append(to_xyz_tuple(point))
        return points


# ====================================================================
# HOST
# ====================================================================

RUN_CLASSES = {
    DUCT: ('Mechanical', 'Duct'),
    PIPE: ('Plumbing', 'Pipe'),
}


def collect_runs(doc, discipline):
    """All ducts or pipes of ``doc``."""
    namespace, cls_name = RUN_CLASSES[discipline]
    run_cls = getattr(getattr(DB, namespace), cls_name)
    return list(DB.FilteredElementCollector(doc).OfClass(run_cls).WhereElementIsNotElementType())


class RevitHost(object):
    """Revit side of ``wall_openings.command.run_command``."""

    def __init__(self, doc, app=None, logger=None):
        self.doc = doc
        self.app = app if app is not None else doc.Application
        self.logger = logger or get_logger()

    def locate_documents(self, title_pattern):
        return locate_documents(self.app, self.doc, title_pattern)

    def find_template(self, doc, family_name, category_name):
        return find_template(doc, family_name, category_name)

    def build_caster(self, doc):
        return ReferenceIntersectorCaster.from_document(doc)

    def document_model(self, doc, rules):
        return RevitDocumentModel(doc, rules, logger=self.logger)

    def collect_runs(self, doc, discipline):
        return collect_runs(doc, discipline)

    def existing_openings(self, model):
        return model.existing_opening_points()

    def notify(self, title, message):
        alert(message, title=title)
