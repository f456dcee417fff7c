# -*- coding: utf-8 -*-

import traceback

try:
    from pyrevit import DB, forms, revit, script
except ImportError:
    DB = None
    forms = None
    revit = None
    script = None


def get_logger():
    return script.get_logger()


def _safe_log(logger_method, msg):
    try:
        logger_method(msg)
    except UnicodeEncodeError:
        try:
            # Fallback to repr which escapes non-ascii
            logger_method(repr(msg))
        except Exception:
            logger_method("<Log message encoding failed>")


def alert(msg, title='Opening Tools', warn_icon=True):
    try:
        forms.alert(msg, title=title, warn_icon=warn_icon)
    except Exception:
        # UI unavailable (batch mode)
        _safe_log(get_logger().warning, msg)


def log_exception(prefix='Error'):
    logger = get_logger()
    _safe_log(logger.error, prefix)
    _safe_log(logger.error, traceback.format_exc())


def ensure_symbol_active(doc, family_symbol, tx_name='Activate opening type'):
    """Activate a FamilySymbol once.

    Activation needs an open transaction; a short one is started when the
    document is not already modifiable.
    """
    if family_symbol is None or family_symbol.IsActive:
        return False

    if doc.IsModifiable:
        family_symbol.Activate()
        doc.Regenerate()
        return True

    t = DB.Transaction(doc, tx_name)
    t.Start()
    try:
        family_symbol.Activate()
        doc.Regenerate()
        t.Commit()
    except Exception:
        t.RollBack()
        raise
    return True


def get_param(elem, name):
    if elem is None or not name:
        return None
    try:
        return elem.LookupParameter(name)
    except Exception:
        return None


def set_double_param(elem, param_name, value):
    """Set a length/number parameter by name. Returns False when not settable."""
    p = get_param(elem, param_name)
    if p is None or p.IsReadOnly:
        return False
    p.Set(float(value))
    return True


def get_comments(elem):
    if elem is None:
        return None
    try:
        p = elem.get_Parameter(DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS)
        return p.AsString() if p else None
    except Exception:
        return None


def set_comments(elem, value):
    if elem is None:
        return False

    try:
        p = elem.get_Parameter(DB.BuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS)
        if p and (not p.IsReadOnly):
            p.Set(str(value) if value is not None else '')
            return True
    except Exception:
        pass

    p = get_param(elem, 'Comments') or get_param(elem, u'Комментарии')
    if p is None or p.IsReadOnly:
        return False
    p.Set(str(value) if value is not None else '')
    return True


class tx(object):
    """Transaction context manager with rollback on error.

    Usage:
        with tx('My Tool', doc):
            ...
    """

    def __init__(self, name, doc=None):
        self.doc = doc or revit.doc
        self.name = name
        self.transaction = None

    def __enter__(self):
        self.transaction = DB.Transaction(self.doc, self.name)
        self.transaction.Start()
        return self.transaction

    def _rollback(self):
        rb = getattr(self.transaction, 'RollBack', None) or getattr(self.transaction, 'Rollback', None)
        if rb:
            rb()

    def __exit__(self, exc_type, exc, tb):
        if exc_type:
            self._rollback()
            return False

        try:
            self.transaction.Commit()
        except Exception:
            self._rollback()
            raise
        return False
