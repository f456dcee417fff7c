# -*- coding: utf-8 -*-
"""Error taxonomy for the wall openings command.

Fatal errors abort the whole command before any transaction is opened and are
shown to the user. Item errors only skip one run or one hit.
"""


class OpeningError(Exception):
    """Base class for all wall openings errors."""


class FatalError(OpeningError):
    """Pre-flight failure. Reported to the user, command is cancelled."""

    title = u'Ошибка'
    user_message = u'Ошибка'

    def __init__(self, message=None):
        super().__init__(message or self.user_message)
        self.message = message or self.user_message


class DocumentNotFound(FatalError):
    user_message = u'Не найден файл'


class TemplateNotFound(FatalError):
    user_message = u'Не найдено семейство отверстия'


class NoSamplingContext(FatalError):
    user_message = u'Не найден 3D вид'


class ItemError(OpeningError):
    """Per-run or per-hit failure. Skipped silently."""

    reason = 'item_error'


class UnsupportedGeometry(ItemError):
    reason = 'unsupported_geometry'


class DanglingBarrierReference(ItemError):
    reason = 'dangling_barrier'


class MissingLevel(ItemError):
    reason = 'missing_level'
