# -*- coding: utf-8 -*-
"""Отверстия в стенах для воздуховодов и труб.

Находит пересечения воздуховодов и труб из файла ОВ со стенами активного
документа АР и размещает в каждом пересечении семейство отверстия.
"""

from pyrevit import revit, script
from utils_revit import alert, log_exception

from config_loader import load_rules
from wall_openings.command import run_command
from wall_openings.revit_host import RevitHost


__title__ = u'Отверстия\nв стенах'

doc = revit.doc
output = script.get_output()
logger = script.get_logger()

# Результат последнего запуска (для вызова из других скриптов)
OPENINGS_RESULT = None

DISCIPLINE_LABELS = {
    'duct': u'Воздуховоды',
    'pipe': u'Трубы',
}


def print_summary(result):
    for report in result.reports:
        label = DISCIPLINE_LABELS.get(report.discipline, report.discipline)
        if report.committed:
            output.print_md(u'**{0}**: размещено **{1}**, пропущено **{2}**'.format(
                label, report.created, report.skipped_total))
        else:
            output.print_md(u'**{0}**: транзакция отменена ({1})'.format(label, report.error))


def main():
    global OPENINGS_RESULT
    try:
        rules = load_rules()
        result = run_command(RevitHost(doc, logger=logger), rules, logger=logger)
        OPENINGS_RESULT = result.as_dict()
        if result.succeeded:
            print_summary(result)
    except Exception:
        log_exception(u'Ошибка инструмента размещения отверстий')
        alert(u'Ошибка. Подробности смотрите в выводе pyRevit.')


if __name__ == '__main__':
    main()
