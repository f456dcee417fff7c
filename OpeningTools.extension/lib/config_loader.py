# -*- coding: utf-8 -*-
"""Загрузчик конфигурации для Opening Tools.

Загружает правила из JSON конфигурационного файла и дополняет их
значениями по умолчанию.
"""
import io
import json
import os


DEFAULTS = {
    'comment_tag': 'AUTO_OPENING',
    # Зазор добавляется к диаметру воздуховода/трубы (ширина и высота отверстия)
    'clearance_mm': 30,
    'opening_family_name': 'Opening',
    'opening_category': 'OST_GenericModel',
    # Файл ОВ ищется среди открытых документов по вхождению в заголовок
    'mep_doc_title_pattern': u'ОВ',
    'width_param_name': 'Width',
    'height_param_name': 'Height',
    'duct_transaction_name': 'Openings for ducts',
    'pipe_transaction_name': 'Openings for pipes',
    'dedupe_policy': 'first_seen',
    'enable_existing_dedupe': False,
    'existing_dedupe_radius_mm': 50,
    'alert_title': u'Ошибка',
}


def _extension_root_from_lib():
    """Получить корневую директорию расширения из расположения lib."""
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_default_rules_path():
    """Получить путь к файлу конфигурации по умолчанию."""
    return os.path.join(_extension_root_from_lib(), 'config', 'rules.default.json')


def _read_json(path):
    with io.open(path, 'rb') as fb:
        raw = fb.read()
    # utf-8-sig также читает файлы без BOM
    return json.loads(raw.decode('utf-8-sig'))


def load_rules(path=None):
    """Загрузить правила из JSON конфигурационного файла.

    Args:
        path: Путь к JSON конфиг-файлу. Если None, используется дефолтный файл правил.

    Returns:
        Словарь со всеми ключами конфигурации, с применёнными дефолтами.

    Raises:
        ValueError: файл не содержит JSON-объект.
    """
    data = _read_json(path or get_default_rules_path())
    if not isinstance(data, dict):
        raise ValueError('Rules file must contain a JSON object: {0}'.format(path))

    for key, val in DEFAULTS.items():
        if key not in data:
            data[key] = val

    return data
