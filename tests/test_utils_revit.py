# -*- coding: utf-8 -*-
"""Tests for pyRevit helpers against Revit API mocks."""
import os
import sys
from unittest.mock import patch

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "OpeningTools.extension")
LIB = os.path.join(EXT, "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)

import utils_revit
from mocks.revit_api import MockBuiltInParameter, MockDocument, MockElement, MockFamilySymbol, mock_xyz


class TestTx:
    def test_commit(self, mock_db):
        doc = MockDocument("AR")
        with utils_revit.tx("Place", doc):
            doc.Create.NewFamilyInstance(mock_xyz(), None, None, None, None)
        assert len(doc.instances) == 1
        assert doc.log == [("start", "Place"), ("commit", "Place")]

    def test_rollback_on_error(self, mock_db):
        doc = MockDocument("AR")
        with pytest.raises(ValueError):
            with utils_revit.tx("Place", doc):
                doc.Create.NewFamilyInstance(mock_xyz(), None, None, None, None)
                raise ValueError("bad")
        assert doc.instances == []
        assert doc.log[-1] == ("rollback", "Place")

    def test_rollback_on_failed_commit(self, mock_db):
        doc = MockDocument("AR")
        with patch.object(doc, "commit", side_effect=RuntimeError("regeneration failed")):
            with pytest.raises(RuntimeError):
                with utils_revit.tx("Place", doc):
                    pass
        assert doc.log[-1] == ("rollback", "Place")


class TestEnsureSymbolActive:
    def test_already_active(self, mock_db):
        doc = MockDocument("AR")
        symbol = MockFamilySymbol(1, active=True)
        assert utils_revit.ensure_symbol_active(doc, symbol) is False
        assert doc.log == []

    def test_none(self, mock_db):
        assert utils_revit.ensure_symbol_active(MockDocument("AR"), None) is False

    def test_rolls_back_when_activation_fails(self, mock_db):
        doc = MockDocument("AR")
        symbol = MockFamilySymbol(1)
        with patch.object(symbol, "Activate", side_effect=RuntimeError("locked")):
            with pytest.raises(RuntimeError):
                utils_revit.ensure_symbol_active(doc, symbol, tx_name="Activate")
        assert doc.log == [("start", "Activate"), ("rollback", "Activate")]
        assert not symbol.IsActive


class TestParameters:
    def test_set_double_param(self):
        elem = MockElement()
        elem.add_parameter("Width", 0.0)
        elem.add_parameter("Height", 0.0, read_only=True)
        assert utils_revit.set_double_param(elem, "Width", "0.5")
        assert elem.LookupParameter("Width").value == 0.5
        assert not utils_revit.set_double_param(elem, "Height", 1.0)
        assert not utils_revit.set_double_param(elem, "Depth", 1.0)
        assert not utils_revit.set_double_param(None, "Width", 1.0)

    def test_comments_builtin_parameter(self, mock_db):
        elem = MockElement()
        elem.add_parameter(MockBuiltInParameter.ALL_MODEL_INSTANCE_COMMENTS, None)
        assert utils_revit.set_comments(elem, "AUTO_OPENING:DUCT")
        assert utils_revit.get_comments(elem) == "AUTO_OPENING:DUCT"

    def test_comments_by_localized_name(self, mock_db):
        elem = MockElement()
        elem.add_parameter(u"Комментарии", None)
        assert utils_revit.set_comments(elem, "AUTO_OPENING:PIPE")
        assert elem.LookupParameter(u"Комментарии").value == "AUTO_OPENING:PIPE"
        assert utils_revit.get_comments(elem) is None

    def test_no_comments_parameter(self, mock_db):
        assert not utils_revit.set_comments(MockElement(), "x")


def test_alert_falls_back_to_logger():
    with patch.object(utils_revit, "forms") as forms, patch.object(utils_revit, "script") as script:
        forms.alert.side_effect = RuntimeError("no UI")
        utils_revit.alert(u"Не найден файл", title=u"Ошибка")
    script.get_logger.return_value.warning.assert_called_once_with(u"Не найден файл")
