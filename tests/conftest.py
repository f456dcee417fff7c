# -*- coding: utf-8 -*-
"""Pytest fixtures for OpeningTools tests."""
import json
import os
import sys
import tempfile
from unittest.mock import patch

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "OpeningTools.extension")
LIB = os.path.join(EXT, "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)


@pytest.fixture
def temp_config_file():
    """Create a temporary config file and return its path. Cleans up after test."""
    files = []

    def _create(data):
        f = tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding='utf-8')
        json.dump(data, f, ensure_ascii=False)
        f.flush()
        f.close()
        files.append(f.name)
        return f.name

    yield _create

    for path in files:
        try:
            os.unlink(path)
        except OSError:
            pass


@pytest.fixture
def mock_db():
    """Bind the Revit API mocks into the adapter modules."""
    from mocks.revit_api import DB as MockDB

    import utils_revit
    from wall_openings import revit_host

    with patch.object(utils_revit, "DB", MockDB), patch.object(revit_host, "DB", MockDB):
        yield MockDB


@pytest.fixture
def rules():
    """Default rules as loaded from an empty config."""
    import config_loader

    return dict(config_loader.DEFAULTS)
