# -*- coding: utf-8 -*-

"""Opening Tools shared library.

This folder is auto-added to sys.path by pyRevit for this extension.

Modules:
    utils_units: Unit conversion between mm and feet
    utils_revit: pyRevit helpers (logger, alerts, transactions, parameters)
    config_loader: Configuration file loading
    opening_tags: Comments tags of placed openings
    wall_openings: Wall opening placement engine
"""

__version__ = "0.1.0"
__author__ = "Opening Tools Team"
