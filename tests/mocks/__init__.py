# -*- coding: utf-8 -*-
"""Mock modules for testing Revit-dependent code without Revit."""

from .revit_api import DB, mock_duct, mock_line, mock_pipe, mock_wall, mock_xyz

__all__ = ["DB", "mock_xyz", "mock_line", "mock_wall", "mock_duct", "mock_pipe"]
