# -*- coding: utf-8 -*-
"""Openings in walls for ducts and pipes.

Pipeline: geometry (centerline) -> ray_caster -> dedupe -> resolver -> batch.
``command.run_command`` runs both disciplines; ``revit_host`` binds it to Revit.
"""
