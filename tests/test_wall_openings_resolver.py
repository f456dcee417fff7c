# -*- coding: utf-8 -*-
"""Tests for placement resolution."""
import os
import sys
import unittest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "OpeningTools.extension")
LIB = os.path.join(EXT, "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)

from mocks.fakes import FakeModel
from utils_units import ft_to_mm, mm_to_ft
from wall_openings.errors import DanglingBarrierReference, MissingLevel
from wall_openings.model import PIPE, LinearRun, RawHit
from wall_openings.resolver import opening_size, resolve_placement


def _run(diameter_mm=200, length_mm=1000, direction=(1.0, 0.0, 0.0), start=(1.0, 2.0, 3.0)):
    return LinearRun(
        id=11,
        start=start,
        direction=direction,
        length=mm_to_ft(length_mm),
        diameter=mm_to_ft(diameter_mm),
    )


class TestResolvePlacement(unittest.TestCase):
    def setUp(self):
        self.model = FakeModel()
        self.model.add_wall(7, level_id=1)
        self.model.add_level(1, "Level 1")
        self.clearance = mm_to_ft(30)

    def test_point_along_direction(self):
        run = _run()
        p = resolve_placement(RawHit(mm_to_ft(400), 7), run, self.model, self.clearance)
        self.assertAlmostEqual(p.point[0], 1.0 + mm_to_ft(400))
        self.assertAlmostEqual(p.point[1], 2.0)
        self.assertAlmostEqual(p.point[2], 3.0)

    def test_host_and_level(self):
        p = resolve_placement(RawHit(1.0, 7), _run(), self.model, self.clearance)
        self.assertEqual(p.barrier.id, 7)
        self.assertEqual(p.level, "Level 1")
        self.assertEqual(p.run_id, 11)

    def test_size_is_diameter_plus_clearance(self):
        run = _run(diameter_mm=200)
        p = resolve_placement(RawHit(1.0, 7), run, self.model, self.clearance)
        self.assertEqual(p.width, run.diameter + self.clearance)
        self.assertEqual(p.height, run.diameter + self.clearance)
        self.assertEqual(p.width, p.height)
        self.assertAlmostEqual(ft_to_mm(p.width), 230.0)

    def test_size_for_several_diameters(self):
        for d in (15, 50, 110, 315, 1250):
            run = _run(diameter_mm=d)
            p = resolve_placement(RawHit(0.5, 7), run, self.model, self.clearance)
            self.assertEqual(p.width, opening_size(run.diameter, self.clearance))
            self.assertEqual(p.height, p.width)

    def test_discipline_carried(self):
        run = LinearRun(id=1, start=(0, 0, 0), direction=(0, 1, 0), length=5.0, diameter=0.1, discipline=PIPE)
        p = resolve_placement(RawHit(1.0, 7), run, self.model, self.clearance)
        self.assertEqual(p.discipline, PIPE)

    def test_dangling_barrier(self):
        with self.assertRaises(DanglingBarrierReference):
            resolve_placement(RawHit(1.0, 99), _run(), self.model, self.clearance)

    def test_linked_hit_does_not_resolve_host_wall(self):
        with self.assertRaises(DanglingBarrierReference):
            resolve_placement(RawHit(1.0, 7, 5), _run(), self.model, self.clearance)

    def test_missing_level(self):
        self.model.add_wall(8, level_id=None)
        with self.assertRaises(MissingLevel):
            resolve_placement(RawHit(1.0, 8), _run(), self.model, self.clearance)

    def test_unknown_level(self):
        self.model.add_wall(9, level_id=42)
        with self.assertRaises(MissingLevel):
            resolve_placement(RawHit(1.0, 9), _run(), self.model, self.clearance)


if __name__ == "__main__":
    unittest.main()
