import math
import numbers
import unittest

from collections import namedtuple
from typing import Any, List

from path_data import (
    annular_sector_subpath,
    arc_flags_ccw,
    arc_flags_cw,
    arc_to,
    circle_subpath,
    fmt_num,
    line_to,
    move_to,
    normalize_angle,
    polar,
)
from path_reader import read_path, split_subpaths


class AssertMixin:
    def assertListAlmostEqual(self, a: List[numbers.Real], b: List[numbers.Real]):
        self.assertEqual(len(a), len(b))

        for ai, bi in zip(a, b):
            self.assertAlmostEqual(ai, bi)

    def assertNestedAlmostEqual(self, a: Any, b: Any):
        if isinstance(a, numbers.Real) and isinstance(b, numbers.Real):
            self.assertAlmostEqual(a, b)
        elif isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
            self.assertEqual(len(a), len(b))
            for ai, bi in zip(a, b):
                self.assertNestedAlmostEqual(ai, bi)
        else:
            self.assertEqual(a, b)


class TestFormat(unittest.TestCase):
    def test_fmt_num(self):
        Case = namedtuple("Case", ["name", "value", "expected"])
        cases = [
            Case("int", 4, "4"),
            Case("integral float", 4.0, "4"),
            Case("negative integral float", -120.0, "-120"),
            Case("negative zero", -0.0, "0"),
            Case("one decimal", 4.5, "4.5"),
            Case("trailing zeros cropped", 4.50049, "4.5"),
            Case("rounded to 3 places", 1.23456, "1.235"),
            Case("negative", -0.25, "-0.25"),
            Case("rounds up to integer", 99.9999, "100"),
            Case("tiny", 1e-10, "0"),
            Case("view box size", 259.2, "259.2"),
            Case("halfway rounds up", 0.0625, "0.063"),
            Case("halfway rounds up, larger value", 25.0625, "25.063"),
            Case("negative halfway rounds away from zero", -0.0625, "-0.063"),
        ]
        for name, value, expected in cases:
            with self.subTest(name=name):
                self.assertEqual(fmt_num(value), expected)

    def test_segments(self):
        self.assertEqual(move_to(1.0, -2.5), "M 1 -2.5")
        self.assertEqual(line_to(0.1234, 7), "L 0.123 7")
        self.assertEqual(arc_to(5, 1, 0, 2.0, 3.3333), "A 5 5 0 1 0 2 3.333")

    def test_polar(self):
        x, y = polar(2, math.pi / 2)
        self.assertAlmostEqual(x, 0)
        self.assertAlmostEqual(y, 2)


class TestArcFlags(unittest.TestCase):
    def test_normalize_angle(self):
        self.assertAlmostEqual(normalize_angle(-math.pi / 2), 3 * math.pi / 2)
        self.assertAlmostEqual(normalize_angle(5 * math.pi), math.pi)
        self.assertAlmostEqual(normalize_angle(0.5), 0.5)

    def test_flags(self):
        self.assertEqual(arc_flags_ccw(math.pi / 2), (0, 1))
        self.assertEqual(arc_flags_ccw(3 * math.pi / 2), (1, 1))
        self.assertEqual(arc_flags_cw(math.pi / 2), (0, 0))
        self.assertEqual(arc_flags_cw(3 * math.pi / 2), (1, 0))
        # a negative span wraps around to the long way
        self.assertEqual(arc_flags_ccw(-math.pi / 4), (1, 1))


class TestSubpaths(AssertMixin, unittest.TestCase):
    def test_circle(self):
        self.assertEqual(
            circle_subpath(10), "M 10 0 A 10 10 0 1 1 -10 0 A 10 10 0 1 1 10 0 Z"
        )

    def test_quarter_sector(self):
        self.assertEqual(
            annular_sector_subpath(10, 20, 0, math.pi / 2),
            "M 20 0 A 20 20 0 0 1 0 20 L 0 10 A 10 10 0 0 0 10 0 L 20 0 Z",
        )

    def test_large_sector_flags(self):
        d = annular_sector_subpath(10, 20, 0, 3 * math.pi / 2)
        segments = read_path(d)
        self.assertEqual([cmd for cmd, _ in segments], ["M", "A", "L", "A", "L", "Z"])
        outer, inner = segments[1][1], segments[3][1]
        self.assertEqual(outer[:5], [20, 20, 0, 1, 1])
        self.assertEqual(inner[:5], [10, 10, 0, 1, 0])
        self.assertListAlmostEqual(outer[5:], [0, -20])
        self.assertListAlmostEqual(inner[5:], [10, 0])

    def test_sector_closes_on_start(self):
        d = annular_sector_subpath(3, 7.5, 0.3, 1.1)
        segments = read_path(d)
        self.assertEqual(segments[0][1], segments[4][1])


class TestReadPath(AssertMixin, unittest.TestCase):
    def test_read_path(self):
        Case = namedtuple("Case", ["name", "d_path", "expected_tuple_list"])

        cases = [
            Case(
                "circle",
                "M 10 0 A 10 10 0 1 1 -10 0 A 10 10 0 1 1 10 0 Z",
                [
                    ("M", [10, 0]),
                    ("A", [10, 10, 0, 1, 1, -10, 0]),
                    ("A", [10, 10, 0, 1, 1, 10, 0]),
                    ("Z", []),
                ],
            ),
            Case(
                "decimals and signs",
                "M 6.962 -0.732 L -0 0.5",
                [("M", [6.962, -0.732]), ("L", [0, 0.5])],
            ),
            Case("scientific", "M 50 50 L 100 1E2", [("M", [50, 50]), ("L", [100, 100])]),
            Case("only empty", "       ", []),
        ]
        for name, d_path, expected in cases:
            with self.subTest(name=name):
                self.assertNestedAlmostEqual(read_path(d_path), expected)

    def test_read_unsupported_command(self):
        with self.assertRaises(ValueError):
            read_path("M 10 10 C 1 2 3 4 5 6")

        with self.assertRaises(ValueError):
            # relative commands are never written
            read_path("M 10 10 l 5 5")

    def test_read_too_few_values(self):
        with self.assertRaises(ValueError):
            read_path("M 0 0 A 1 1 0 0 1 5")

        with self.assertRaises(ValueError):
            read_path("M 0 0 L 3")

    def test_read_invalid_arc_flags(self):
        with self.assertRaises(ValueError):
            read_path("M 0 0 A 1 1 0 2 1 5 5")

        with self.assertRaises(ValueError):
            read_path("M 0 0 A 1 1 0 0 3 5 5")

    def test_split_subpaths(self):
        d = " ".join([circle_subpath(5), annular_sector_subpath(1, 2, 0, 1)])
        subpaths = split_subpaths(d)
        self.assertEqual(len(subpaths), 2)
        self.assertEqual([cmd for cmd, _ in subpaths[0]], ["M", "A", "A", "Z"])
        self.assertEqual(subpaths[1][0][0], "M")
        self.assertEqual(subpaths[1][-1], ("Z", []))


if __name__ == "__main__":
    unittest.main()
