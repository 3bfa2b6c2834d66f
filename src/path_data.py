"""Small building blocks for SVG path data:
formatting of numbers and segments, arc flags, circle and annular sector
subpaths."""

import math

from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple, TypeAlias

TAU = 2 * math.pi
PRECISION = 3
QUANTUM = Decimal(1).scaleb(-PRECISION)

Point: TypeAlias = Tuple[float, float]


def fmt_num(x: float) -> str:
    """
    Format x for path data.
    Integers are written without decimals, e.g. 4.0 -> "4".
    Everything else gets at most 3 decimal places, trailing zeros
    and '.' are cropped, e.g. 4.50049 -> "4.5".
    Halfway values round away from zero, e.g. 0.0625 -> "0.063".
    """
    if isinstance(x, int) or float(x).is_integer():
        return str(int(x))
    if not math.isfinite(x):
        return str(x)
    # Decimal(float) is exact, so ties are real ties
    s = str(Decimal(x).quantize(QUANTUM, rounding=ROUND_HALF_UP))
    return s.rstrip("0").rstrip(".")


def polar(r: float, theta: float) -> Point:
    return r * math.cos(theta), r * math.sin(theta)


def move_to(x: float, y: float) -> str:
    return f"M {fmt_num(x)} {fmt_num(y)}"


def line_to(x: float, y: float) -> str:
    return f"L {fmt_num(x)} {fmt_num(y)}"


def arc_to(r: float, large_arc: int, sweep: int, x: float, y: float) -> str:
    """Circular arc with radius r to (x, y), no x-axis rotation."""
    return f"A {fmt_num(r)} {fmt_num(r)} 0 {large_arc} {sweep} {fmt_num(x)} {fmt_num(y)}"


def normalize_angle(delta: float) -> float:
    """Reduce an angle in radians to [0, 2*pi)."""
    return delta % TAU


def arc_flags_ccw(delta: float) -> Tuple[int, int]:
    """(large-arc-flag, sweep-flag) for a counter-clockwise arc over delta."""
    return (1 if normalize_angle(delta) > math.pi else 0), 1


def arc_flags_cw(delta: float) -> Tuple[int, int]:
    """(large-arc-flag, sweep-flag) for the clockwise way back over delta."""
    return (1 if normalize_angle(delta) > math.pi else 0), 0


def circle_subpath(r: float) -> str:
    """
    Full circle around the origin as a closed subpath.
    A single arc cannot end where it starts, so two semicircles are used.
    """
    return " ".join(
        [
            move_to(r, 0),
            arc_to(r, 1, 1, -r, 0),
            arc_to(r, 1, 1, r, 0),
            "Z",
        ]
    )


def annular_sector_subpath(r_in: float, r_out: float, t0: float, t1: float) -> str:
    """
    Closed subpath of the ring sector between r_in and r_out,
    from angle t0 to t1 (radians).
    Outer arc runs counter-clockwise, inner arc runs back clockwise.
    """
    dtheta = normalize_angle(t1 - t0)
    x0, y0 = polar(r_out, t0)
    x1, y1 = polar(r_out, t1)
    xi1, yi1 = polar(r_in, t1)
    xi0, yi0 = polar(r_in, t0)
    large_ccw, sweep_ccw = arc_flags_ccw(dtheta)
    large_cw, sweep_cw = arc_flags_cw(dtheta)
    return " ".join(
        [
            move_to(x0, y0),
            arc_to(r_out, large_ccw, sweep_ccw, x1, y1),
            line_to(xi1, yi1),
            arc_to(r_in, large_cw, sweep_cw, xi0, yi0),
            line_to(x0, y0),
            "Z",
        ]
    )

