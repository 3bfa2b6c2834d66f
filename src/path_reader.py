"""Reads path data written by path_data back into absolute segments,
so the test suites can check coordinates and arc flags.
Only the absolute M, L, A and Z commands are understood."""

import re

from typing import List, Tuple, TypeAlias

NUM_RE = re.compile(r"[+-]?(?:\d*\.\d+|\d+)(?:[eE][+-]?\d+)?")
NUM_PARAMS = {"M": 2, "L": 2, "A": 7, "Z": 0}

PathSegment: TypeAlias = Tuple[str, List[float]]
NormalizedPath: TypeAlias = List[PathSegment]


def read_path(d: str) -> NormalizedPath:
    """
    # Example:
    read_path("M 10 0 A 10 10 0 1 1 -10 0 Z")
    -> [("M", [10, 0]), ("A", [10, 10, 0, 1, 1, -10, 0]), ("Z", [])]
    """
    if re.search(r"[^0-9\s.\-+eEMLAZ]", d):
        raise ValueError(f"Path contains unsupported characters: {d}")
    out: NormalizedPath = []
    for cmd, raw in re.findall(r"([MLAZ])([^MLAZ]*)", d):
        coords = [float(num) for num in NUM_RE.findall(raw)]
        if len(coords) != NUM_PARAMS[cmd]:
            raise ValueError(
                f"Found {len(coords)} coordinates for {cmd}, expected {NUM_PARAMS[cmd]}"
            )
        if cmd == "A" and (coords[3] not in (0, 1) or coords[4] not in (0, 1)):
            raise ValueError("arc flags can only be 0 or 1")
        out.append((cmd, coords))
    return out


def split_subpaths(d: str) -> List[NormalizedPath]:
    """Group the segments of d into subpaths, each one starting with a move."""
    subpaths: List[NormalizedPath] = []
    for cmd, coords in read_path(d):
        if cmd == "M" or not subpaths:
            subpaths.append([])
        subpaths[-1].append((cmd, coords))
    return subpaths
