"""
diagnostics.py — Codec Traces and Rotation Self-Test
======================================================

Fixed-format text traces of the coordinate codec, plus a self-test that
checks the in-place engine for every axis:

  - quartets cover every moved cell exactly once
  - agreement with the jax.numpy rot90 reference
  - four turns about one axis restore the volume
  - a turn followed by its inverse restores the volume
"""

import numpy as np

from .codec import Coordinate, coord_to_index, index_to_coord, volume_size
from .quartets import AXES, inverse_axis
from .reference import reference_rotate_flat
from .render import render_volume
from .rotation import quartet_indices, rotate_buffer


def format_index_dump(N):
    """Flat indices in z → y → x traversal order, comma-separated."""
    indices = [coord_to_index(Coordinate(x, y, z), N)
               for z in range(N) for y in range(N) for x in range(N)]
    return ",".join(str(i) for i in indices)


def format_coordinate_dump(N):
    """One "x,y,z" line per flat index, in index order."""
    lines = []
    for i in range(volume_size(N)):
        c = index_to_coord(i, N)
        lines.append(f"{c.x},{c.y},{c.z}")
    return "\n".join(lines) + "\n"


def format_report(volume):
    """Full diagnostic trace: index dump, coordinate dump, elements."""
    N = volume.N
    return (
        "Coordinate to index:\n"
        + format_index_dump(N)
        + "\n\nIndex to coordinate:\n"
        + format_coordinate_dump(N)
        + "\nElements:\n"
        + render_volume(volume)
    )


# ============================================================
# Self-test
# ============================================================

def quartet_coverage(N, axis):
    """
    Visit count of every flat index across one turn's quartets.

    Returns:
        (N³,) int array; 1 for every moved cell, 0 on the fixed axis line
    """
    counts = np.zeros(volume_size(N), dtype=np.int64)
    for quad in quartet_indices(N, axis):
        for i in quad:
            counts[i] += 1
    return counts


def expected_coverage(N):
    """Cells moved by one turn: every cell except the axis line of odd N."""
    return N * (N * N - N % 2)


def self_test(N, verbose=True):
    """
    Run every rotation check for dimension N.

    Returns:
        bool: True when all checks pass
    """
    original = np.arange(volume_size(N), dtype=np.int64)
    results = []

    def report(name, ok):
        results.append(ok)
        if verbose:
            print(f"  {'✓' if ok else '✗'} {name}")

    if verbose:
        print(f"Self-test N={N}")
    for axis in AXES:
        counts = quartet_coverage(N, axis)
        report(f"{axis}: quartets disjoint and complete",
               int(counts.max()) <= 1 and int(counts.sum()) == expected_coverage(N))

        buf = original.copy()
        rotate_buffer(buf, N, axis)
        report(f"{axis}: matches rot90 reference",
               np.array_equal(buf, reference_rotate_flat(original, N, axis)))

        for _ in range(3):
            rotate_buffer(buf, N, axis)
        report(f"{axis}: four turns restore", np.array_equal(buf, original))

        rotate_buffer(buf, N, axis)
        rotate_buffer(buf, N, inverse_axis(axis))
        report(f"{axis} then {inverse_axis(axis)}: restores", np.array_equal(buf, original))

    passed = all(results)
    if verbose:
        print(f"{sum(results)}/{len(results)} checks passed")
    return passed
