"""
codec.py — Coordinate ↔ Flat Index Mapping
============================================

Row-major layout with x minor:

    index = x + y·N + z·N²

x varies fastest, then y, then z.  Both directions are exact inverses over
the valid domain [0, N)³ ↔ [0, N³).
"""

from typing import NamedTuple


class Coordinate(NamedTuple):
    """Position of one element inside an N×N×N volume."""
    x: int
    y: int
    z: int


def volume_size(N):
    """Number of elements in an N×N×N volume."""
    return N * N * N


def coord_to_index(coord, N):
    """
    Encode a coordinate as a flat buffer index.

    Args:
        coord: Coordinate (or any (x, y, z) triple) with components in [0, N)
        N: Cube dimension

    Returns:
        int: x + y*N + z*N*N
    """
    x, y, z = coord
    if not (0 <= x < N and 0 <= y < N and 0 <= z < N):
        raise ValueError(f"Coordinate {tuple(coord)} outside [0, {N})^3")
    return x + y * N + z * N * N


def index_to_coord(index, N):
    """
    Decode a flat buffer index into a coordinate.

    Args:
        index: Flat index in [0, N³)
        N: Cube dimension

    Returns:
        Coordinate(x, y, z)
    """
    if not 0 <= index < volume_size(N):
        raise ValueError(f"Index {index} outside [0, {volume_size(N)})")
    return Coordinate(index % N, (index // N) % N, index // (N * N))
