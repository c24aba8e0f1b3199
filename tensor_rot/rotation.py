"""
rotation.py — In-Place Quarter-Turn Engine
============================================

Applies every quartet of a quarter turn to a flat buffer.  The four values
of a quartet are staged before any of them is written back, since the four
positions alias the data being permuted.  Peak extra memory is those four
values, independent of N.
"""

import logging

import numpy as np

from .codec import coord_to_index, volume_size
from .quartets import check_axis, iter_quartets

logger = logging.getLogger(__name__)


def quartet_indices(N, axis):
    """
    Flat-index form of iter_quartets().

    Yields:
        (i1, i2, i3, i4): buffer indices; the value at i1 moves to i2, etc.
    """
    for c1, c2, c3, c4 in iter_quartets(N, axis):
        yield (coord_to_index(c1, N), coord_to_index(c2, N),
               coord_to_index(c3, N), coord_to_index(c4, N))


def rotate_buffer(buffer, N, axis):
    """
    Turn an N×N×N volume a quarter turn about `axis`, in place.

    Args:
        buffer: Flat, writable sequence of N³ elements (ndarray, bytearray, list)
        N: Cube dimension
        axis: One of AXES

    Raises:
        ValueError: wrong buffer length or unknown axis
    """
    check_axis(axis)
    if len(buffer) != volume_size(N):
        raise ValueError(f"Buffer holds {len(buffer)} elements, expected {volume_size(N)}")

    moved = 0
    for i1, i2, i3, i4 in quartet_indices(N, axis):
        v1, v2, v3, v4 = buffer[i1], buffer[i2], buffer[i3], buffer[i4]
        buffer[i2] = v1
        buffer[i3] = v2
        buffer[i4] = v3
        buffer[i1] = v4
        moved += 4
    logger.debug("Rotated N=%d about %s (%d elements moved)", N, axis, moved)


def rotation_permutation(N, axis):
    """
    Destination index of every source index under one quarter turn.

    Cells on the rotation axis of an odd-N cube map to themselves.

    Args:
        N: Cube dimension
        axis: One of AXES

    Returns:
        dest: (N³,) int64 array, new[dest[i]] = old[i]
    """
    dest = np.arange(volume_size(N), dtype=np.int64)
    for i1, i2, i3, i4 in quartet_indices(N, axis):
        dest[i1] = i2
        dest[i2] = i3
        dest[i3] = i4
        dest[i4] = i1
    return dest
