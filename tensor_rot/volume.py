"""
volume.py — Owned N³ Element Buffer
=====================================

The volume is a flat numpy uint8 buffer of N³ characters laid out as
index = x + y·N + z·N².  N is fixed at construction and bounded by
[MIN_DIMENSION, MAX_DIMENSION].
"""

import logging
import string

import numpy as np

from .codec import coord_to_index, volume_size
from .rotation import rotate_buffer

logger = logging.getLogger(__name__)


MIN_DIMENSION = 3
MAX_DIMENSION = 50

# Index 0 → 'A', 1 → 'B', ... wrapping after '9'
PALETTE = string.ascii_uppercase + string.ascii_lowercase + string.digits


def check_dimension(N):
    """Validate a cube dimension, returning it as an int."""
    if isinstance(N, bool) or not isinstance(N, (int, np.integer)):
        raise ValueError(f"Dimension must be an integer, got {N!r}")
    if not MIN_DIMENSION <= N <= MAX_DIMENSION:
        raise ValueError(
            f"Dimension must be in [{MIN_DIMENSION}, {MAX_DIMENSION}], got {N}")
    return int(N)


def initial_fill(N):
    """
    Deterministic fill used to check rotations by eye.

    Returns:
        (N³,) uint8 array, element i = PALETTE[i % len(PALETTE)]
    """
    codes = np.frombuffer(PALETTE.encode('ascii'), dtype=np.uint8)
    return codes[np.arange(volume_size(N)) % len(codes)].copy()


class Volume:
    """Cubic third-order tensor of single-byte elements."""

    def __init__(self, N, data=None):
        self._N = check_dimension(N)
        if data is None:
            self.data = initial_fill(self._N)
        else:
            data = np.asarray(data, dtype=np.uint8).reshape(-1).copy()
            if data.size != volume_size(self._N):
                raise ValueError(
                    f"Data holds {data.size} elements, expected {volume_size(self._N)}")
            self.data = data
        logger.debug("Created volume N=%d (%d elements)", self._N, self.data.size)

    @property
    def N(self):
        return self._N

    def __len__(self):
        return self.data.size

    def __eq__(self, other):
        if not isinstance(other, Volume):
            return NotImplemented
        return self.N == other.N and bool(np.array_equal(self.data, other.data))

    def __repr__(self):
        return f"Volume(N={self.N})"

    def copy(self):
        return Volume(self.N, self.data)

    def rotate(self, axis):
        """Quarter turn about `axis`, in place."""
        rotate_buffer(self.data, self.N, axis)

    def element(self, coord):
        """Character stored at `coord`."""
        return chr(self.data[coord_to_index(coord, self.N)])

    def as_array(self):
        """(N, N, N) view indexed [z, y, x]."""
        return self.data.reshape(self.N, self.N, self.N)

    def section(self, z):
        """(N, N) view of depth-slice z: rows are y, columns are x."""
        if not 0 <= z < self.N:
            raise ValueError(f"section must be in [0, {self.N}), got {z}")
        return self.as_array()[z]
