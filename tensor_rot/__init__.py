"""
tensor_rot — In-place 90° Rotation of a Cubic Third-Order Tensor
==================================================================

An N×N×N volume stored as a flat buffer (x fastest, z slowest) that can be
turned a quarter turn about any of the six signed principal axes without
allocating a second full-size buffer.

Modules:
    codec        — Coordinate ↔ flat index mapping
    quartets     — Ring/offset decomposition, the four-cycle of every cell
    rotation     — In-place rotation engine and permutation tables
    volume       — Owned N³ byte buffer with the deterministic initial fill
    reference    — jax.numpy rot90 reference used to verify the engine
    render       — Text rendering of sections and whole volumes
    terminal     — Raw-mode terminal, keypress → command decoding
    session      — Interactive read/decode/act/render loop
    diagnostics  — Index/coordinate dumps and the self-test
    plotting     — Matplotlib figure of every depth-slice
"""

from .codec import Coordinate, coord_to_index, index_to_coord
from .quartets import AXES, quartet, iter_quartets
from .rotation import rotate_buffer
from .volume import Volume

__all__ = [
    'Coordinate', 'coord_to_index', 'index_to_coord',
    'AXES', 'quartet', 'iter_quartets',
    'rotate_buffer', 'Volume',
]
