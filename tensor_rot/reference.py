"""
reference.py — Array-Library Reference Rotation
=================================================

Out-of-place quarter turn via jax.numpy.rot90 on the [z, y, x] cube.
Used only to cross-check the in-place engine; it allocates a full copy.

rot90(m, 1, axes=(p, q)) carries the +p direction onto +q, so with array
axes z=0, y=1, x=2:

    +x : y → z  =  (1, 0)        -x : (0, 1)
    +y : z → x  =  (0, 2)        -y : (2, 0)
    +z : x → y  =  (2, 1)        -z : (1, 2)
"""

import jax.numpy as jnp
import numpy as np

from .quartets import check_axis


ROT90_PLANES = {
    "+x": (1, 0), "-x": (0, 1),
    "+y": (0, 2), "-y": (2, 0),
    "+z": (2, 1), "-z": (1, 2),
}


def reference_rotate(cube, axis):
    """
    Quarter turn of an (N, N, N) [z, y, x] array.

    Args:
        cube: (N, N, N) array-like
        axis: One of AXES

    Returns:
        (N, N, N) numpy array, a new buffer
    """
    check_axis(axis)
    return np.asarray(jnp.rot90(jnp.asarray(cube), k=1, axes=ROT90_PLANES[axis]))


def reference_rotate_flat(buffer, N, axis):
    """reference_rotate() on a flat N³ buffer; returns a flat copy."""
    cube = np.asarray(buffer).reshape(N, N, N)
    return reference_rotate(cube, axis).reshape(-1)
