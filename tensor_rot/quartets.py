"""
quartets.py — Four-Cycles of a Quarter Turn
=============================================

A 90° turn of the cube about an axis is a 90° turn of each of the N
cross-sections perpendicular to that axis.  Each N×N section is split into
N // 2 concentric square rings ("layers", outermost = 0); the ring of layer
L has edge length N - 1 - 2L and contributes exactly that many four-cycles
("quartets"), one per offset along its edge.  The centre cell of an odd N
section lies on no ring and is fixed by the turn.

Positive axes follow the right-hand rule:

    +x : carries +y onto +z
    +y : carries +z onto +x
    +z : carries +x onto +y   (clockwise on screen, y pointing down)

Negative axes are the inverse turns.  Within a quartet (c1, c2, c3, c4) the
value at c1 moves to c2, c2 to c3, c3 to c4 and c4 back to c1.
"""

from .codec import Coordinate


AXES = ("+x", "-x", "+y", "-y", "+z", "-z")


def check_axis(axis):
    if axis not in AXES:
        raise ValueError(f"Unknown axis: {axis!r} (expected one of {AXES})")
    return axis


def inverse_axis(axis):
    """Axis whose quarter turn undoes a quarter turn about `axis`."""
    check_axis(axis)
    return ("-" if axis[0] == "+" else "+") + axis[1]


def ring_length(N, layer):
    """Number of quartets on ring `layer` of an N×N section."""
    return N - 1 - 2 * layer


def quartet(N, section, layer, offset, axis):
    """
    Four coordinates forming one cycle of a quarter turn.

    Args:
        N: Cube dimension
        section: Cross-section index along the rotation axis, in [0, N)
        layer: Ring index, in [0, N // 2)
        offset: Position along the ring edge, in [0, N - 1 - 2*layer)
        axis: One of AXES

    Returns:
        (c1, c2, c3, c4): Coordinates; the value at each moves to the next
    """
    if not 0 <= section < N:
        raise ValueError(f"section must be in [0, {N}), got {section}")
    if not 0 <= layer < N // 2:
        raise ValueError(f"layer must be in [0, {N // 2}), got {layer}")
    if not 0 <= offset < ring_length(N, layer):
        raise ValueError(
            f"offset must be in [0, {ring_length(N, layer)}) on layer {layer}, got {offset}")

    s = section
    lo = layer
    hi = N - 1 - layer
    a = lo + offset    # walks forward along an edge
    b = hi - offset    # walks backward along the opposite edge

    if axis == "+x":    # (y, z) plane, x fixed
        return (Coordinate(s, a, lo), Coordinate(s, hi, a),
                Coordinate(s, b, hi), Coordinate(s, lo, b))
    elif axis == "-x":
        return (Coordinate(s, a, lo), Coordinate(s, lo, b),
                Coordinate(s, b, hi), Coordinate(s, hi, a))
    elif axis == "+y":  # (z, x) plane, y fixed
        return (Coordinate(lo, s, a), Coordinate(a, s, hi),
                Coordinate(hi, s, b), Coordinate(b, s, lo))
    elif axis == "-y":
        return (Coordinate(lo, s, a), Coordinate(b, s, lo),
                Coordinate(hi, s, b), Coordinate(a, s, hi))
    elif axis == "+z":  # (x, y) plane, z fixed
        return (Coordinate(a, lo, s), Coordinate(hi, a, s),
                Coordinate(b, hi, s), Coordinate(lo, b, s))
    elif axis == "-z":
        return (Coordinate(a, lo, s), Coordinate(lo, b, s),
                Coordinate(b, hi, s), Coordinate(hi, a, s))
    else:
        raise ValueError(f"Unknown axis: {axis!r} (expected one of {AXES})")


def iter_quartets(N, axis):
    """
    Every quartet of one full quarter turn, section → layer → offset.

    Yields:
        (c1, c2, c3, c4) as returned by quartet()
    """
    check_axis(axis)
    for section in range(N):
        for layer in range(N // 2):
            for offset in range(ring_length(N, layer)):
                yield quartet(N, section, layer, offset, axis)


def count_quartets(N):
    """Quartets per quarter turn: N sections × Σ ring lengths."""
    return N * sum(ring_length(N, layer) for layer in range(N // 2))
