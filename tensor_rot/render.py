"""
render.py — Text Rendering of Sections and Volumes
====================================================

Sections are printed as N rows of N characters (row = y, column = x).
"""

CLEAR_SCREEN = "\x1b[2J\x1b[H"

KEY_LEGEND = (
    "x/X y/Y z/Z: rotate +/-   up/k/]: next section   down/j/[: previous section   q: quit"
)


def render_section(volume, section):
    """
    One depth-slice as text.

    Args:
        volume: Volume
        section: z index in [0, N)

    Returns:
        str: N lines of N characters, each terminated by a newline
    """
    grid = volume.section(section)
    return "".join(row.tobytes().decode('ascii') + "\n" for row in grid)


def render_volume(volume):
    """Every depth-slice in z order, separated by two blank lines."""
    return "\n\n".join(render_section(volume, z) for z in range(volume.N))


def render_screen(volume, section):
    """Full interactive frame: clear, header, section grid and key legend."""
    lines = [f"section {section}/{volume.N - 1}", ""]
    lines.extend(render_section(volume, section).splitlines())
    lines.extend(["", KEY_LEGEND])
    return CLEAR_SCREEN + "\n".join(lines) + "\n"
