"""
session.py — Interactive Read / Decode / Act / Render Loop
============================================================

States: running → terminated.  A rotate command turns the whole volume; the
navigation commands move the visible section, clamped to [0, N-1]; quit
ends the loop on its first occurrence; anything else is ignored.

The loop talks to its surroundings through any object providing

    read_command() -> Command
    render(text)

so it runs unchanged against a real Terminal or a scripted stand-in.
"""

import logging

from .render import render_screen

logger = logging.getLogger(__name__)


RUNNING = "running"
TERMINATED = "terminated"


class Session:
    """Owns the volume and the visible section pointer."""

    def __init__(self, volume, section=0):
        self.volume = volume
        self.section = min(max(section, 0), volume.N - 1)
        self.state = RUNNING
        self.rotations = 0

    @property
    def running(self):
        return self.state == RUNNING

    def forward(self):
        self.section = min(self.section + 1, self.volume.N - 1)

    def backward(self):
        self.section = max(self.section - 1, 0)

    def handle(self, command):
        """Apply one command; returns the resulting state."""
        if not self.running:
            return self.state

        if command.kind == "rotate":
            self.volume.rotate(command.axis)
            self.rotations += 1
            logger.debug("Rotation %d about %s", self.rotations, command.axis)
        elif command.kind == "forward":
            self.forward()
        elif command.kind == "backward":
            self.backward()
        elif command.kind == "quit":
            self.state = TERMINATED
            logger.info("Session terminated after %d rotations", self.rotations)
        return self.state

    def frame(self):
        return render_screen(self.volume, self.section)

    def run(self, io):
        """
        Render, then read and apply commands until quit.

        Args:
            io: object with read_command() and render(text)
        """
        io.render(self.frame())
        while self.running:
            command = io.read_command()
            self.handle(command)
            if self.running:
                io.render(self.frame())
        return self
