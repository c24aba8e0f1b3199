"""
test_session.py — Interactive Controller Tests
================================================

Verifies:
  - Rotate commands turn the whole volume; navigation leaves it untouched
  - Section pointer clamps at 0 and N-1
  - Quit terminates on its first occurrence, whatever came before
  - Unrecognised commands are ignored
  - run() renders the initial frame and one frame per handled command
"""

import pytest

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tensor_rot.session import Session, RUNNING, TERMINATED
from tensor_rot.terminal import Command, FORWARD, BACKWARD, QUIT, NOOP
from tensor_rot.volume import Volume


class ScriptedIO:
    """Stand-in for Terminal: replays commands, records frames."""

    def __init__(self, commands):
        self.commands = list(commands)
        self.frames = []

    def read_command(self):
        if not self.commands:
            return QUIT
        return self.commands.pop(0)

    def render(self, text):
        self.frames.append(text)


class TestHandle:

    def test_rotate(self, axis):
        s = Session(Volume(4))
        expected = Volume(4)
        expected.rotate(axis)
        assert s.handle(Command("rotate", axis)) == RUNNING
        assert s.volume == expected
        assert s.rotations == 1

    def test_navigation_leaves_volume(self):
        s = Session(Volume(4))
        s.handle(FORWARD)
        s.handle(FORWARD)
        s.handle(BACKWARD)
        assert s.section == 1
        assert s.volume == Volume(4)

    def test_clamp_forward(self, N):
        s = Session(Volume(N))
        for _ in range(N + 3):
            s.handle(FORWARD)
        assert s.section == N - 1

    def test_clamp_backward(self, N):
        s = Session(Volume(N), section=N - 1)
        for _ in range(N + 3):
            s.handle(BACKWARD)
        assert s.section == 0

    def test_initial_section_clamped(self):
        assert Session(Volume(3), section=10).section == 2
        assert Session(Volume(3), section=-5).section == 0

    def test_noop(self):
        s = Session(Volume(3))
        assert s.handle(NOOP) == RUNNING
        assert s.section == 0
        assert s.volume == Volume(3)

    def test_quit_first_occurrence(self):
        s = Session(Volume(3))
        s.handle(Command("rotate", "+y"))
        s.handle(FORWARD)
        assert s.handle(QUIT) == TERMINATED
        assert not s.running

    def test_no_effect_after_quit(self):
        s = Session(Volume(3))
        s.handle(QUIT)
        s.handle(Command("rotate", "+x"))
        s.handle(FORWARD)
        assert s.volume == Volume(3)
        assert s.section == 0
        assert s.state == TERMINATED


class TestRun:

    def test_frames(self):
        io = ScriptedIO([FORWARD, Command("rotate", "+z"), NOOP, QUIT,
                         Command("rotate", "+x")])
        s = Session(Volume(4)).run(io)
        # initial frame + one per command before quit
        assert len(io.frames) == 4
        assert "section 0/3" in io.frames[0]
        assert "section 1/3" in io.frames[1]
        assert "cYUQ" in io.frames[2]
        assert io.commands == [Command("rotate", "+x")]
        assert s.state == TERMINATED
        assert s.rotations == 1

    def test_immediate_quit(self):
        io = ScriptedIO([QUIT])
        Session(Volume(3)).run(io)
        assert len(io.frames) == 1

    def test_end_of_input_quits(self):
        io = ScriptedIO([])
        assert Session(Volume(3)).run(io).state == TERMINATED

    def test_four_turns_round_trip(self):
        io = ScriptedIO([Command("rotate", "-y")] * 4 + [QUIT])
        s = Session(Volume(5)).run(io)
        assert s.volume == Volume(5)
        assert io.frames[0] == io.frames[-1]
