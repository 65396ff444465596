"""Shared pytest fixtures for flacsplit tests."""
import os
import stat

import pytest

from flacsplit.core.tools import ToolRunner

SAMPLE_CUE = """PERFORMER "Artist Name"
TITLE "Album Title"
REM GENRE Rock
REM DATE 1999
FILE "image.flac" WAVE
  TRACK 01 AUDIO
    TITLE "First Song"
    PERFORMER "Artist Name"
    INDEX 01 00:00:00
  TRACK 02 AUDIO
    TITLE "Second Song"
    PERFORMER "Artist Name"
    INDEX 00 04:10:50
    INDEX 01 04:12:33
"""


def _option_value(cmd, prefix):
    for arg in cmd:
        if arg.startswith(prefix):
            return arg[len(prefix):]
    return None


class FakeRunner(ToolRunner):
    """
    Records commands instead of running them, and creates the files the
    real tools would have written.

    fail_on: optional predicate; commands it matches exit with status 1.
    """

    def __init__(self, fail_on=None):
        super().__init__(logfile=None, env={})
        self.commands = []
        self.fail_on = fail_on

    def run(self, cmd):
        self.commands.append(list(cmd))
        if self.fail_on and self.fail_on(cmd):
            return 1
        self._simulate(cmd)
        return 0

    def calls(self, tool):
        return [cmd for cmd in self.commands if cmd[0] == tool]

    def _simulate(self, cmd):
        tool = cmd[0]
        output = None
        if tool == "flac":
            output = _option_value(cmd, "--output-name=")
        elif tool == "oggenc":
            output = _option_value(cmd, "--output=")
        elif tool == "lame":
            output = cmd[-1]

        if output:
            with open(output, "wb") as f:
                f.write(b"audio")
        if tool == "flac" and "--delete-input-file" in cmd:
            os.remove(cmd[-1])


@pytest.fixture
def fake_runner():
    return FakeRunner()


class Messages(list):
    """Collected log messages; pass ``.log`` wherever a log function is expected"""

    def log(self, msg):
        self.append(msg)

    def contains(self, text):
        return any(text in msg for msg in self)


@pytest.fixture
def log_messages():
    return Messages()


def make_tool_dir(path, tools=("metaflac", "flac", "oggenc", "lame"), executable=True):
    path.mkdir(parents=True, exist_ok=True)
    for tool in tools:
        tool_path = path / tool
        tool_path.write_text("#!/bin/sh\nexit 0\n")
        mode = stat.S_IRUSR | stat.S_IWUSR
        if executable:
            mode |= stat.S_IXUSR
        tool_path.chmod(mode)
    return str(path)


@pytest.fixture
def tool_dir(tmp_path):
    """A PATH directory holding every external tool"""
    return make_tool_dir(tmp_path / "bin")


@pytest.fixture
def rip_dir(tmp_path):
    """Directory holding a cue sheet and its flac image"""
    rip = tmp_path / "rip"
    rip.mkdir()
    (rip / "album.cue").write_text(SAMPLE_CUE, encoding="utf-8")
    (rip / "image.flac").write_bytes(b"fLaC")
    return rip
