"""Tests for external tool discovery and invocation."""
import sys

import pytest

from flacsplit.core.tools import ToolRunner, check_tools, find_tool, utf8_env
from flacsplit.exceptions import MissingToolError, ToolError
from flacsplit.utils.helpers import run_command

from conftest import make_tool_dir


def test_find_tool(tool_dir):
    path, executable = find_tool("flac", tool_dir)
    assert path.endswith("flac")
    assert executable


def test_find_tool_missing(tmp_path):
    assert find_tool("flac", str(tmp_path)) == (None, False)


def test_check_tools_all_present(tool_dir, log_messages):
    available = check_tools(["flac", "ogg", "mp3"], log_messages.log, tool_dir)
    assert set(available) == {"metaflac", "flac", "oggenc", "lame"}
    assert list(log_messages) == []


def test_missing_mp3_encoder_is_fatal_when_requested(tmp_path, log_messages):
    bin_dir = make_tool_dir(tmp_path / "bin", tools=("metaflac", "flac", "oggenc"))
    with pytest.raises(MissingToolError, match="lame"):
        check_tools(["mp3"], log_messages.log, bin_dir)


def test_missing_mp3_encoder_only_warns_for_flac(tmp_path, log_messages):
    bin_dir = make_tool_dir(tmp_path / "bin", tools=("metaflac", "flac", "oggenc"))

    available = check_tools(["flac"], log_messages.log, bin_dir)

    assert "lame" not in available
    assert log_messages.contains("lame was not found in your path!")
    assert log_messages.contains("prevent you from encoding to mp3 format")


def test_missing_essential_tool_is_fatal(tmp_path, log_messages):
    bin_dir = make_tool_dir(tmp_path / "bin", tools=("flac", "oggenc", "lame"))
    with pytest.raises(MissingToolError, match="metaflac is an essential item"):
        check_tools(["flac"], log_messages.log, bin_dir)


def test_non_executable_essential_tool_is_fatal(tmp_path, log_messages):
    bin_dir = make_tool_dir(tmp_path / "bin", tools=("metaflac", "oggenc", "lame"))
    make_tool_dir(tmp_path / "bin", tools=("flac",), executable=False)

    with pytest.raises(MissingToolError, match="please fix"):
        check_tools(["flac"], log_messages.log, bin_dir)
    assert log_messages.contains("flac exists but you do not have execution permissions!")


def test_non_executable_ogg_encoder_fatal_only_when_requested(tmp_path, log_messages):
    bin_dir = make_tool_dir(tmp_path / "bin", tools=("metaflac", "flac", "lame"))
    make_tool_dir(tmp_path / "bin", tools=("oggenc",), executable=False)

    check_tools(["flac", "mp3"], log_messages.log, bin_dir)
    with pytest.raises(MissingToolError, match="alternate encoding"):
        check_tools(["ogg"], log_messages.log, bin_dir)


def test_utf8_env():
    env = utf8_env()
    assert env["LC_ALL"] == "C.UTF-8"
    assert env["LANG"] == "C.UTF-8"


def test_run_command_logs_output_and_exit_code(tmp_path):
    logfile = tmp_path / "run.log"
    code = run_command(
        [sys.executable, "-c", "import sys; print('hello'); sys.exit(3)"], str(logfile)
    )
    assert code == 3
    content = logfile.read_text()
    assert "hello" in content
    assert "[Exit code: 3]" in content


def test_runner_check_raises_on_failure(tmp_path):
    runner = ToolRunner(str(tmp_path / "run.log"))
    with pytest.raises(ToolError) as excinfo:
        runner.check([sys.executable, "-c", "import sys; sys.exit(2)"])
    assert excinfo.value.returncode == 2


def test_runner_check_passes_on_success(tmp_path):
    runner = ToolRunner(str(tmp_path / "run.log"))
    runner.check([sys.executable, "-c", "pass"])


def test_runner_raises_when_tool_cannot_start(tmp_path):
    runner = ToolRunner(str(tmp_path / "run.log"))
    with pytest.raises(ToolError, match="could not start"):
        runner.run([str(tmp_path / "no-such-tool")])
