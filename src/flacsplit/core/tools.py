"""External tool discovery and invocation"""
import os
import shutil

from ..exceptions import MissingToolError, ToolError
from ..utils.helpers import run_command

# (tool, output format it is needed for or None if essential, package providing it)
REQUIRED_TOOLS = [
    ("metaflac", None, "flac"),
    ("flac", None, "flac"),
    ("oggenc", "ogg", "vorbis-tools"),
    ("lame", "mp3", "lame"),
]


def utf8_env():
    """Copy of the current environment with a UTF-8 locale for subprocesses"""
    env = os.environ.copy()
    env['LC_ALL'] = 'C.UTF-8'
    env['LANG'] = 'C.UTF-8'
    return env


class ToolRunner:
    """
    Runs external commands, logging their output to the run log file.

    Every component that shells out goes through a runner, so another
    backend (or a fake in tests) can be swapped in without touching them.
    """

    def __init__(self, logfile, env=None):
        self.logfile = logfile
        self.env = env if env is not None else utf8_env()

    def run(self, cmd):
        """Run a command and return its exit code"""
        return run_command(cmd, self.logfile, env=self.env)

    def check(self, cmd):
        """
        Run a command, failing if it does not exit cleanly.

        Raises:
            ToolError: If the command cannot be started or exits non-zero
        """
        exit_code = self.run(cmd)
        if exit_code != 0:
            tool = os.path.basename(cmd[0])
            raise ToolError(tool, f"{tool} failed with exit code {exit_code}", exit_code)


def find_tool(name, search_path=None):
    """
    Look up a tool on the PATH.

    Args:
        name: Executable name
        search_path: Optional PATH string to search instead of the environment's

    Returns:
        Tuple of (path or None, is_executable)
    """
    found = shutil.which(name, mode=os.F_OK, path=search_path)
    if found is None:
        return None, False
    return found, os.access(found, os.X_OK)


def check_tools(formats, log_func, search_path=None):
    """
    Verify that the external tools needed for a run are installed.

    metaflac and flac are always required. oggenc and lame are only
    required when their output format was requested; otherwise a missing
    encoder is reported as a warning.

    Args:
        formats: Requested output formats ('flac', 'ogg', 'mp3')
        log_func: Function to call for logging messages
        search_path: Optional PATH string to search instead of the environment's

    Returns:
        Dictionary mapping each usable tool to its path

    Raises:
        MissingToolError: If an essential or requested tool is missing or
            not executable
    """
    available = {}
    for tool, output_format, package in REQUIRED_TOOLS:
        path, executable = find_tool(tool, search_path)
        if path and executable:
            available[tool] = path
            continue

        if path:
            log_func(f"⚠️ {tool} exists but you do not have execution permissions!")
            remedy = "fix"
        else:
            log_func(f"⚠️ {tool} was not found in your path!")
            remedy = f"install {package}"

        if output_format is None:
            raise MissingToolError(f"{tool} is an essential item, please {remedy}.")

        log_func(f"⚠️ This will prevent you from encoding to {output_format} format.")
        if output_format in formats:
            raise MissingToolError(
                f"{tool} is required for {output_format} output. "
                f"Please select an alternate encoding, or {remedy}."
            )

    return available
