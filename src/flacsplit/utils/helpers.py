"""General utility functions"""
import os
import sys
import time
import subprocess

from ..exceptions import ToolError


def safe_print(msg):
    """Print with handling for surrogate characters that can't be encoded"""
    try:
        print(msg)
    except UnicodeEncodeError:
        # Replace problematic characters with safe representation
        safe_msg = msg.encode('utf-8', errors='replace').decode('utf-8')
        print(safe_msg)
    sys.stdout.flush()


def run_command(cmd, logfile, env=None):
    """
    Execute an external command and log its output to a file.

    Args:
        cmd: Command and arguments as a list
        logfile: Path to log file for output
        env: Optional environment variables dict

    Returns:
        Exit code of the command

    Raises:
        ToolError: If the command could not be started at all
    """
    with open(logfile, "a", encoding="utf-8", errors="replace") as f:
        # Handle potential encoding issues in command strings
        try:
            cmd_str = ' '.join(str(c) for c in cmd)
        except UnicodeEncodeError:
            # If there are encoding issues, use repr() to show the command safely
            cmd_str = ' '.join(repr(c) for c in cmd)

        f.write(f"\n$ {cmd_str}\n")
        f.flush()
        try:
            result = subprocess.run(cmd, stdout=f, stderr=f, check=False, env=env)
        except OSError as e:
            f.write(f"[Failed to start: {e}]\n")
            raise ToolError(cmd[0], f"could not start {cmd[0]}: {e}") from e
        f.write(f"[Exit code: {result.returncode}]\n")
        f.flush()
        return result.returncode


def create_logger(logfile=None):
    """
    Build the run's log function.

    Messages are timestamped, printed to stdout and, when a logfile is
    given, appended to it.

    Args:
        logfile: Optional path to the run log file

    Returns:
        Function taking a single message string
    """
    if logfile:
        os.makedirs(os.path.dirname(logfile) or ".", exist_ok=True)

    def log(msg):
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        formatted_msg = f"[{timestamp}] {msg}"
        safe_print(formatted_msg)
        if logfile:
            with open(logfile, "a", encoding="utf-8", errors="replace") as f:
                f.write(formatted_msg + "\n")
                f.flush()

    return log
