"""Utility functions and helpers"""

from .helpers import safe_print, run_command, create_logger
from .encoding import read_cue_text

__all__ = ["safe_print", "run_command", "create_logger", "read_cue_text"]
