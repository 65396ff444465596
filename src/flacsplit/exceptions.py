"""Exception classes for flacsplit runs."""


class FlacSplitError(Exception):
    """Base exception for all fatal flacsplit errors."""


class CueSheetError(FlacSplitError):
    """Raised when a cue sheet cannot be read."""


class MissingSourceFileError(CueSheetError):
    """Raised when a cue sheet has no FILE directive."""


class SourceFileError(FlacSplitError):
    """Raised when the audio image referenced by a cue sheet cannot be opened."""


class MissingToolError(FlacSplitError):
    """Raised when an essential or explicitly requested tool is unusable."""


class ToolError(FlacSplitError):
    """Raised when an external command cannot be started or fails."""

    def __init__(self, tool, message, returncode=None):
        super().__init__(message)
        self.tool = tool
        self.returncode = returncode


class TempFileError(FlacSplitError):
    """Raised when a unique temporary file cannot be created."""


class OutputDirectoryError(FlacSplitError):
    """Raised when an output or log directory cannot be created."""


class UnsupportedFormatError(FlacSplitError, ValueError):
    """Raised when an unknown output format is requested."""
