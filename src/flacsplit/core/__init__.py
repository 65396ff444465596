"""Core functionality modules"""

from .cuesheet import CueSheetParser, AlbumMetadata, TrackRecord, AlbumFound, TrackFound
from .naming import sanitize_name, build_output_path, album_directory
from .tools import ToolRunner, check_tools, find_tool
from .encoders import TrackTags, FlacEncoder, OggEncoder, Mp3Encoder, encoders_for
from .audio_processor import extract_track, embedded_cuesheet, process_track
from .job_orchestrator import split_cue_sheet

__all__ = [
    "CueSheetParser",
    "AlbumMetadata",
    "TrackRecord",
    "AlbumFound",
    "TrackFound",
    "sanitize_name",
    "build_output_path",
    "album_directory",
    "ToolRunner",
    "check_tools",
    "find_tool",
    "TrackTags",
    "FlacEncoder",
    "OggEncoder",
    "Mp3Encoder",
    "encoders_for",
    "extract_track",
    "embedded_cuesheet",
    "process_track",
    "split_cue_sheet",
]
