"""Run orchestration: one cue sheet in, tagged tracks out"""
import os
import tempfile
import time

from ..exceptions import FlacSplitError, OutputDirectoryError
from ..utils.helpers import create_logger
from .audio_processor import embedded_cuesheet, process_track
from .cuesheet import AlbumFound, CueSheetParser
from .encoders import encoders_for
from .file_finder import locate_source_file
from .naming import album_directory
from .tools import ToolRunner, check_tools


def default_log_dir():
    return os.path.join(tempfile.gettempdir(), "flacsplit_logs")


def make_directory(path):
    """Create a directory and its parents; an existing directory is fine"""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(f"Couldn't create {path}: {e}") from e


def split_cue_sheet(cue_path, formats=("flac",), force=False, output_root="",
                    log_dir=None, runner=None, tool_search_path=None, tmp_dir=None):
    """
    Split a flac image into tagged per-track files using its cue sheet.

    Steps: check the external tools, locate the image, embed the cue sheet
    into it, extract and encode every track, and remove the cue sheet
    again (on every exit path).

    Args:
        cue_path: Path to the cue sheet
        formats: Output formats to produce ('flac', 'ogg', 'mp3')
        force: Overwrite existing output files instead of skipping them
        output_root: Root directory for the artist/album tree
        log_dir: Directory for the run log file
        runner: ToolRunner to use (default: one logging to the run log)
        tool_search_path: Optional PATH string used for the tool check
        tmp_dir: Directory for temporary WAV files

    Returns:
        Dictionary with overall status and details
    """
    log_dir = log_dir or default_log_dir()
    try:
        make_directory(log_dir)
    except OutputDirectoryError as e:
        create_logger()(f"💥 Fatal error: {e}")
        return {"status": "error", "message": str(e), "log": None}

    logfile = os.path.join(log_dir, f"flacsplit-{time.strftime('%Y%m%d-%H%M%S')}-{os.getpid()}.log")
    log = create_logger(logfile)
    if runner is None:
        runner = ToolRunner(logfile)

    found_count = 0
    encoded_count = 0
    skipped_count = 0

    try:
        encoders_for(formats)
        check_tools(formats, log, tool_search_path)

        parser = CueSheetParser.from_file(cue_path, log)
        image_path = locate_source_file(cue_path, parser.source_file(), log)

        log(f"🚀 Processing {os.path.basename(image_path)} with cue sheet {os.path.basename(cue_path)}")
        log(f"📋 Encoding to {', '.join(formats)}")

        with embedded_cuesheet(runner, cue_path, image_path, log):
            for event in parser.events():
                if isinstance(event, AlbumFound):
                    album = event.album
                    make_directory(album_directory(album.artist, album.album, output_root))
                    continue

                found_count += 1
                result = process_track(
                    runner, image_path, event.album, event.track, formats, log,
                    output_root=output_root, force=force, tmp_dir=tmp_dir
                )
                if result["status"] == "skipped":
                    skipped_count += 1
                else:
                    encoded_count += 1

        log(f"📊 Summary: {found_count} track(s) found, {encoded_count} encoded, {skipped_count} skipped")
        log("✅ Done")
        return {
            "status": "success",
            "log": logfile,
            "tracks": found_count,
            "encoded": encoded_count,
            "skipped": skipped_count,
        }

    except FlacSplitError as e:
        log(f"💥 Fatal error: {e}")
        log(f"📄 Full log available at: {logfile}")
        return {"status": "error", "message": str(e), "log": logfile}
