"""Audio processing for individual tracks of a flac image"""
import os
import tempfile
from contextlib import contextmanager

from ..exceptions import TempFileError
from .encoders import TrackTags, encoders_for
from .naming import build_output_path


def create_temp_wav(tmp_dir=None):
    """
    Create an empty, uniquely named WAV file to extract a track into.

    The name is reserved with an exclusive create, retried by tempfile
    until a free name is found.

    Args:
        tmp_dir: Directory for the file (default: the system temp directory)

    Returns:
        Path to the new file

    Raises:
        TempFileError: If no unique file could be created
    """
    try:
        fd, path = tempfile.mkstemp(prefix="flacsplit-", suffix=".wav", dir=tmp_dir)
    except OSError as e:
        raise TempFileError(f"Couldn't create a temporary file: {e}") from e
    os.close(fd)
    return path


def remove_temp_file(path, log):
    """Delete a temporary file if it is still there, warning on failure"""
    if not os.path.exists(path):
        return
    try:
        os.remove(path)
    except OSError as e:
        log(f"⚠️ Couldn't delete {path}: {e}")


def cue_range(track):
    """flac --cue range covering one track, open-ended for the last one"""
    if track.last:
        return f"{track.ordinal}.1-"
    return f"{track.ordinal}.1-{track.ordinal + 1}.1"


def extract_track(runner, image_path, track, log, tmp_dir=None):
    """
    Decode one track of the image into a temporary WAV file.

    The image must carry an embedded cue sheet, see embedded_cuesheet().

    Args:
        runner: ToolRunner used to run flac
        image_path: Path to the flac image
        track: TrackRecord to extract
        log: Function to call for logging messages
        tmp_dir: Directory for the temporary file

    Returns:
        Path to the extracted WAV file

    Raises:
        TempFileError: If the temporary file cannot be created
        ToolError: If flac fails
    """
    tfile = create_temp_wav(tmp_dir)
    log(f"✂️ Extracting {track.title}.wav")
    try:
        runner.check([
            "flac", "--silent", "--decode", "-f",
            f"--cue={cue_range(track)}",
            f"--output-name={tfile}",
            image_path,
        ])
    except Exception:
        remove_temp_file(tfile, log)
        raise
    return tfile


def embed_cuesheet(runner, cue_path, image_path, log):
    log(f"📎 Embedding cue sheet {os.path.basename(cue_path)}")
    runner.check(["metaflac", f"--import-cuesheet-from={cue_path}", image_path])


def remove_cuesheet(runner, image_path, log):
    log(f"🗑️ Removing cue sheet from {os.path.basename(image_path)}")
    runner.check(["metaflac", "--remove", "--block-type=CUESHEET", image_path])


@contextmanager
def embedded_cuesheet(runner, cue_path, image_path, log):
    """
    Embed the cue sheet into the image for the duration of the block.

    The CUESHEET block is removed again on every exit path. If removal
    fails while an error is already propagating, the failure is only
    logged so the original error is not masked.

    Raises:
        ToolError: If embedding fails, or removal fails on a clean exit
    """
    embed_cuesheet(runner, cue_path, image_path, log)
    try:
        yield
    except BaseException:
        try:
            remove_cuesheet(runner, image_path, log)
        except Exception as e:
            log(f"⚠️ Cue sheet is still embedded in {image_path}: {e}")
        raise
    else:
        remove_cuesheet(runner, image_path, log)


def process_track(runner, image_path, album, track, formats, log,
                  output_root="", force=False, tmp_dir=None):
    """
    Extract one track and encode it to every requested format.

    Formats whose output file already exists are skipped unless force is
    set. The track is only extracted if at least one format remains. All
    encoders read the same extracted WAV, which is deleted once afterwards.

    Args:
        runner: ToolRunner used to run external tools
        image_path: Path to the flac image with embedded cue sheet
        album: AlbumMetadata for the track
        track: TrackRecord to process
        formats: Requested output formats
        log: Function to call for logging messages
        output_root: Root directory for the artist/album tree
        force: Overwrite existing output files
        tmp_dir: Directory for the temporary WAV file

    Returns:
        Dictionary with status ('encoded' or 'skipped') and output paths
    """
    targets = []
    for encoder in encoders_for(formats):
        outfile = build_output_path(
            track.number, track.title, album.album, album.artist,
            encoder.extension, output_root
        )
        if os.path.exists(outfile) and not force:
            log(f"⏭️ {outfile} exists: skipping.")
            continue
        targets.append((encoder, outfile))

    if not targets:
        return {"status": "skipped", "outputs": []}

    tfile = extract_track(runner, image_path, track, log, tmp_dir)
    tags = TrackTags.from_metadata(album, track)
    try:
        for i, (encoder, outfile) in enumerate(targets):
            log(f"🎧 Encoding {outfile}")
            encoder.encode(runner, tfile, tags, outfile,
                           delete_input=(i == len(targets) - 1))
    finally:
        remove_temp_file(tfile, log)

    return {"status": "encoded", "outputs": [outfile for _, outfile in targets]}
