"""Source image lookup"""
import os

from ..exceptions import SourceFileError


def _find_audio_file(audio_file_name, dirpath, filenames):
    """
    Locate an audio file in the directory, trying exact match first, then case-insensitive.

    Args:
        audio_file_name: Name of the audio file to find
        dirpath: Directory to search in
        filenames: List of files in the directory

    Returns:
        Full path to the audio file if found, None otherwise
    """
    audio_file_path = os.path.join(dirpath, audio_file_name)
    if os.path.exists(audio_file_path):
        return audio_file_path

    # Cue sheets written on Windows often disagree with the file name's case
    for existing_file in filenames:
        if existing_file.lower() == audio_file_name.lower():
            return os.path.join(dirpath, existing_file)

    return None


def locate_source_file(cue_path, audio_file_name, log_func):
    """
    Resolve the image named in a cue sheet and confirm it can be read.

    The FILE directive is resolved relative to the cue sheet's directory.

    Args:
        cue_path: Path to the cue sheet
        audio_file_name: File name from the FILE directive
        log_func: Function to call for logging messages

    Returns:
        Path to the image file

    Raises:
        SourceFileError: If the image cannot be opened for reading
    """
    dirpath = os.path.dirname(cue_path)
    try:
        filenames = os.listdir(dirpath or ".")
    except OSError:
        filenames = []

    image_path = _find_audio_file(audio_file_name, dirpath, filenames)
    if image_path is None:
        image_path = os.path.join(dirpath, audio_file_name)
    elif os.path.basename(image_path) != audio_file_name:
        log_func(f"🔍 Matched {audio_file_name} as {os.path.basename(image_path)} (case-insensitive)")

    try:
        with open(image_path, 'rb'):
            pass
    except OSError as e:
        raise SourceFileError(f"Couldn't open {audio_file_name} for reading: {e}") from e

    return image_path
