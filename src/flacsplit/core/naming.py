"""Output file naming"""
import os
import re

_HYPHEN_RUN = re.compile(r'-{2,}')
_TRAILING_DOT = re.compile(r'\.$')
_RESERVED_CHARS = re.compile(r'[?*:|<>]')
_UNDERSCORE_RUN = re.compile(r'_{2,}')


def sanitize_name(name):
    """
    Turn a metadata string into a single filesystem-safe path segment.

    Path separators become hyphens, characters reserved on common
    filesystems and non-printable characters become underscores, and
    runs of either replacement collapse into one.

    Args:
        name: Arbitrary metadata string (artist, album, track title...)

    Returns:
        Sanitized string, safe to use as one path segment
    """
    name = name.replace('\\', '-').replace('/', '-')
    name = _HYPHEN_RUN.sub('-', name)
    name = _TRAILING_DOT.sub('_', name)
    name = _RESERVED_CHARS.sub('_', name)
    name = ''.join(c if c.isprintable() else '_' for c in name)
    name = _UNDERSCORE_RUN.sub('_', name)
    return name


def album_directory(artist, album, root=""):
    """Directory holding an album's tracks: <root>/<artist>/<album>"""
    return os.path.join(root, sanitize_name(artist), sanitize_name(album))


def build_output_path(tracknum, title, album, artist, ext, root=""):
    """
    Build the output path of one encoded track.

    Args:
        tracknum: Track number as written in the cue sheet (e.g. "01")
        title: Track title
        album: Album title
        artist: Album artist
        ext: Output file extension, without the dot
        root: Output root directory (default: relative to the working directory)

    Returns:
        Path "<root>/<artist>/<album>/<tracknum> <title>.<ext>"
    """
    filename = sanitize_name(f"{tracknum} {title}")
    return os.path.join(album_directory(artist, album, root), f"{filename}.{ext}")
