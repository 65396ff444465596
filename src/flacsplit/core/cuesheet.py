"""Cue sheet scanning

A cue sheet is read as a flat stream of lines. Two passes are made over it:
one to find the audio image named by the FILE directive, and one that walks
the album and track directives and produces a sequence of events.
"""
import re
from dataclasses import dataclass, replace
from typing import Optional

import cueparser

from ..exceptions import MissingSourceFileError
from ..utils.encoding import read_cue_text

FILE_PATTERN = re.compile(r'^\s*FILE\s+(?:"([^"]+)"|(\S+))', re.IGNORECASE)
QUOTED_PATTERN = re.compile(r'"(.*)"')


@dataclass(frozen=True)
class AlbumMetadata:
    artist: str = ""
    album: str = ""
    genre: str = ""
    date: str = ""


@dataclass(frozen=True)
class TrackRecord:
    """One track of the cue sheet.

    ``number`` is the track number as written after TRACK (e.g. "01"),
    ``ordinal`` the 1-based position of the track in the sheet, and
    ``last`` marks the final track.
    """
    number: str
    title: str
    ordinal: int
    last: bool = False


@dataclass(frozen=True)
class AlbumFound:
    album: AlbumMetadata


@dataclass(frozen=True)
class TrackFound:
    album: AlbumMetadata
    track: TrackRecord


@dataclass
class ParserState:
    artist: Optional[str] = None
    album: Optional[str] = None
    genre: str = ""
    date: str = ""
    tracknum: Optional[str] = None
    title: Optional[str] = None
    count: int = 0

    def snapshot(self):
        return AlbumMetadata(
            artist=self.artist or "",
            album=self.album or "",
            genre=self.genre,
            date=self.date,
        )


def _argument(line):
    """Return the quoted argument of a directive, or the bare remainder."""
    match = QUOTED_PATTERN.search(line)
    if match:
        return match.group(1)
    parts = line.split(None, 1)
    return parts[1].strip() if len(parts) > 1 else ""


def _scan_remark(state, line):
    tokens = line.split()
    if len(tokens) < 2:
        return
    if tokens[1] == "GENRE":
        state.genre = " ".join(tokens[2:]).replace('"', '')
    elif tokens[1] == "DATE":
        state.date = tokens[2] if len(tokens) > 2 else ""


def scan_line(state, line):
    """
    Advance the parser state by one cue sheet line.

    Args:
        state: ParserState to update in place
        line: One line of the cue sheet, without line terminator

    Returns:
        AlbumFound when the album title has just been read, TrackFound
        when a track number and title are both known, None otherwise
    """
    stripped = line.strip()

    if stripped.startswith("REM"):
        _scan_remark(state, stripped)
        return None

    if not state.album:
        # Album level directives are only recognised at the start of a line
        if line.startswith("PERFORMER"):
            state.artist = _argument(line)
        elif line.startswith("TITLE"):
            state.album = _argument(line)
            if state.album:
                return AlbumFound(state.snapshot())
        return None

    if stripped.startswith("TRACK"):
        tokens = stripped.split()
        state.tracknum = tokens[1] if len(tokens) > 1 else ""
    elif stripped.startswith("TITLE"):
        state.title = _argument(stripped)

    if state.tracknum is not None and state.title is not None:
        state.count += 1
        track = TrackRecord(number=state.tracknum, title=state.title, ordinal=state.count)
        state.title = None
        return TrackFound(state.snapshot(), track)

    return None


class CueSheetParser:
    """Scanner over the lines of one cue sheet"""

    def __init__(self, lines):
        self.lines = [line.rstrip("\r\n") for line in lines]

    @classmethod
    def from_file(cls, cue_path, log_func):
        """
        Load a cue sheet from disk.

        Args:
            cue_path: Path to the cue sheet
            log_func: Function to call for logging messages

        Raises:
            CueSheetError: If the file cannot be read
        """
        cue_sheet = cueparser.CueSheet()
        cue_sheet.setOutputFormat('', '')
        cue_sheet.setData(read_cue_text(cue_path, log_func))
        return cls(cue_sheet.data)

    def source_file(self):
        """
        Find the audio image named by the FILE directive.

        Returns:
            File name as written in the cue sheet

        Raises:
            MissingSourceFileError: If the cue sheet has no FILE directive
        """
        for line in self.lines:
            match = FILE_PATTERN.match(line)
            if match:
                return match.group(1) or match.group(2)
        raise MissingSourceFileError("No FILE directive found in cue sheet")

    def events(self):
        """
        Walk the cue sheet and yield AlbumFound/TrackFound events in order.

        Each call starts a fresh scan. Track events are held back by one so
        the final track can be flagged as last.
        """
        state = ParserState()
        pending = None
        for line in self.lines:
            event = scan_line(state, line)
            if event is None:
                continue
            if isinstance(event, TrackFound):
                if pending is not None:
                    yield pending
                pending = event
            else:
                yield event
        if pending is not None:
            yield replace(pending, track=replace(pending.track, last=True))

    def tracks(self):
        """List of (AlbumMetadata, TrackRecord) pairs in cue sheet order"""
        return [(e.album, e.track) for e in self.events() if isinstance(e, TrackFound)]
