"""Track encoders for the supported output formats"""
from dataclasses import dataclass

from ..exceptions import UnsupportedFormatError


@dataclass(frozen=True)
class TrackTags:
    artist: str
    album: str
    tracknumber: str
    title: str
    genre: str = ""
    date: str = ""

    @classmethod
    def from_metadata(cls, album, track):
        """Build the tag set of a track from cue sheet metadata"""
        return cls(
            artist=album.artist,
            album=album.album,
            tracknumber=track.number,
            title=track.title,
            genre=album.genre,
            date=album.date,
        )


class TrackEncoder:
    """Base class for encoders turning an extracted WAV into a tagged track"""

    name = None
    extension = None
    tool = None

    def build_command(self, source, tags, output, delete_input=False):
        raise NotImplementedError

    def encode(self, runner, source, tags, output, delete_input=False):
        """
        Encode one extracted track.

        Args:
            runner: ToolRunner used to run the encoder
            source: Path to the extracted WAV file
            tags: TrackTags to embed
            output: Path of the file to write
            delete_input: Ask the encoder to delete the source on success,
                for encoders that support it

        Raises:
            ToolError: If the encoder fails
        """
        runner.check(self.build_command(source, tags, output, delete_input))


class FlacEncoder(TrackEncoder):
    """Lossless, highest compression level"""

    name = "flac"
    extension = "flac"
    tool = "flac"

    def build_command(self, source, tags, output, delete_input=False):
        cmd = ["flac", "--silent", "-f", "-8"]
        if delete_input:
            cmd.append("--delete-input-file")
        cmd += [
            f"--tag=ARTIST={tags.artist}",
            f"--tag=ALBUM={tags.album}",
            f"--tag=TRACKNUMBER={tags.tracknumber}",
            f"--tag=TITLE={tags.title}",
            f"--tag=GENRE={tags.genre}",
            f"--tag=DATE={tags.date}",
            f"--output-name={output}",
            source,
        ]
        return cmd


class OggEncoder(TrackEncoder):
    """Ogg Vorbis at quality 10"""

    name = "ogg"
    extension = "ogg"
    tool = "oggenc"

    def build_command(self, source, tags, output, delete_input=False):
        return [
            "oggenc", "--quiet", "--quality=10",
            f"--artist={tags.artist}",
            f"--album={tags.album}",
            f"--tracknum={tags.tracknumber}",
            f"--title={tags.title}",
            f"--genre={tags.genre}",
            f"--date={tags.date}",
            f"--output={output}",
            source,
        ]


class Mp3Encoder(TrackEncoder):
    """MP3 at the highest quality VBR setting"""

    name = "mp3"
    extension = "mp3"
    tool = "lame"

    def build_command(self, source, tags, output, delete_input=False):
        return [
            "lame", "-V", "0",
            "--quiet", "--noreplaygain", "--ignore-tag-errors",
            "--ta", tags.artist,
            "--tl", tags.album,
            "--tn", tags.tracknumber,
            "--tt", tags.title,
            "--tg", tags.genre,
            "--ty", tags.date,
            source, output,
        ]


# Lossy encoders first: flac may delete the shared WAV, so it always runs last
ENCODERS = {
    "ogg": OggEncoder(),
    "mp3": Mp3Encoder(),
    "flac": FlacEncoder(),
}

FORMATS = ("flac", "ogg", "mp3")


def encoders_for(formats):
    """Encoders for the requested formats, in the order they must run"""
    unknown = set(formats) - set(ENCODERS)
    if unknown:
        raise UnsupportedFormatError(f"unsupported output format(s): {', '.join(sorted(unknown))}")
    return [encoder for name, encoder in ENCODERS.items() if name in formats]
