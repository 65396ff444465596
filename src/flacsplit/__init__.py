"""
flacsplit - Split a flac CD image into individually tagged tracks

This package provides functionality to:
- Read the cue sheet accompanying a single-file flac album image
- Extract each track with flac using the cue sheet's indices
- Encode tracks to flac, ogg vorbis and/or mp3 with tags from the cue sheet
- Write them to <artist>/<album>/<tracknum> <title>.<ext>
"""

__version__ = "1.0.0"
__author__ = "flacsplit Project"
