"""Cue sheet encoding detection and decoding"""
import chardet

from ..exceptions import CueSheetError


def read_cue_text(cue_path, log_func):
    """
    Read a cue sheet and decode it to text, whatever encoding it was written in.

    Rippers such as EAC often write cue sheets in the system codepage rather
    than UTF-8, so the encoding is detected before decoding. If detection
    fails the bytes are decoded as UTF-8 with replacement characters.

    Args:
        cue_path: Path to the cue sheet file
        log_func: Function to call for logging messages

    Returns:
        Decoded cue sheet text

    Raises:
        CueSheetError: If the file cannot be read
    """
    try:
        with open(cue_path, 'rb') as f:
            raw_data = f.read()
    except OSError as e:
        raise CueSheetError(f"Couldn't open {cue_path} for reading: {e}") from e

    # A BOM is authoritative, chardet reports it as plain UTF-8
    if raw_data.startswith(b'\xef\xbb\xbf'):
        return raw_data.decode('utf-8-sig')

    result = chardet.detect(raw_data)
    detected_encoding = result.get('encoding') if result else None
    confidence = (result.get('confidence') or 0) if result else 0

    if not detected_encoding:
        if raw_data:
            log_func("⚠️ Could not detect cue sheet encoding, assuming UTF-8")
        return raw_data.decode('utf-8', errors='replace')

    if detected_encoding.upper() in ('UTF-8', 'ASCII'):
        return raw_data.decode('utf-8', errors='replace')

    log_func(f"📝 Cue sheet encoding detected: {detected_encoding} (confidence: {confidence:.2%})")
    try:
        return raw_data.decode(detected_encoding)
    except (LookupError, UnicodeDecodeError) as e:
        log_func(f"⚠️ Failed to decode cue sheet as {detected_encoding}: {e}")
        log_func("ℹ️ Falling back to UTF-8 with replacement characters")
        return raw_data.decode('utf-8', errors='replace')
