"""Command line interface"""
import os
import sys
import argparse

from . import __version__
from .core.encoders import FORMATS
from .core.job_orchestrator import split_cue_sheet, default_log_dir
from .utils.helpers import safe_print

GREETING = f"""flacsplit {__version__}
flacsplit is free software; you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation; either version 2 of the License, or
(at your option) any later version.

flacsplit is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details."""


def _env_flag(name):
    return os.environ.get(name, "false").lower() in ("true", "1", "yes")


def parse_arguments(argv=None):
    """Parse command line arguments and environment variables"""
    # Read defaults from environment variables
    env_force = _env_flag("FLACSPLIT_FORCE")
    env_output_dir = os.environ.get("FLACSPLIT_OUTPUT_DIR", "")
    env_log_dir = os.environ.get("FLACSPLIT_LOG_DIR", default_log_dir())

    parser = argparse.ArgumentParser(
        prog="flacsplit",
        description="Split a flac CD image into tagged tracks using its cue sheet.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Tracks are written to <artist>/<album>/<tracknum> <title>.<ext>
under the output directory. Existing files are skipped unless --force is given.

Examples:
  %(prog)s /music/rips/album.cue
  %(prog)s --ogg --mp3 album.cue

Environment Variables:
  FLACSPLIT_FORMATS     - Default formats when no format flag is given (e.g. flac,ogg)
  FLACSPLIT_FORCE       - Overwrite existing output files (true/false)
  FLACSPLIT_OUTPUT_DIR  - Output root directory
  FLACSPLIT_LOG_DIR     - Directory for the command log
"""
    )

    parser.add_argument(
        "cuefile",
        help="Cue sheet of the image, including its path"
    )
    parser.add_argument(
        "-f", "--flac",
        action="store_true",
        help="Encode to flac (default) at the highest compression level"
    )
    parser.add_argument(
        "-o", "--ogg",
        action="store_true",
        help="Encode to ogg at quality 10"
    )
    parser.add_argument(
        "-m", "--mp3",
        action="store_true",
        help="Encode to mp3 at highest quality VBR"
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=GREETING,
        help="Version and copyright information"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        default=env_force,
        help=f"Overwrite existing output files (default: {env_force}, env: FLACSPLIT_FORCE)"
    )
    parser.add_argument(
        "-d", "--output-dir",
        default=env_output_dir,
        help="Output root directory (default: current directory, env: FLACSPLIT_OUTPUT_DIR)"
    )
    parser.add_argument(
        "--log-dir",
        default=env_log_dir,
        help=f"Directory for the command log (default: {env_log_dir}, env: FLACSPLIT_LOG_DIR)"
    )

    args = parser.parse_args(argv)
    args.formats = resolve_formats(args, parser)
    return args


def resolve_formats(args, parser):
    """Requested output formats, falling back to FLACSPLIT_FORMATS, then flac"""
    formats = [name for name in FORMATS if getattr(args, name)]
    if formats:
        return formats

    env_formats = os.environ.get("FLACSPLIT_FORMATS", "")
    formats = [name.strip().lower() for name in env_formats.split(",") if name.strip()]
    unknown = [name for name in formats if name not in FORMATS]
    if unknown:
        parser.error(f"FLACSPLIT_FORMATS: unsupported format(s): {', '.join(unknown)}")
    return formats or ["flac"]


def print_banner(args):
    """Print startup banner with configuration"""
    safe_print("=" * 60)
    safe_print(f"🎵 flacsplit {__version__}")
    safe_print("=" * 60)
    safe_print(f"📋 Configuration:")
    safe_print(f"   Cue sheet: {args.cuefile}")
    safe_print(f"   Output formats: {', '.join(args.formats)}")
    safe_print(f"   Output directory: {args.output_dir or os.getcwd()}")
    safe_print(f"   Overwrite existing: {args.force}")
    safe_print(f"   Log directory: {args.log_dir}")
    safe_print("=" * 60)


def main(argv=None):
    """Main entry point"""
    args = parse_arguments(argv)
    print_banner(args)

    result = split_cue_sheet(
        args.cuefile,
        formats=args.formats,
        force=args.force,
        output_root=args.output_dir,
        log_dir=args.log_dir,
    )

    if result["status"] != "success":
        sys.exit(1)
    return 0
