#!/usr/bin/env python3
"""
flacsplit - Main Entry Point

Split a flac CD image into individually tagged tracks using its cue sheet.
Run from a source checkout; installed copies use the `flacsplit` command.
"""
import os
import sys

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from flacsplit.cli import main


if __name__ == "__main__":
    main()
