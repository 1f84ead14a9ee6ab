#!/usr/bin/env python
"""
STL Volume - Runner Script

Prints the triangle count and volume of each STL file, and the total.

Usage:
    python measure_volume.py part.stl
    python measure_volume.py a.stl b.stl c.stl
"""

from pathlib import Path
import sys

# Make the stl_volume package importable without installing it
project_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_dir))

from stl_volume.runner import main


if __name__ == "__main__":
    sys.exit(main())
