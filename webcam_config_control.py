#!/usr/bin/env python3
"""
Webcam settings save/restore script.

Runs the CLI straight from a source checkout. When the package is
installed from src/python/, use:

    webcam-config --help

Or import directly:

    from webcam_config import WebcamConfigController
"""

import sys
from pathlib import Path

# Add the package to the path
_pkg_dir = Path(__file__).parent / "src" / "python"
if str(_pkg_dir) not in sys.path:
    sys.path.insert(0, str(_pkg_dir))

from webcam_config.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
