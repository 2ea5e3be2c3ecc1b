"""Configuration constants, paths, and logging setup."""

import os
import math
import pathlib
import logging

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Configure base paths
BASE_DIR = pathlib.Path(__file__).parent.parent.absolute()
OUTPUT_DIR = BASE_DIR / "output"

# ── Tessellation ─────────────────────────────────────────────────────
# Chordal tolerance (metres) used when the caller does not pass one
DEFAULT_TOLERANCE = float(os.environ.get("ROADOBJECTS_TOLERANCE", "0.1"))

# Angular step for cylinders that are thin relative to the tolerance
CYLINDER_FALLBACK_ANGLE = math.pi / 6

# ── Placement ────────────────────────────────────────────────────────
DEFAULT_REPEAT_DISTANCE = 1.0  # metres between samples when a repeat omits it

# ── Export ───────────────────────────────────────────────────────────
EXPORT_FORMATS = ('stl', 'ply', 'glb', 'obj')

# Configure logging
LOG_LEVEL = os.environ.get("ROADOBJECTS_LOG_LEVEL", "INFO").strip().upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO),
                    format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)
