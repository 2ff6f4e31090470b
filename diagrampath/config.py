"""
Configuration constants for the diagram path planner.

All paths, defaults, and tunable parameters are defined here.
Values can be overridden through environment variables (or a .env file
in the working directory).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str) -> int | None:
    """Read an optional integer environment variable."""
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of diagrampath/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains sample diagrams)
DATA_DIR = PROJECT_ROOT / "data"

# Bundled example diagram used by the scripts
SAMPLE_MODEL_PATH = DATA_DIR / "sample_diagram.json"

# =============================================================================
# Model Configuration
# =============================================================================

# Type label given to models that do not carry one
DEFAULT_MODEL_KIND = "diagram"

# =============================================================================
# Search Configuration
# =============================================================================

# How edge lengths are measured:
#   manhattan - sum of |dx| + |dy| over every segment (diagonal edges included)
#   reference - like manhattan, but a diagonal two-point edge keeps length 0
#   euclidean - sum of straight-line segment lengths
EDGE_METRIC = os.environ.get("DIAGRAMPATH_EDGE_METRIC", "manhattan")

# Upper bound on A* node expansions (None = unbounded)
MAX_EXPANSIONS: int | None = _env_int("DIAGRAMPATH_MAX_EXPANSIONS")

# BFS maximum depth (None = walk everything reachable)
BFS_MAX_DEPTH: int | None = None

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Format shared by the scripts
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
