#!/usr/bin/env python3
"""
Validate a diagram model file.

Checks that the file decodes, that every edge has both a source and a
target node, and that the model has start and goal candidates.

Usage:
    python scripts/validate_model.py
    python scripts/validate_model.py my_diagram.json
"""

import logging
import sys
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from diagrampath.config import SAMPLE_MODEL_PATH  # noqa: E402 - must be after sys.path modification
from diagrampath.data import load_model  # noqa: E402
from diagrampath.errors import DiagramPathError  # noqa: E402
from diagrampath.graph import (  # noqa: E402
    find_goal_node,
    find_start_node,
    goal_candidates,
    start_candidates,
)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else SAMPLE_MODEL_PATH

    print(f"\n=== Loading {path} ===\n")
    try:
        model = load_model(path)
    except (OSError, DiagramPathError) as e:
        print(f"✗ {e}")
        return 1
    print(f"✓ {model.kind}: {len(model)} nodes, {len(model.edges())} edges")

    print("\n=== Topology ===\n")
    all_valid = True
    try:
        model.validate()
        print("✓ every edge has a source and a target")
    except DiagramPathError as e:
        print(f"✗ {e}")
        all_valid = False

    print("\n=== Endpoints ===\n")
    for role, candidates, pick in (
        ("start", start_candidates(model), find_start_node),
        ("goal", goal_candidates(model), find_goal_node),
    ):
        if not candidates:
            print(f"✗ no {role} candidate")
            all_valid = False
            continue
        chosen = pick(model)
        print(f"✓ {role}: {chosen.kind} at ({chosen.location.x:g}, {chosen.location.y:g})")
        for node in candidates:
            print(f"    candidate {node.kind}: origo distance {node.origo_distance:.1f}")

    print("\n" + ("All checks passed" if all_valid else "Some checks failed"))
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
