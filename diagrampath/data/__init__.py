"""
Data module.

Reads and writes the JSON interchange form of diagram models.

Usage:
    from diagrampath.data import load_model

    model = load_model("data/sample_diagram.json")
"""

from diagrampath.data.codec import (
    dumps,
    load_model,
    loads,
    model_from_dict,
    model_to_dict,
)

__all__ = ["dumps", "loads", "load_model", "model_from_dict", "model_to_dict"]
