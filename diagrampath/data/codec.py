"""
JSON interchange form of diagram models.

Format:
    Model: {"type": str, "nodes": [Node, ...]}
    Node:  {"type": str, "outEdges": [Edge, ...], "inEdges": [Edge, ...],
            "location": [x, y], "size": [width, height]}
    Edge:  {"type": str, "path": [[x, y], ...]}

Edges are written by value inside both of their nodes. When decoding, an
out edge and an in edge with the same type and path are the same edge.

Usage:
    from diagrampath.data import load_model, dumps

    model = load_model("data/sample_diagram.json")
    text = dumps(model, indent=2)
"""

from __future__ import annotations

import json
import logging
from numbers import Real
from pathlib import Path
from typing import Any

from diagrampath.config import DEFAULT_MODEL_KIND
from diagrampath.errors import InvalidTopologyError, ModelFormatError
from diagrampath.graph.geometry import Point, Size
from diagrampath.graph.model import Edge, Model, Node

logger = logging.getLogger(__name__)

# (type, ((x, y), ...)) identifies an edge inside a document
EdgeKey = tuple[str, tuple[tuple[float, float], ...]]


# =============================================================================
# Encoding
# =============================================================================


def edge_to_dict(edge: Edge) -> dict[str, Any]:
    return {"type": edge.kind, "path": [[p.x, p.y] for p in edge.path]}


def node_to_dict(node: Node) -> dict[str, Any]:
    return {
        "type": node.kind,
        "outEdges": [edge_to_dict(e) for e in node.out_edges],
        "inEdges": [edge_to_dict(e) for e in node.in_edges],
        "location": [node.location.x, node.location.y],
        "size": [node.size.width, node.size.height],
    }


def model_to_dict(model: Model) -> dict[str, Any]:
    return {"type": model.kind, "nodes": [node_to_dict(n) for n in model.nodes]}


def dumps(model: Model, indent: int | None = None) -> str:
    """Serialize a model to its JSON text form."""
    return json.dumps(model_to_dict(model), indent=indent)


# =============================================================================
# Decoding
# =============================================================================


def _pair(value: Any, where: str) -> tuple[float, float]:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 2
        or not all(isinstance(v, Real) and not isinstance(v, bool) for v in value)
    ):
        raise ModelFormatError(f"{where}: expected [number, number], got {value!r}")
    return value[0], value[1]


def _field(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data:
        raise ModelFormatError(f"{where}: missing '{key}'")
    return data[key]


def _edge_key(data: Any, where: str) -> EdgeKey:
    if not isinstance(data, dict):
        raise ModelFormatError(f"{where}: expected an object, got {type(data).__name__}")
    kind = _field(data, "type", where)
    path = _field(data, "path", where)
    if not isinstance(path, list):
        raise ModelFormatError(f"{where}.path: expected a list")
    points = tuple(_pair(p, f"{where}.path[{i}]") for i, p in enumerate(path))
    if len(points) < 2:
        raise ModelFormatError(f"{where}.path: needs at least two points")
    return str(kind), points


def _edge_keys(node: dict[str, Any], key: str, where: str) -> list[EdgeKey]:
    edges = node.get(key, [])
    if not isinstance(edges, list):
        raise ModelFormatError(f"{where}.{key}: expected a list")
    return [_edge_key(e, f"{where}.{key}[{j}]") for j, e in enumerate(edges)]


def _check_unique(keys_by_node: list[list[EdgeKey]], label: str) -> None:
    owners: dict[EdgeKey, int] = {}
    for i, keys in enumerate(keys_by_node):
        for key in keys:
            if key in owners:
                raise ModelFormatError(
                    f"nodes[{i}]: {label} edge {key[0]!r} with path {list(key[1])} "
                    f"also appears in nodes[{owners[key]}]; edges cannot be told apart"
                )
            owners[key] = i


def model_from_dict(data: Any) -> Model:
    """
    Build a model from its decoded JSON form.

    Raises:
        ModelFormatError: If the document is malformed or edges are ambiguous
    """
    if not isinstance(data, dict):
        raise ModelFormatError(f"Model: expected an object, got {type(data).__name__}")
    nodes_data = _field(data, "nodes", "Model")
    if not isinstance(nodes_data, list):
        raise ModelFormatError("Model.nodes: expected a list")

    parsed = []
    for i, node in enumerate(nodes_data):
        where = f"nodes[{i}]"
        if not isinstance(node, dict):
            raise ModelFormatError(f"{where}: expected an object")
        parsed.append(
            (
                str(_field(node, "type", where)),
                _pair(_field(node, "location", where), f"{where}.location"),
                _pair(_field(node, "size", where), f"{where}.size"),
                _edge_keys(node, "outEdges", where),
                _edge_keys(node, "inEdges", where),
            )
        )

    _check_unique([p[3] for p in parsed], "out")
    _check_unique([p[4] for p in parsed], "in")

    edges: dict[EdgeKey, Edge] = {}

    def edge_for(key: EdgeKey) -> Edge:
        if key not in edges:
            edges[key] = Edge(key[0], (Point(x, y) for x, y in key[1]))
        return edges[key]

    nodes = [
        Node(
            kind,
            Point(*location),
            Size(*size),
            out_edges=[edge_for(k) for k in out_keys],
            in_edges=[edge_for(k) for k in in_keys],
        )
        for kind, location, size, out_keys, in_keys in parsed
    ]

    try:
        return Model(nodes, kind=str(data.get("type", DEFAULT_MODEL_KIND)))
    except InvalidTopologyError as e:
        raise ModelFormatError(str(e)) from e


def loads(text: str) -> Model:
    """Parse a model from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ModelFormatError(f"Invalid JSON: {e}") from e
    return model_from_dict(data)


def load_model(path: str | Path) -> Model:
    """Load a model from a JSON file."""
    path = Path(path)
    logger.info(f"Loading model from {path}...")
    model = loads(path.read_text(encoding="utf-8"))
    logger.info(f"Loaded {model!r}")
    return model
