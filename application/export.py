"""Export the raw tree and location index for external tooling."""

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from application.constants import DEPTH_COL, HEADING_COL, LOCATIONS_KEY, META_KEY, TREE_KEY, TREE_NUMBER_COL
from domain.mesh import MeshTree
from infrastructure.observability import get_log_context

logger = logging.getLogger(__name__)


def mesh_tree_payload(mesh: MeshTree) -> dict[str, Any]:
    """JSON-compatible view of the tree and the heading -> tree numbers index."""
    data = mesh.model_dump(mode="json")
    return {TREE_KEY: data["tree"], LOCATIONS_KEY: data["locations"]}


def dump_mesh_tree_json(mesh: MeshTree, path: Path, *, indent: int | None = 4) -> Path:
    """Write the full tree structure to `path` as JSON, with source/command metadata under "meta"."""
    payload = mesh_tree_payload(mesh)
    payload[META_KEY] = {
        **get_log_context(),
        "n_headings": len(mesh.locations),
        "n_nodes": mesh.size,
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=indent)
    logger.info("Saved MeSH tree JSON to %s", path)
    return path


def locations_frame(mesh: MeshTree) -> pd.DataFrame:
    """
    Flatten the location index into one row per (heading, tree number).

    Headings are the lower-cased index keys; rows keep insertion order.
    """
    rows = [
        {
            HEADING_COL: heading,
            TREE_NUMBER_COL: ".".join(location),
            DEPTH_COL: len(location),
        }
        for heading, locations in mesh.locations.items()
        for location in locations
    ]
    return pd.DataFrame(rows, columns=[HEADING_COL, TREE_NUMBER_COL, DEPTH_COL])


def write_locations_table(mesh: MeshTree, path: Path) -> Path:
    df = locations_frame(mesh)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logger.info("Saved locations table (%d rows) to %s", len(df), path)
    return path
