"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- MeSH tree sources (files, streams, embedded excerpt)
- Term lists (text, CSV, Excel)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import TreeConfig, load_tree_config
from infrastructure.io import load_default_mesh_tree, load_mesh_tree, mesh_tree_from_reader

__all__ = [
    # Tree loading (most commonly used)
    "load_mesh_tree",
    "load_default_mesh_tree",
    "mesh_tree_from_reader",
    # Configuration
    "load_tree_config",
    "TreeConfig",
]
