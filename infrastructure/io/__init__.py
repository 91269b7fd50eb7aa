"""I/O utilities: filesystem checks, tabular term lists, and MeSH tree loading."""

from infrastructure.io.datasets import read_table, read_terms
from infrastructure.io.fs import ensure_exists
from infrastructure.io.mesh import load_default_mesh_tree, load_mesh_tree, mesh_tree_from_reader

__all__ = [
    "ensure_exists",
    "read_table",
    "read_terms",
    "load_mesh_tree",
    "load_default_mesh_tree",
    "mesh_tree_from_reader",
]
