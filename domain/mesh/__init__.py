"""
MeSH tree indexing: parsing, construction, and structural queries.

All functions in this module are pure (no file I/O).
"""

from domain.mesh.builder import build_mesh_tree, insert_reference
from domain.mesh.errors import FormatError, MeshTreeError, SourceReadError
from domain.mesh.reference import TreeReference, parse_reference
from domain.mesh.tree import MeshTree, Node, Tree, node_at, tree_at, tree_terms

__all__ = [
    "MeshTree",
    "Node",
    "Tree",
    "TreeReference",
    "build_mesh_tree",
    "insert_reference",
    "parse_reference",
    "node_at",
    "tree_at",
    "tree_terms",
    # Errors
    "MeshTreeError",
    "FormatError",
    "SourceReadError",
]
