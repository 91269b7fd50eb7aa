"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- mesh: tree reference parsing, tree construction, and structural queries
"""

from domain.mesh import FormatError, MeshTree, SourceReadError, TreeReference, build_mesh_tree

__all__ = [
    "MeshTree",
    "TreeReference",
    "build_mesh_tree",
    "FormatError",
    "SourceReadError",
]
