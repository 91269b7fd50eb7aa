"""Build a MeshTree from tree file lines."""

import logging
from collections.abc import Iterable
from types import MappingProxyType

from domain.mesh.reference import TreeReference, parse_reference
from domain.mesh.tree import MeshTree, Node, freeze_tree

logger = logging.getLogger(__name__)


def insert_reference(tree: dict[str, Node], ref: TreeReference) -> bool:
    """
    Insert a reference into the tree, creating a node at the first absent segment.

    Existing nodes are never replaced: a reference whose exact path is already present
    is absorbed into the existing node.

    Returns:
        True if a new node was created, False if the path already existed
    """
    level = tree
    for depth, segment in enumerate(ref.path):
        node = level.get(segment)
        if node is None:
            level[segment] = Node(reference=ref, depth=depth)
            return True
        level = node.children
    return False


def build_mesh_tree(lines: Iterable[str]) -> MeshTree:
    """
    Build a MeshTree from an iterable of `Heading;tree.number` lines.

    This is a pure function - it does NOT perform file I/O.
    Sources are opened and read in infrastructure.io.mesh.

    Args:
        lines: Tree file lines; trailing line terminators are ignored

    Returns:
        Fully built, read-only MeshTree

    Raises:
        FormatError: On the first malformed line (no partial tree is returned)
    """
    tree: dict[str, Node] = {}
    locations: dict[str, list[tuple[str, ...]]] = {}
    n_lines = 0
    n_absorbed = 0

    for raw in lines:
        ref = parse_reference(raw.rstrip("\r\n"))
        n_lines += 1

        if not insert_reference(tree, ref):
            n_absorbed += 1
            logger.debug("Path %s already present; absorbed %r", ref.tree_number, ref.heading)

        # Every line is indexed, even when its node was absorbed
        locations.setdefault(ref.heading.lower(), []).append(ref.path)

    logger.info(
        "Built MeSH tree: %d lines, %d headings, %d absorbed duplicate paths",
        n_lines,
        len(locations),
        n_absorbed,
    )
    # Read-only from here on
    return MeshTree.model_construct(
        tree=freeze_tree(tree),
        locations=MappingProxyType({heading: tuple(paths) for heading, paths in locations.items()}),
    )
