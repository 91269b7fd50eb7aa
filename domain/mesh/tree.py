"""
MeSH tree structure and structural queries.

The tree is a nested mapping keyed by tree number segment. Alongside it, `locations`
maps each lower-cased heading to every path it was inserted at, so lookups by heading
never walk the tree.
"""

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from domain.mesh.errors import FormatError
from domain.mesh.reference import HEADING_SEPARATOR, SEGMENT_SEPARATOR, TreeReference, parse_reference


class Node(BaseModel):
    """An element of the tree: the reference that created it plus its children."""

    model_config = ConfigDict(frozen=True)

    reference: TreeReference
    children: Mapping[str, "Node"] = Field(default_factory=dict)
    depth: int = 0  # segments preceding this node's position

    @field_serializer("children")
    def _serialize_children(self, children: Mapping[str, "Node"]) -> dict[str, Any]:
        return dict(children)


Tree: TypeAlias = Mapping[str, Node]
Locations: TypeAlias = Mapping[str, tuple[tuple[str, ...], ...]]

EMPTY_TREE: Tree = MappingProxyType({})


def freeze_tree(tree: Tree) -> Tree:
    """Return a read-only copy of `tree`, with every children mapping wrapped in a MappingProxyType."""
    return MappingProxyType(
        {
            segment: Node.model_construct(
                reference=node.reference,
                children=freeze_tree(node.children),
                depth=node.depth,
            )
            for segment, node in tree.items()
        }
    )


def tree_at(tree: Tree, location: Sequence[str]) -> Tree:
    """Return the children mapping at `location` (the tree itself for an empty location)."""
    level = tree
    for segment in location:
        node = level.get(segment)
        if node is None:
            return EMPTY_TREE
        level = node.children
    return level


def node_at(tree: Tree, location: Sequence[str]) -> Node | None:
    if not location:
        return None
    return tree_at(tree, location[:-1]).get(location[-1])


def tree_terms(tree: Tree) -> list[str]:
    """Headings of every node in `tree` and all of their descendants, depth first."""
    terms: list[str] = []
    for node in tree.values():
        terms.append(node.reference.heading)
        terms.extend(tree_terms(node.children))
    return terms


class MeshTree(BaseModel):
    """
    Hierarchical index over MeSH tree numbers.

    Built once (see `domain.mesh.builder.build_mesh_tree`), which returns the tree and
    location index as read-only mappings and tuples so a shared instance cannot be altered.
    Query methods never raise for unknown terms; they return empty results instead.
    """

    model_config = ConfigDict(frozen=True)

    tree: Tree = Field(default_factory=dict)
    locations: Locations = Field(default_factory=dict)

    @field_serializer("tree")
    def _serialize_tree(self, tree: Tree) -> dict[str, Any]:
        return dict(tree)

    @field_serializer("locations")
    def _serialize_locations(self, locations: Locations) -> dict[str, Any]:
        return dict(locations)

    @classmethod
    def build(cls, lines: Iterable[str]) -> "MeshTree":
        from domain.mesh.builder import build_mesh_tree

        return build_mesh_tree(lines)

    @property
    def size(self) -> int:
        """Number of nodes in the tree."""
        return len(tree_terms(self.tree))

    def headings(self) -> list[str]:
        return list(self.locations)

    def _locations_for(self, term: str) -> tuple[tuple[str, ...], ...]:
        return self.locations.get(term.lower(), ())

    def contains(self, term: str) -> bool:
        return term.lower() in self.locations

    def depth(self, term: str) -> int:
        """
        Depth at which the term appears, i.e. the segment count of its first tree number.

        Terms filed under several tree numbers of different lengths report only the first
        one recorded. Unknown terms have depth 0.
        """
        locations = self._locations_for(term)
        if not locations:
            return 0
        return len(locations[0])

    def explode(self, term: str) -> list[str]:
        """
        Expand a term into itself plus every heading filed beneath it.

        Results from all of the term's tree numbers are concatenated, so a heading reachable
        from two branches appears twice.
        """
        terms: list[str] = []
        for location in self._locations_for(term):
            node = node_at(self.tree, location)
            if node is None:
                continue
            terms.append(node.reference.heading)
            terms.extend(tree_terms(node.children))
        return terms

    def parents(self, term: str) -> list[str]:
        """
        Find the parent headings of a term.

        A term may have more than one parent, e.g. when it is both a symptom of a disease
        and the description of a disease. Terms in the top two levels have none.
        """
        parents: list[str] = []
        for location in self._locations_for(term):
            if len(location) <= 2:
                continue
            parent_location = tuple(location[:-1])
            for candidate in tree_at(self.tree, location[:-2]).values():
                if candidate.reference.path == parent_location:
                    parents.append(candidate.reference.heading)
        return parents

    def reference(self, term: str) -> list[TreeReference]:
        """Re-derive a TreeReference for each tree number recorded for the term."""
        references: list[TreeReference] = []
        for location in self._locations_for(term):
            line = f"{term}{HEADING_SEPARATOR}{SEGMENT_SEPARATOR.join(location)}"
            try:
                references.append(parse_reference(line))
            except FormatError as e:
                raise RuntimeError(f"recorded location for {term!r} no longer parses: {line!r}") from e
        return references
