"""Load MeSH trees from files, streams, and the embedded excerpt."""

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from pathlib import Path

from domain.mesh import MeshTree, SourceReadError, build_mesh_tree
from infrastructure.constants import DEFAULT_ENCODING, DEFAULT_TREE_FILE

logger = logging.getLogger(__name__)


def _checked_lines(reader: Iterable[str], source: str) -> Iterator[str]:
    """Yield lines from reader, surfacing read failures as SourceReadError."""
    it = iter(reader)
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(source, str(e)) from e
        yield line


def mesh_tree_from_reader(reader: Iterable[str], source: str = "<reader>") -> MeshTree:
    """
    Build a MeshTree from any text stream or iterable of lines.

    Args:
        reader: Open text file, io.StringIO, list of lines, ...
        source: Name used in error messages and logs

    Raises:
        FormatError: On the first malformed line
        SourceReadError: If reading from the stream fails
    """
    return build_mesh_tree(_checked_lines(reader, source))


def load_mesh_tree(path: Path, encoding: str = DEFAULT_ENCODING) -> MeshTree:
    """
    Load a MeSH tree file (e.g. mtrees2019.bin).

    Raises:
        FormatError: On the first malformed line
        SourceReadError: If the file cannot be opened or read
    """
    logger.info("Loading MeSH tree from %s...", path)
    try:
        f = path.open("r", encoding=encoding, newline="")
    except OSError as e:
        raise SourceReadError(str(path), str(e)) from e

    with f:
        mesh = mesh_tree_from_reader(f, source=str(path))

    logger.info("MeSH tree loaded: %d headings, %d nodes", len(mesh.locations), mesh.size)
    return mesh


@lru_cache(maxsize=1)
def load_default_mesh_tree() -> MeshTree:
    """Load the embedded MeSH tree excerpt once per process."""
    return load_mesh_tree(DEFAULT_TREE_FILE)
