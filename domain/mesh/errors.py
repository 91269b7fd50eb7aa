"""Error types raised while building a MeSH tree."""


class MeshTreeError(Exception):
    """Base class for tree loading errors."""


class FormatError(MeshTreeError, ValueError):
    """A line could not be split into a heading and a tree number."""

    def __init__(self, line: str) -> None:
        super().__init__(f"malformed tree reference {line!r}")
        self.line = line


class SourceReadError(MeshTreeError):
    """The underlying line source could not be opened or read."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"failed to read tree source {source}: {reason}")
        self.source = source
