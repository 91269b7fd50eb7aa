"""Parse `Heading;C10.668.829` lines into tree references."""

from pydantic import BaseModel, ConfigDict, Field

from domain.mesh.errors import FormatError

HEADING_SEPARATOR = ";"
SEGMENT_SEPARATOR = "."


class TreeReference(BaseModel):
    """A MeSH heading together with one location in the tree."""

    model_config = ConfigDict(frozen=True)

    heading: str = Field(..., description="Display form of the heading (case preserved).")
    path: tuple[str, ...] = Field(..., min_length=1, description="Tree number segments, root first.")

    @property
    def tree_number(self) -> str:
        return SEGMENT_SEPARATOR.join(self.path)

    def __str__(self) -> str:
        return f"{self.heading}{HEADING_SEPARATOR}{self.tree_number}"


def parse_reference(line: str) -> TreeReference:
    """
    Parse a single tree file line.

    Examples:
        >>> parse_reference("Neuralgia;C10.668.829.600").path
        ('C10', '668', '829', '600')

    Args:
        line: Raw line, without its line terminator

    Returns:
        TreeReference with the heading untouched and the path split on '.'

    Raises:
        FormatError: If the line does not split into exactly two parts on ';'
    """
    parts = line.split(HEADING_SEPARATOR)
    if len(parts) != 2:
        raise FormatError(line)

    heading, tree_number = parts
    return TreeReference(heading=heading, path=tuple(tree_number.split(SEGMENT_SEPARATOR)))
