"""Configuration models (Pydantic classes)."""

import codecs
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from infrastructure.constants import DEFAULT_ENCODING


class TreeConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from meshtree.yaml
    - Environment overrides applied by the configuration loader
    - Consumed by the CLI and the tree loaders
    """

    tree_file: Path | None = Field(
        default=None,
        description="MeSH tree file (`Heading;C10.668` lines). If None, the embedded excerpt is used.",
    )
    encoding: str = Field(default=DEFAULT_ENCODING, description="Text encoding of the tree file.")
    log_file: Path | None = Field(
        default=None,
        description="Optional rotating log file. Console-only logging when None.",
    )

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        value = value.strip()
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value!r}") from e
        return value

    @property
    def uses_default_tree(self) -> bool:
        return self.tree_file is None
