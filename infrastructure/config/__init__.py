"""
Configuration management: models, loading, and validation.

Handles:
- TreeConfig: tree file location, encoding, log file
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_tree_config
from infrastructure.config.models import TreeConfig

__all__ = [
    "TreeConfig",
    "load_tree_config",
]
