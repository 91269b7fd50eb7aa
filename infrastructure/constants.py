from pathlib import Path

# Repo-root conventional directories/files (overrideable via meshtree.yaml / environment)
CONFIG_DIR = Path("configs")
CONFIG_FILE = CONFIG_DIR / "meshtree.yaml"
ENV_FILE = Path(".env")

# Embedded excerpt of the MeSH tree file, shipped with the package
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_TREE_FILE = DATA_DIR / "mtrees_excerpt.txt"
DEFAULT_ENCODING = "utf-8"

# Environment variable overrides
ENV_TREE_FILE = "MESHTREE_TREE_FILE"
ENV_ENCODING = "MESHTREE_ENCODING"
