"""Term list loading utilities."""

from pathlib import Path

import pandas as pd

from infrastructure.io.fs import ensure_exists

TEXT_SUFFIXES = {".txt", ".lst"}


def read_table(path: Path) -> pd.DataFrame:
    """
    Read tabular data file (Excel or CSV) based on file extension.

    Supported formats:
    - Excel: .xlsx, .xls
    - CSV: .csv

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in [".xlsx", ".xls"]:
        return pd.read_excel(path)
    elif suffix == ".csv":
        return pd.read_csv(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .xlsx, .xls, .csv")


def read_terms(path: Path, column: str | None = None) -> list[str]:
    """
    Read a list of MeSH terms to look up.

    Plain text files (.txt, .lst) hold one term per line; blank lines are skipped.
    Tables use `column`, or their first column when no column is named.

    Raises:
        KeyError: If `column` is not present in the table
    """
    if path.suffix.lower() in TEXT_SUFFIXES:
        ensure_exists(path, "term list")
        lines = path.read_text(encoding="utf-8").splitlines()
        return [line.strip() for line in lines if line.strip()]

    df = read_table(path)
    if column is None:
        column = str(df.columns[0])
    if column not in df.columns:
        raise KeyError(f"Column {column!r} not found in {path}. Available: {list(df.columns)}")
    return [str(v).strip() for v in df[column].dropna() if str(v).strip()]
