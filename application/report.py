"""Batch term lookups against a built MeSH tree."""

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from application.constants import (
    DEPTH_COL,
    FOUND_COL,
    LIST_SEPARATOR,
    N_EXPLODED_COL,
    N_LOCATIONS_COL,
    PARENTS_COL,
    TERM_COL,
    TREE_NUMBERS_COL,
)
from domain.mesh import MeshTree

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [TERM_COL, FOUND_COL, DEPTH_COL, N_LOCATIONS_COL, TREE_NUMBERS_COL, PARENTS_COL, N_EXPLODED_COL]


def build_term_report(mesh: MeshTree, terms: Iterable[str]) -> pd.DataFrame:
    """
    Run every structural query for each term and collect the results in a DataFrame.

    Unknown terms produce a row with found=False, depth 0 and empty lists.
    """
    rows = []
    for term in terms:
        refs = mesh.reference(term)
        rows.append(
            {
                TERM_COL: term,
                FOUND_COL: mesh.contains(term),
                DEPTH_COL: mesh.depth(term),
                N_LOCATIONS_COL: len(refs),
                TREE_NUMBERS_COL: [ref.tree_number for ref in refs],
                PARENTS_COL: mesh.parents(term),
                N_EXPLODED_COL: len(mesh.explode(term)),
            }
        )
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def write_term_report(df: pd.DataFrame, path: Path) -> Path:
    """Write the report as CSV; list cells are joined with LIST_SEPARATOR."""
    out = df.copy()
    for col in (TREE_NUMBERS_COL, PARENTS_COL):
        out[col] = out[col].map(LIST_SEPARATOR.join)
    path.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(path, index=False)
    logger.info("Saved term report to %s", path)
    return path


def log_term_report_summary(df: pd.DataFrame) -> None:
    """Log a human-readable summary of a term report."""
    n_terms = len(df)
    n_found = int(df[FOUND_COL].sum()) if n_terms else 0

    logger.info("=== Term report ===")
    logger.info("Terms looked up: %d (found=%d, missing=%d)", n_terms, n_found, n_terms - n_found)
    if n_found:
        found = df[df[FOUND_COL]]
        logger.info("Mean depth of found terms: %.2f", found[DEPTH_COL].mean())
        logger.info("Terms with multiple tree numbers: %d", int((found[N_LOCATIONS_COL] > 1).sum()))
        logger.debug("Report:\n%s", found)
    missing = df.loc[~df[FOUND_COL], TERM_COL].tolist() if n_terms else []
    if missing:
        logger.warning("Terms not in the tree: %s", missing)
