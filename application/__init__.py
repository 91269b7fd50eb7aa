"""
Application layer: Use cases on top of a built MeSH tree.

This layer coordinates between domain logic and infrastructure,
exporting the raw structures and running batch term lookups.
"""

from application.export import dump_mesh_tree_json, locations_frame, mesh_tree_payload, write_locations_table
from application.report import build_term_report, log_term_report_summary, write_term_report

__all__ = [
    # Export
    "mesh_tree_payload",
    "dump_mesh_tree_json",
    "locations_frame",
    "write_locations_table",
    # Batch lookups
    "build_term_report",
    "write_term_report",
    "log_term_report_summary",
]
