"""Application-level constants."""

# Keys for the JSON dump
TREE_KEY = "tree"
LOCATIONS_KEY = "locations"
META_KEY = "meta"

# Column names for the locations table
HEADING_COL = "heading"
TREE_NUMBER_COL = "tree_number"
DEPTH_COL = "depth"

# Column names for the term report
TERM_COL = "term"
FOUND_COL = "found"
N_LOCATIONS_COL = "n_locations"
TREE_NUMBERS_COL = "tree_numbers"
PARENTS_COL = "parents"
N_EXPLODED_COL = "n_exploded"

# Multi-valued cells in CSV output are joined with this separator
LIST_SEPARATOR = "|"
