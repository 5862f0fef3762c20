"""
Global constants used throughout the project
"""

OUTPUT_DIR = "output"
DOT_FILE = f"{OUTPUT_DIR}/graph.dot"
PNG_FILE = f"{OUTPUT_DIR}/graph.png"

DATA = "data"

LOG_FORMAT = "%(levelname)s | %(message)s"

# Demo party: id -> ids that person knows.
# 42 is not at the party, 5 claims to know itself.
DEFAULT_PARTY: tuple[tuple[int, tuple[int, ...]], ...] = (
    (1, (1, 2, 3)),
    (2, (1, 3)),
    (3, (1, 2)),
    (4, (1, 2, 3, 42)),
    (5, (1, 2, 3, 4, 5)),
    (6, (1, 2, 3, 7)),
    (7, (1, 2, 3, 5, 6)),
)

HIGHLIGHT_COLOR = "gold"
