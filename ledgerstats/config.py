"""
Configuration module for ledger statistics.
Contains default paths, file names, and configuration parameters.
"""

from pathlib import Path

# Input database
DB_FILE_NAME = "database.txt"
DEFAULT_DATABASE = Path(DB_FILE_NAME)

# Output files - all reports go to the chosen output directory
RESULTS_DIR = Path("results")
STATS_FILE = "ledger_stats.json"
DEPTHS_FILE = "depths.csv"
EDGES_FILE = "edges.csv"
DEPTH_PLOT_FILE = "depth_distribution.png"

# Ledger layout
ROOT_ID = 1  # Genesis node, never present in the database
FIRST_TX_ID = 2  # Ids are assigned sequentially from here in file order
EXPECTED_FIELDS_NUMBER = 3
MAX_UINT64 = 2 ** 64 - 1

# Configuration
CONFIG = {
    'strict_references': True,  # Reject out-of-range parent ids; False drops them silently
    'show_progress': False,  # tqdm progress bar while parsing records
    'progress_threshold': 10_000,  # Only show the bar for databases larger than this
    'plot_dpi': 150,
    'plot_max_height': 30,  # Inches
    'plot_max_labeled_levels': 60,  # Deeper ledgers get thinned ticks and no bar labels
}
