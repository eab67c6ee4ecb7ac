"""
Configuration settings for GameLens.

Centralized configuration for the loader, analysis and chart rendering.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_PATH = Path(os.getenv("GAMELENS_DATA_PATH", "games_combined_cleaned.csv"))
OUTPUT_ROOT = os.getenv("GAMELENS_OUTPUT_DIR", "")  # Charts are written here; "" is the working directory

# Analysis
TOP_N = 10  # Categories shown per ranking
MIN_FINAL_RATING = 0.0  # Records must be strictly above this to be analyzed

# Categorical columns ranked by average plays (column names)
CATEGORICAL_FIELDS = ["developer", "genre", "platform"]

# Metrics correlated against plays
CORRELATION_BASE = "plays"
CORRELATION_TARGETS = ["final_rating", "wishlists", "reviews"]

# Scatter charts: (x column, y column, output file name)
SCATTER_CHARTS = [
    ("final_rating", "plays", "final_rating_vs_plays.png"),
    ("wishlists", "plays", "wishlists_vs_plays.png"),
]

# Chart rendering
PLOT_WIDTH_PX = 1024
PLOT_HEIGHT_PX = 768
PLOT_DPI = 100
PLOT_MARKER_SIZE = 9
PLOT_COLOR = "blue"

# Report text
BANNER_WIDTH = 96

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "gamelens.log"
