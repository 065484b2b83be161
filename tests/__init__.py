import os

# Headless plotting for the visualization tests
os.environ.setdefault("MPLBACKEND", "Agg")
