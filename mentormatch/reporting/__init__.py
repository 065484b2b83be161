"""
Reporting for the Mentor Matching System.
"""

try:
    from .summary import summarize_allocation
    from .visualization import build_allocation_graph, show_allocation_graph
except ImportError:
    from reporting.summary import summarize_allocation
    from reporting.visualization import build_allocation_graph, show_allocation_graph

__all__ = ["summarize_allocation", "build_allocation_graph", "show_allocation_graph"]
