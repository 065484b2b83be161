"""
State persistence for the Mentor Matching System.
"""

try:
    from .storage import load_state, save_state, reconcile_state
except ImportError:
    from persistence.storage import load_state, save_state, reconcile_state

__all__ = ["load_state", "save_state", "reconcile_state"]
