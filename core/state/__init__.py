"""
FOS State — Snapshot, Seed, Store

The store lives in core.state.store and is imported from there; it
wires the engines, which themselves import the snapshot from here.
"""

from core.state.seed import build_seed_state
from core.state.snapshot import AppState, replace_entry

__all__ = [
    "AppState",
    "build_seed_state",
    "replace_entry",
]
