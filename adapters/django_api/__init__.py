"""
FOS Django HTTP adapter.
Thin framework glue over core.state.store.
"""

from adapters.django_api.wiring import build_store, reset_store

__all__ = [
    "build_store",
    "reset_store",
]
