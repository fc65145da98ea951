"""
FOS Context — Public API
=========================
Identity of the actor performing an operation.
"""

from core.context.actor_context import ActorContext

__all__ = [
    "ActorContext",
]
