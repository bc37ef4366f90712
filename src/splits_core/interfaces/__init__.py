"""Public interface re-exports for splits_core."""

from splits_core.interfaces.inputs import PayoutInputs

__all__ = [
    "PayoutInputs",
]
