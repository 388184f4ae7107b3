"""Core composition logic for Column Press."""

from column_press.core.composer import ComposeResult, CompositionError, DocumentComposer

__all__ = [
    "ComposeResult",
    "CompositionError",
    "DocumentComposer",
]
