"""Interaction states for pointer-driven piece dragging."""

from enum import Enum, auto


class InteractionState(Enum):
    """Controller states."""

    IDLE = auto()
    DRAGGING = auto()
