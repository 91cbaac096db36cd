"""Interaction state machine and session wiring."""

from pieceboard.app.controller import DragState, InteractionController
from pieceboard.app.event_bus import EventBus, Subscription
from pieceboard.app.events import (
    MoveCompleted,
    PointerDown,
    PointerLeft,
    PointerMoved,
    PointerReleased,
)
from pieceboard.app.session import BoardSession
from pieceboard.app.state_machine import InteractionState

__all__ = [
    "BoardSession",
    "DragState",
    "EventBus",
    "InteractionController",
    "InteractionState",
    "MoveCompleted",
    "PointerDown",
    "PointerLeft",
    "PointerMoved",
    "PointerReleased",
    "Subscription",
]
