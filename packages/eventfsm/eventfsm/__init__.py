"""eventfsm - Event-driven finite state machine with entry callbacks."""
from __future__ import annotations

from eventfsm.machine import StateMachine
from eventfsm.types import ANY, Callback, Event, State

__all__ = ["StateMachine", "ANY", "Callback", "Event", "State"]
