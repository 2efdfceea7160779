"""Shared type aliases for eventfsm."""
from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from eventfsm.machine import StateMachine

State = Hashable
Event = Hashable

# Reserved key: a transition source matching every state, and the callback
# slot fired after every transition.
ANY: str = "any"

Callback = Callable[["StateMachine", Any], None]
