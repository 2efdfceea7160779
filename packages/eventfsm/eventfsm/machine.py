"""StateMachine - event-driven transition table with entry callbacks."""
from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import Any, Mapping

from eventfsm.types import ANY, Callback, Event, State

logger = logging.getLogger(__name__)


class StateMachine:
    """Finite state machine driven by named events.

    ``when`` maps an event to source/destination pairs, where the source
    ``"any"`` is a fallback for states without an exact entry. ``on``
    attaches callbacks fired on entering a state; ``any`` attaches callbacks
    fired after every transition. ``trigger`` returns ``False`` instead of
    raising when no transition matches.
    """

    def __init__(self, initial_state: State) -> None:
        if initial_state is None:
            raise ValueError("initial_state must not be None")
        if not isinstance(initial_state, Hashable):
            raise TypeError(
                f"initial_state must be hashable, got {type(initial_state).__name__}"
            )
        self._state = initial_state
        self._initial = initial_state
        self._transitions: dict[Event, dict[State, State]] = {}
        self._callbacks: dict[State, list[Callback]] = {}

    @property
    def state(self) -> State:
        return self._state

    def when(self, event: Event, transitions: Mapping[State, State]) -> None:
        """Merge source -> destination entries for ``event``. Last write wins."""
        self._transitions.setdefault(event, {}).update(transitions)

    def on(self, state: State, callback: Callback) -> None:
        """Register ``callback(machine, data)`` for entry into ``state``."""
        if not callable(callback):
            raise TypeError(
                f"callback must be callable, got {type(callback).__name__}"
            )
        self._callbacks.setdefault(state, []).append(callback)

    def any(self, callback: Callback) -> None:
        """Register a callback fired after every successful transition."""
        self.on(ANY, callback)

    def _resolve(self, event: Event) -> State | None:
        edges = self._transitions.get(event)
        if not edges:
            return None
        target = edges.get(self._state)
        if target is not None:
            return target
        return edges.get(ANY)

    def can(self, event: Event) -> bool:
        """Whether ``trigger(event)`` would transition from the current state."""
        return self._resolve(event) is not None

    def trigger(self, event: Event, data: Any = None) -> bool:
        """Fire ``event``. Returns True iff a transition occurred.

        Destination callbacks run first, then the ``"any"`` callbacks, each
        in registration order. Both lists are copied before the first call,
        so callbacks registered during dispatch apply from the next trigger.
        """
        target = self._resolve(event)
        if target is None:
            logger.debug("No transition for %r from state %r", event, self._state)
            return False

        old = self._state
        self._state = target
        logger.debug("Transition %r: %r -> %r", event, old, target)

        handlers: list[Callback] = []
        if target != ANY:
            handlers.extend(self._callbacks.get(target, ()))
        handlers.extend(self._callbacks.get(ANY, ()))
        for cb in handlers:
            cb(self, data)
        return True

    def events(self) -> list[Event]:
        """List registered event names in registration order."""
        return list(self._transitions)

    def states(self) -> list[State]:
        """List every known state label in first-seen order.

        Includes the initial state and every source and destination, but not
        the ``"any"`` wildcard source.
        """
        seen: dict[State, None] = {self._initial: None}
        for edges in self._transitions.values():
            for source, target in edges.items():
                if source != ANY:
                    seen.setdefault(source, None)
                if target is not None:
                    seen.setdefault(target, None)
        return list(seen)

    def describe(self) -> str:
        lines = [f"State: {self._state}", "Transitions:"]
        if not self._transitions:
            lines.append("  (none)")
        for event, edges in self._transitions.items():
            for source, target in edges.items():
                lines.append(f"  {event}: {source} -> {target}")
        return "\n".join(lines)
