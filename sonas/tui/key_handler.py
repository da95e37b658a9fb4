"""Turns key presses into application events using a key map."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from .event import Dispatch, EventFlow, EventQueue, Key, Tick
from .key_chord import KeyChord
from .key_map import KeyMap, KeyMapMatch

E = TypeVar("E")

DEFAULT_TIMEOUT_LEN = 1.0


class KeyHandler(Generic[E]):
    """Tracks the key sequence being typed and fires the events it completes.

    When a typed sequence is both complete and the start of a longer one, its
    events fire only once no key has been pressed for ``timeoutlen`` seconds.
    """

    def __init__(self, key_map: KeyMap[E], timeoutlen: float = DEFAULT_TIMEOUT_LEN) -> None:
        self.key_map = key_map
        self.key_map_match = KeyMapMatch()
        self.timeout = 0.0
        self.timeoutlen = timeoutlen

    def _fire_full_matches(self, queue: EventQueue[E]) -> None:
        for mapping in self.key_map_match.full_matches(self.key_map):
            queue.push(Dispatch.input(), mapping.app_event)
        self.key_map_match = KeyMapMatch()

    def update(self, event: Any, queue: EventQueue[E]) -> EventFlow:
        """Handle one event, pushing triggered application events onto ``queue``."""
        if isinstance(event, Tick):
            if self.key_map_match.matches(self.key_map):
                self.timeout += event.delta
            if self.timeout > self.timeoutlen:
                self._fire_full_matches(queue)
                self.timeout = 0.0
            return EventFlow.PROPAGATE

        if isinstance(event, Key):
            self.timeout = 0.0
            chord = KeyChord.from_event(event.event)
            self.key_map_match = self.key_map.match_key(chord, self.key_map_match)

            if not self.key_map_match.matches(self.key_map):
                self.key_map_match = KeyMapMatch()
                return EventFlow.PROPAGATE
            if not self.key_map_match.partial_matches(self.key_map):
                self._fire_full_matches(queue)
            return EventFlow.CONSUME

        return EventFlow.PROPAGATE