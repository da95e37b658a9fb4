"""Sorted lookup tables from key sequences to application events."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, overload

from .key_chord import KeyChord
from .key_sequence import KeySequence

E = TypeVar("E")

MAP_IDX_MAX = 0xFFFF


@dataclass(frozen=True)
class KeyMapping(Generic[E]):
    """A complete key sequence and the event it triggers."""

    key_sequence: KeySequence
    app_event: E


class KeyMap(Generic[E]):
    """Key mappings kept sorted by key sequence, for prefix matching.

    Because shorter sequences sort before longer ones that start with them,
    every run of mappings sharing a prefix is contiguous, with the exact
    matches of that prefix at its front.
    """

    def __init__(self, mappings: Iterable[KeyMapping[E]] = ()) -> None:
        self._mappings: tuple[KeyMapping[E], ...] = tuple(
            sorted(mappings, key=lambda mapping: mapping.key_sequence)
        )

    @property
    def mappings(self) -> tuple[KeyMapping[E], ...]:
        """All mappings in sorted order."""
        return self._mappings

    def __len__(self) -> int:
        return len(self._mappings)

    def __iter__(self) -> Iterator[KeyMapping[E]]:
        return iter(self._mappings)

    @overload
    def __getitem__(self, index: int) -> KeyMapping[E]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[KeyMapping[E], ...]: ...

    def __getitem__(self, index):
        return self._mappings[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, KeyMap):
            return NotImplemented
        return self._mappings == other._mappings

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._mappings)!r})"

    def _chord_at(self, index: int, key_idx: int) -> Optional[KeyChord]:
        sequence = self._mappings[index].key_sequence
        return sequence[key_idx] if key_idx < len(sequence) else None

    def match_key(
        self, key_chord: KeyChord, prev_match: Optional[KeyMapMatch] = None
    ) -> KeyMapMatch:
        """Narrow ``prev_match`` by the next chord pressed in a sequence.

        Start a sequence with a blank ``KeyMapMatch()`` (the default) and feed
        each returned match back in for the following chord. A match carries
        no reference to the map that made it; using it with another map gives
        meaningless, but never failing, results.
        """
        prev = KeyMapMatch() if prev_match is None else prev_match
        size = len(self)
        start = prev.match_start
        end = min(prev.match_end, size)
        key_idx = prev.next_key_idx

        found: Optional[int] = None
        while True:
            middle = (start + end) // 2
            if middle >= size:
                break
            chord = self._chord_at(middle, key_idx)
            if chord == key_chord:
                found = middle
                break
            if chord is not None and chord > key_chord:
                end = middle
            else:
                start = middle + 1
            if start >= end:
                break

        full_end = 0
        if found is not None:
            for idx in range(found - 1, start - 1, -1):
                if self._chord_at(idx, key_idx) != key_chord:
                    start = idx + 1
                    break
            for idx in range(found + 1, end):
                if self._chord_at(idx, key_idx) != key_chord:
                    end = idx
                    break

            # shorter sequences sort first, so the full matches lead the range
            full_end = end
            for idx in range(start, end):
                if len(self._mappings[idx].key_sequence) > key_idx + 1:
                    full_end = idx
                    break

        return KeyMapMatch(
            match_start=start,
            match_end=end,
            full_match_end=full_end,
            next_key_idx=key_idx + 1,
        )


@dataclass(frozen=True)
class KeyMapMatch:
    """The range of a key map still matching the chords pressed so far."""

    match_start: int = 0
    match_end: int = MAP_IDX_MAX
    full_match_end: int = 0
    next_key_idx: int = 0

    def matches(self, key_map: KeyMap[E]) -> list[KeyMapping[E]]:
        """Return every mapping whose sequence starts with the chords pressed."""
        end = min(self.match_end, len(key_map))
        return list(key_map.mappings[self.match_start:end])

    def full_matches(self, key_map: KeyMap[E]) -> list[KeyMapping[E]]:
        """Return the matches whose sequence is exactly the chords pressed."""
        return list(key_map.mappings[self.match_start:self.full_match_end])

    def partial_matches(self, key_map: KeyMap[E]) -> list[KeyMapping[E]]:
        """Return the matches whose sequence continues past the chords pressed."""
        end = min(self.match_end, len(key_map))
        return list(key_map.mappings[self.full_match_end:end])