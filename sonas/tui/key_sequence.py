"""Sequences of key chords, written like ``g<C-w><Left>``."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import overload

from .key_chord import KeyChord, KeyChordParseError, KeyChordParseErrorKind


@dataclass(frozen=True, order=True)
class KeySequence:
    """An ordered run of key chords.

    Sequences sort lexicographically by chord, a prefix before any longer
    sequence that starts with it.
    """

    chords: tuple[KeyChord, ...] = field(default=())

    def __init__(self, chords: Iterable[KeyChord] = ()) -> None:
        object.__setattr__(self, "chords", tuple(chords))

    def __len__(self) -> int:
        return len(self.chords)

    def __iter__(self) -> Iterator[KeyChord]:
        return iter(self.chords)

    @overload
    def __getitem__(self, index: int) -> KeyChord: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[KeyChord, ...]: ...

    def __getitem__(self, index):
        return self.chords[index]

    @classmethod
    def parse(cls, text: str) -> KeySequence:
        """Parse single characters and ``<...>`` chords into a sequence."""
        chords: list[KeyChord] = []
        in_tag = False
        chord_start = 0

        for idx, ch in enumerate(text):
            if in_tag:
                if ch == ">":
                    in_tag = False
                    chords.append(KeyChord.parse(text[chord_start:idx]))
            elif ch == "<":
                in_tag = True
                chord_start = idx + 1
            else:
                chords.append(KeyChord.parse(ch))

        if in_tag:
            raise KeyChordParseError(KeyChordParseErrorKind.UNCLOSED_TAG)
        return cls(chords)

    def __str__(self) -> str:
        parts = []
        for chord in self.chords:
            text = str(chord)
            parts.append(text if len(text) == 1 else f"<{text}>")
        return "".join(parts)