"""Single key presses with modifiers, in a vim-like notation."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag, auto
from typing import Union


class KeyChordParseErrorKind(Enum):
    """The ways in which a key chord or key sequence can fail to parse."""

    EMPTY_STRING = "empty key chord string"
    INVALID_MODIFIER = "invalid modifier identifier"
    DUPLICATE_MODIFIER = "duplicate key modifier"
    INVALID_KEY = "invalid key identifier"
    UNCLOSED_TAG = "key chord has no closing tag"


class KeyChordParseError(ValueError):
    """Raised when text does not describe a valid key chord or key sequence."""

    def __init__(self, kind: KeyChordParseErrorKind) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(KeyChordParseErrorKind.{self.kind.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyChordParseError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class KeyKind(IntEnum):
    """Kinds of key, in the order in which key codes sort."""

    BACKSPACE = auto()
    ENTER = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    TAB = auto()
    BACK_TAB = auto()
    DELETE = auto()
    INSERT = auto()
    F = auto()
    CHAR = auto()
    NULL = auto()
    ESC = auto()
    CAPS_LOCK = auto()
    SCROLL_LOCK = auto()
    NUM_LOCK = auto()
    PRINT_SCREEN = auto()
    PAUSE = auto()
    MENU = auto()
    KEYPAD_BEGIN = auto()


@functools.total_ordering
@dataclass(frozen=True)
class KeyCode:
    """A key on the keyboard.

    ``value`` holds the character of a ``CHAR`` key and the number of an
    ``F`` key; it is ``None`` for every other kind.
    """

    kind: KeyKind
    value: Union[str, int, None] = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.CHAR:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"a character key needs exactly one character, got {self.value!r}")
        elif self.kind is KeyKind.F:
            if not isinstance(self.value, int) or not 0 <= self.value <= 255:
                raise ValueError(f"a function key needs a number from 0 to 255, got {self.value!r}")
        elif self.value is not None:
            raise ValueError(f"key {self.kind.name} takes no value")

    @classmethod
    def char(cls, ch: str) -> KeyCode:
        """Return the key that types ``ch``."""
        return cls(KeyKind.CHAR, ch)

    @classmethod
    def function(cls, number: int) -> KeyCode:
        """Return function key ``F<number>``."""
        return cls(KeyKind.F, number)

    def _sort_key(self) -> tuple[int, Union[str, int]]:
        return (int(self.kind), 0 if self.value is None else self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, KeyCode):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __repr__(self) -> str:
        if self.kind is KeyKind.CHAR:
            return f"KeyCode.char({self.value!r})"
        if self.kind is KeyKind.F:
            return f"KeyCode.function({self.value})"
        return f"KeyCode(KeyKind.{self.kind.name})"


class KeyModifiers(IntFlag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    HYPER = 16
    META = 32


@dataclass(frozen=True)
class KeyEvent:
    """A key press as reported by the terminal."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE


_KEY_NAMES = {
    KeyKind.NULL: "Nul",
    KeyKind.BACKSPACE: "BS",
    KeyKind.TAB: "Tab",
    KeyKind.ENTER: "CR",
    KeyKind.ESC: "Esc",
    KeyKind.DELETE: "Del",
    KeyKind.UP: "Up",
    KeyKind.DOWN: "Down",
    KeyKind.LEFT: "Left",
    KeyKind.RIGHT: "Right",
    KeyKind.HOME: "Home",
    KeyKind.END: "End",
    KeyKind.PAGE_UP: "PageUp",
    KeyKind.PAGE_DOWN: "PageDown",
    KeyKind.INSERT: "Insert",
    KeyKind.BACK_TAB: "Back Tab",
    KeyKind.CAPS_LOCK: "Caps Lock",
    KeyKind.SCROLL_LOCK: "Scroll Lock",
    KeyKind.NUM_LOCK: "Num Lock",
    KeyKind.PRINT_SCREEN: "Print Screen",
    KeyKind.PAUSE: "Pause",
    KeyKind.MENU: "Menu",
    KeyKind.KEYPAD_BEGIN: "Begin",
}

_CHAR_NAMES = {" ": "Space", "<": "lt", "\\": "Bslash", "|": "Bar"}

_MODIFIER_PREFIXES = (
    (KeyModifiers.SUPER, "D-"),
    (KeyModifiers.ALT, "A-"),
    (KeyModifiers.CONTROL, "C-"),
    (KeyModifiers.SHIFT, "S-"),
)

_MODIFIER_NAMES = {
    "S": KeyModifiers.SHIFT,
    "s": KeyModifiers.SHIFT,
    "C": KeyModifiers.CONTROL,
    "c": KeyModifiers.CONTROL,
    "A": KeyModifiers.ALT,
    "a": KeyModifiers.ALT,
    "M": KeyModifiers.ALT,
    "m": KeyModifiers.ALT,
    "D": KeyModifiers.SUPER,
    "d": KeyModifiers.SUPER,
}

_NAMED_KEYS = {
    "nul": KeyCode(KeyKind.NULL),
    "bs": KeyCode(KeyKind.BACKSPACE),
    "tab": KeyCode(KeyKind.TAB),
    "cr": KeyCode(KeyKind.ENTER),
    "return": KeyCode(KeyKind.ENTER),
    "enter": KeyCode(KeyKind.ENTER),
    "eol": KeyCode(KeyKind.ENTER),
    "esc": KeyCode(KeyKind.ESC),
    "space": KeyCode.char(" "),
    "lt": KeyCode.char("<"),
    "bslash": KeyCode.char("\\"),
    "bar": KeyCode.char("|"),
    "del": KeyCode(KeyKind.DELETE),
    "up": KeyCode(KeyKind.UP),
    "down": KeyCode(KeyKind.DOWN),
    "left": KeyCode(KeyKind.LEFT),
    "right": KeyCode(KeyKind.RIGHT),
    "home": KeyCode(KeyKind.HOME),
    "end": KeyCode(KeyKind.END),
    "pageup": KeyCode(KeyKind.PAGE_UP),
    "pagedown": KeyCode(KeyKind.PAGE_DOWN),
    "insert": KeyCode(KeyKind.INSERT),
    **{f"f{n}": KeyCode.function(n) for n in range(1, 13)},
}


def _is_ascii_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _ascii_upper(ch: str) -> str:
    return ch.upper() if "a" <= ch <= "z" else ch


@dataclass(frozen=True, order=True)
class KeyChord:
    """A key together with the modifiers held while pressing it.

    Constructing one directly keeps the given fields as they are; ``create``
    and the other constructors normalise the shift state.
    """

    key: KeyCode
    mods: KeyModifiers = KeyModifiers.NONE

    @classmethod
    def create(cls, key: KeyCode, mods: KeyModifiers = KeyModifiers.NONE) -> KeyChord:
        """Return a normalised chord for ``key`` with ``mods``."""
        return cls(key, KeyModifiers(mods)).normalise()

    @classmethod
    def from_char(cls, ch: str) -> KeyChord:
        """Return the normalised chord typing ``ch`` without modifiers."""
        return cls.create(KeyCode.char(ch), KeyModifiers.NONE)

    @classmethod
    def from_event(cls, event: KeyEvent) -> KeyChord:
        """Return the normalised chord of a terminal key event."""
        return cls.create(event.code, event.modifiers)

    def normalise(self) -> KeyChord:
        """Make an upper-case letter and a shifted letter the same chord.

        An ASCII upper-case character gains the shift modifier; a character
        with shift held becomes upper case.
        """
        if self.key.kind is KeyKind.CHAR:
            ch = self.key.value
            assert isinstance(ch, str)
            if _is_ascii_upper(ch):
                return KeyChord(self.key, self.mods | KeyModifiers.SHIFT)
            if self.mods & KeyModifiers.SHIFT:
                return KeyChord(KeyCode.char(_ascii_upper(ch)), self.mods)
        return self

    @classmethod
    def parse(cls, text: str) -> KeyChord:
        """Parse notation such as ``f``, ``A-a``, ``C-S-Space`` or ``s-f10``."""
        if not text:
            raise KeyChordParseError(KeyChordParseErrorKind.EMPTY_STRING)
        if len(text) == 1:
            return cls.from_char(text)

        split_at = text[:-1].rfind("-") + 1
        mod_text, key_text = text[:split_at], text[split_at:]

        parts = mod_text.split("-")
        if parts and parts[-1] == "":
            parts.pop()

        mods = KeyModifiers.NONE
        for part in parts:
            modifier = _MODIFIER_NAMES.get(part)
            if modifier is None:
                raise KeyChordParseError(KeyChordParseErrorKind.INVALID_MODIFIER)
            if mods & modifier:
                raise KeyChordParseError(KeyChordParseErrorKind.DUPLICATE_MODIFIER)
            mods |= modifier

        if len(key_text) == 1:
            key = KeyCode.char(key_text)
        else:
            named = _NAMED_KEYS.get(key_text.lower())
            if named is None:
                raise KeyChordParseError(KeyChordParseErrorKind.INVALID_KEY)
            key = named
        return cls.create(key, mods)

    def __str__(self) -> str:
        prefix = "".join(text for flag, text in _MODIFIER_PREFIXES if self.mods & flag)
        return prefix + _key_name(self.key)


def _key_name(key: KeyCode) -> str:
    if key.kind is KeyKind.CHAR:
        assert isinstance(key.value, str)
        return _CHAR_NAMES.get(key.value, key.value)
    if key.kind is KeyKind.F:
        return f"F{key.value}"
    return _KEY_NAMES[key.kind]