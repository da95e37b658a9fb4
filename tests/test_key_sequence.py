import pytest

from sonas.tui.key_chord import (
    KeyChord,
    KeyChordParseError,
    KeyChordParseErrorKind,
    KeyCode,
    KeyKind,
    KeyModifiers,
)
from sonas.tui.key_sequence import KeySequence

ESC = KeyChord.create(KeyCode(KeyKind.ESC))
ALT_A = KeyChord.create(KeyCode.char("a"), KeyModifiers.ALT)

F = KeySequence([KeyChord.from_char("f")])
ESC_SEQ = KeySequence([ESC])
E_S_C = KeySequence([KeyChord.from_char("E"), KeyChord.from_char("s"), KeyChord.from_char("c")])
ALT_A_SEQ = KeySequence([ALT_A])
F_ALT_A = KeySequence([KeyChord.from_char("f"), ALT_A])
ALT_A_F = KeySequence([ALT_A, KeyChord.from_char("f")])
SPACE_CTRL_W_LEFT_H_ESC = KeySequence(
    [
        KeyChord.from_char(" "),
        KeyChord.create(KeyCode.char("w"), KeyModifiers.CONTROL),
        KeyChord.create(KeyCode(KeyKind.LEFT)),
        KeyChord.from_char("h"),
        ESC,
    ]
)


@pytest.mark.parametrize(
    ("sequence", "text"),
    [
        (F, "f"),
        (ESC_SEQ, "<Esc>"),
        (E_S_C, "<S-E>sc"),
        (ALT_A_SEQ, "<A-a>"),
        (F_ALT_A, "f<A-a>"),
        (ALT_A_F, "<A-a>f"),
        (SPACE_CTRL_W_LEFT_H_ESC, "<Space><C-w><Left>h<Esc>"),
    ],
)
def test_display(sequence, text):
    assert str(sequence) == text


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("f", F),
        ("<esc>", ESC_SEQ),
        ("Esc", E_S_C),
        ("<A-a>", ALT_A_SEQ),
        ("f<a-a>", F_ALT_A),
        ("<a-a>f", ALT_A_F),
        ("<space><C-w><left>h<ESC>", SPACE_CTRL_W_LEFT_H_ESC),
    ],
)
def test_parse_happy_flow(text, expected):
    assert KeySequence.parse(text) == expected


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("a<>b", KeyChordParseErrorKind.EMPTY_STRING),
        ("<C-r><Z-f>", KeyChordParseErrorKind.INVALID_MODIFIER),
        ("<CC-f>", KeyChordParseErrorKind.INVALID_MODIFIER),
        ("<C-c-f>", KeyChordParseErrorKind.DUPLICATE_MODIFIER),
        ("<Cw>", KeyChordParseErrorKind.INVALID_KEY),
        ("<C-w", KeyChordParseErrorKind.UNCLOSED_TAG),
    ],
)
def test_parse_invalid_input_errors(text, kind):
    with pytest.raises(KeyChordParseError) as info:
        KeySequence.parse(text)
    assert info.value.kind is kind


def test_empty_text_is_empty_sequence():
    assert len(KeySequence.parse("")) == 0


def test_sequence_access():
    sequence = KeySequence.parse("g<C-w>x")
    assert len(sequence) == 3
    assert sequence[1] == KeyChord.create(KeyCode.char("w"), KeyModifiers.CONTROL)
    assert list(sequence) == [
        KeyChord.from_char("g"),
        KeyChord.create(KeyCode.char("w"), KeyModifiers.CONTROL),
        KeyChord.from_char("x"),
    ]


def test_prefix_sorts_first():
    texts = ["ba", "b", "a", "bb", "goo", "go", "goa"]
    ordered = sorted(KeySequence.parse(text) for text in texts)
    assert [str(sequence) for sequence in ordered] == ["a", "b", "ba", "bb", "go", "goa", "goo"]


def test_round_trip():
    for text in ["<Space><C-w><Left>h<Esc>", "<S-E>sc", "gg", "<lt>x<Bar>"]:
        assert str(KeySequence.parse(text)) == text


def test_sequences_are_hashable_and_equal_by_value():
    assert {KeySequence.parse("jk"), KeySequence.parse("jk")} == {KeySequence.parse("jk")}