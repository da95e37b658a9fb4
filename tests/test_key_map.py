import pytest

from sonas.tui.key_chord import KeyChord
from sonas.tui.key_map import KeyMap, KeyMapMatch, KeyMapping
from sonas.tui.key_sequence import KeySequence


def create_key_map():
    names = ["ba", "zz", "f", "b", "bb", "goo", "a", "y", "gz", "zb", "go", "goa", "za"]
    return KeyMap(KeyMapping(KeySequence.parse(name), 0) for name in names)


def sequences(mappings):
    return [str(mapping.key_sequence) for mapping in mappings]


def test_sort_on_create():
    key_map = create_key_map()
    expected = ["a", "b", "ba", "bb", "f", "go", "goa", "goo", "gz", "y", "za", "zb", "zz"]
    assert sequences(key_map) == expected


def test_match_key_random():
    key_map = create_key_map()
    key_match = key_map.match_key(KeyChord.from_char("b"), KeyMapMatch())
    assert (key_match.match_start, key_match.match_end) == (1, 4)
    assert key_match.full_match_end == 2
    assert key_match.next_key_idx == 1

    key_match = key_map.match_key(KeyChord.from_char("a"), key_match)
    assert (key_match.match_start, key_match.match_end) == (2, 3)
    assert key_match.full_match_end == 3
    assert key_match.next_key_idx == 2

    key_match = key_map.match_key(KeyChord.from_char("z"), key_match)
    assert key_match.match_start >= key_match.match_end
    assert key_match.next_key_idx == 3


def test_match_key_middle():
    key_map = create_key_map()
    key_match = key_map.match_key(KeyChord.from_char("g"), KeyMapMatch())
    assert (key_match.match_start, key_match.match_end) == (5, 9)
    assert key_match.full_match_end == 5
    assert key_match.next_key_idx == 1

    key_match = key_map.match_key(KeyChord.from_char("o"), key_match)
    assert (key_match.match_start, key_match.match_end) == (5, 8)
    assert key_match.full_match_end == 6
    assert key_match.next_key_idx == 2

    key_match = key_map.match_key(KeyChord.from_char("o"), key_match)
    assert (key_match.match_start, key_match.match_end) == (7, 8)
    assert key_match.full_match_end == 8
    assert key_match.next_key_idx == 3

    key_match = key_map.match_key(KeyChord.from_char("s"), key_match)
    assert key_match.match_start >= key_match.match_end
    assert key_match.next_key_idx == 4


def test_match_key_first():
    key_map = create_key_map()
    key_match = key_map.match_key(KeyChord.from_char("a"), KeyMapMatch())
    assert (key_match.match_start, key_match.match_end) == (0, 1)
    assert key_match.full_match_end == 1
    assert key_match.next_key_idx == 1

    key_match = key_map.match_key(KeyChord.from_char("a"), key_match)
    assert key_match.match_start >= key_match.match_end
    assert key_match.next_key_idx == 2


def test_match_key_last():
    key_map = create_key_map()
    key_match = key_map.match_key(KeyChord.from_char("z"), KeyMapMatch())
    assert (key_match.match_start, key_match.match_end) == (10, 13)
    assert key_match.full_match_end == 10
    assert key_match.next_key_idx == 1

    key_match = key_map.match_key(KeyChord.from_char("z"), key_match)
    assert (key_match.match_start, key_match.match_end) == (12, 13)
    assert key_match.full_match_end == 13
    assert key_match.next_key_idx == 2

    key_match = key_map.match_key(KeyChord.from_char("z"), key_match)
    assert key_match.match_start >= key_match.match_end
    assert key_match.next_key_idx == 3


def test_match_key_defaults_to_blank_match():
    key_map = create_key_map()
    assert key_map.match_key(KeyChord.from_char("g")) == key_map.match_key(
        KeyChord.from_char("g"), KeyMapMatch()
    )


def test_matches():
    key_map = create_key_map()
    key_match = KeyMapMatch(match_start=5, match_end=8, full_match_end=6, next_key_idx=2)
    assert sequences(key_match.matches(key_map)) == ["go", "goa", "goo"]


def test_matches_blank():
    assert len(KeyMapMatch().matches(create_key_map())) == 13


def test_full_matches():
    key_map = create_key_map()
    key_match = KeyMapMatch(match_start=5, match_end=8, full_match_end=6, next_key_idx=2)
    assert sequences(key_match.full_matches(key_map)) == ["go"]


def test_full_matches_blank():
    assert KeyMapMatch().full_matches(create_key_map()) == []


def test_partial_matches():
    key_map = create_key_map()
    key_match = KeyMapMatch(match_start=5, match_end=8, full_match_end=6, next_key_idx=2)
    assert sequences(key_match.partial_matches(key_map)) == ["goa", "goo"]


def test_partial_matches_blank():
    assert len(KeyMapMatch().partial_matches(create_key_map())) == 13


@pytest.fixture
def example_mappings():
    return [
        KeyMapping(KeySequence.parse("G"), "cursor to bottom"),
        KeyMapping(KeySequence.parse("gd"), "goto definition"),
        KeyMapping(KeySequence.parse("gg"), "cursor to top"),
        KeyMapping(KeySequence.parse("go"), "cursor to top"),
        KeyMapping(KeySequence.parse("k"), "cursor up"),
        KeyMapping(KeySequence.parse("j"), "cursor down"),
        KeyMapping(KeySequence.parse("l"), "cursor right"),
        KeyMapping(KeySequence.parse("h"), "cursor left"),
        KeyMapping(KeySequence.parse("hi"), "omg hiiii"),
    ]


def test_single_chord_sequence(example_mappings):
    key_map = KeyMap(example_mappings)
    filtered = key_map.match_key(KeyChord.from_char("G"), KeyMapMatch())
    assert filtered.matches(key_map) == example_mappings[0:1]
    assert filtered.full_matches(key_map) == example_mappings[0:1]


def test_multi_chord_sequence(example_mappings):
    key_map = KeyMap(example_mappings)
    filtered = key_map.match_key(KeyChord.from_char("g"), KeyMapMatch())
    assert filtered.matches(key_map) == example_mappings[1:4]
    assert filtered.full_matches(key_map) == []
    filtered = key_map.match_key(KeyChord.from_char("g"), filtered)
    assert filtered.matches(key_map) == example_mappings[2:3]
    assert filtered.full_matches(key_map) == example_mappings[2:3]


def test_prefix_and_longer_sequence(example_mappings):
    key_map = KeyMap(example_mappings)
    filtered = key_map.match_key(KeyChord.from_char("h"), KeyMapMatch())
    assert sequences(filtered.matches(key_map)) == ["h", "hi"]
    assert sequences(filtered.full_matches(key_map)) == ["h"]
    assert sequences(filtered.partial_matches(key_map)) == ["hi"]
    filtered = key_map.match_key(KeyChord.from_char("i"), filtered)
    assert [m.app_event for m in filtered.matches(key_map)] == ["omg hiiii"]
    assert [m.app_event for m in filtered.full_matches(key_map)] == ["omg hiiii"]


def test_empty_key_map_matches_nothing():
    key_map = KeyMap()
    key_match = key_map.match_key(KeyChord.from_char("a"), KeyMapMatch())
    assert key_match.matches(key_map) == []
    assert key_match.next_key_idx == 1


def test_key_maps_with_same_mappings_are_equal():
    first = KeyMap([KeyMapping(KeySequence.parse("b"), 1), KeyMapping(KeySequence.parse("a"), 2)])
    second = KeyMap([KeyMapping(KeySequence.parse("a"), 2), KeyMapping(KeySequence.parse("b"), 1)])
    assert first == second
    assert first[0].app_event == 2