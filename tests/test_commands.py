import pytest

from sonas.commands import (
    Album,
    AlbumList,
    AlbumListTracks,
    SortDirection,
    UnknownSortDirectionError,
    parse_album_command,
    parse_command,
)
from sonas.errors import ParseCommandError, ParseErrorKind


def test_it_works():
    assert parse_command("album list") == Album(AlbumList(sort=SortDirection.DESCENDING))
    assert parse_command("album list sort=desc") == Album(
        AlbumList(sort=SortDirection.DESCENDING)
    )
    assert parse_command("album list-tracks id=5") == Album(AlbumListTracks(id=5))


def test_list_ascending():
    assert parse_command("album list sort=asc") == Album(
        AlbumList(sort=SortDirection.ASCENDING)
    )


def test_surrounding_whitespace_and_newline():
    assert parse_command("  album list-tracks id=7\n") == Album(AlbumListTracks(id=7))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a", SortDirection.ASCENDING),
        ("ASC", SortDirection.ASCENDING),
        ("Ascending", SortDirection.ASCENDING),
        ("d", SortDirection.DESCENDING),
        ("DeSc", SortDirection.DESCENDING),
        ("descending", SortDirection.DESCENDING),
    ],
)
def test_sort_direction_parse(text, expected):
    assert SortDirection.parse(text) is expected


def test_sort_direction_unknown_is_lowercased():
    with pytest.raises(UnknownSortDirectionError) as info:
        SortDirection.parse("Sideways")
    assert info.value.text == "sideways"


@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_empty_input(text):
    with pytest.raises(ParseCommandError) as info:
        parse_command(text)
    assert info.value == ParseCommandError(ParseErrorKind.EMPTY_STRING)


def test_unknown_category():
    with pytest.raises(ParseCommandError) as info:
        parse_command("artist list")
    assert info.value == ParseCommandError(ParseErrorKind.UNKNOWN_CATEGORY, "artist")


def test_no_subcommand():
    with pytest.raises(ParseCommandError) as info:
        parse_command("album")
    assert info.value == ParseCommandError(ParseErrorKind.NO_SUBCOMMAND)


def test_unknown_subcommand():
    with pytest.raises(ParseCommandError) as info:
        parse_command("album play")
    assert info.value == ParseCommandError(ParseErrorKind.UNKNOWN_SUBCOMMAND, "play")


def test_invalid_sort_value():
    with pytest.raises(ParseCommandError) as info:
        parse_command("album list sort=sideways")
    assert info.value == ParseCommandError(ParseErrorKind.INVALID_ARGUMENT, "sort")


def test_unexpected_argument():
    with pytest.raises(ParseCommandError) as info:
        parse_command("album list id=3")
    assert info.value == ParseCommandError(ParseErrorKind.UNEXPECTED_ARGUMENT, "id")


@pytest.mark.parametrize("command", ["album list-tracks", "album list-tracks id=x", "album list-tracks id=-1"])
def test_list_tracks_without_valid_id(command):
    with pytest.raises(ParseCommandError) as info:
        parse_command(command)
    assert info.value == ParseCommandError(ParseErrorKind.MISSING_ARGUMENT, "id")


def test_parse_album_command_directly():
    assert parse_album_command("list-tracks id=+12") == AlbumListTracks(id=12)
    assert parse_album_command("list") == AlbumList()