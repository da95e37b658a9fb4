# sonas

The core of a terminal music player:

- a small command language for talking to the player (`sonas.commands`),
- a daemon that answers those commands over a local socket (`sonasd`),
  and a command-line client for it (`sonasctl`),
- Vim-style key chords, key sequences, key maps and a key handler for the
  terminal interface (`sonas.tui`),
- the event types, layout geometry and component state of that interface
  (`sonas.tui.event`, `sonas.geometry`, `sonas.app_event`,
  `sonas.components`).

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

The test suite needs the `test` extra:

```
pip install ".[test]"
pytest
```

## The daemon and its client

Start the daemon. It listens on a Unix socket and answers one command per
connection, then closes the connection:

```
sonasd
```

On Linux the socket lives in the abstract namespace under the name
`sonasd.sock`; on other systems it is the file `sonasd.sock` in the
temporary directory. `sonas.server.socket_path()` returns the address.

From another terminal, send it a command. The words on the command line
are joined with spaces and sent as a single line. The client prints the
command it sent and then the daemon's reply, each as a quoted string:

```
sonasctl album list
sonasctl album list sort=asc
sonasctl album list-tracks id=5
```

The reply is the `repr` of the parsed command, or of the
`ParseCommandError` if the line could not be parsed. If the daemon cannot
be reached, the client prints the error instead.

From Python, `sonas.server.send_line(line, path=None)` sends one line and
returns the reply; `send_bytes(data, path=None)` sends raw bytes. Both use
`socket_path()` when no path is given. `sonas.daemon.serve(path=None)` is
the coroutine that runs the server, and `sonas.daemon.respond(line)`
computes the reply for one line without any socket.

## The command language

A command is a category, a subcommand and zero or more `key=value`
arguments separated by spaces:

```
album list [sort=asc|desc]
album list-tracks id=<number>
```

`sort` accepts `a`, `asc`, `ascending`, `d`, `desc` or `descending`, in
any case, and defaults to descending. `id` is a non-negative integer.

`sonas.commands.parse_command` returns an `Album` holding an `AlbumList`
or an `AlbumListTracks`. Malformed input raises
`sonas.errors.ParseCommandError`, whose `kind` is a `ParseErrorKind`
(empty input, no subcommand, unknown category or subcommand, or an
invalid, duplicate, unexpected or missing argument) and whose `value`
names the offending word. A required argument whose value cannot be
converted, such as `id=abc`, is reported as missing.

```python
from sonas.commands import parse_command
from sonas.errors import ParseCommandError

command = parse_command("album list-tracks id=5")
print(command.command.id)  # 5

try:
    parse_command("album list colour=red")
except ParseCommandError as error:
    print(error)  # unexpected argument 'colour' was specified
```

The argument splitting itself is available as
`sonas.arguments.Arguments.parse(string, options)`, with `get` and
`get_optional` to read and convert values.

## Key bindings

Keys are written the way Vim writes them: a single character stands for
itself, and anything longer goes in angle brackets with optional
modifiers (`S-` shift, `C-` control, `A-`/`M-` alt, `D-` super) and key
names such as `Space`, `Esc`, `CR`, `Tab`, `Left` or `F1` to `F12`.
Names and modifiers are read without regard to case.

```python
from sonas.tui.key_sequence import KeySequence

sequence = KeySequence.parse("<space><C-w><left>h<ESC>")
print(sequence)  # <Space><C-w><Left>h<Esc>
```

A single chord is a `sonas.tui.key_chord.KeyChord`, parsed with
`KeyChord.parse`. Chords are normalised so that `A` and `S-a` are the
same chord. Bad notation raises `KeyChordParseError`, whose `kind` says
why.

`sonas.tui.key_config.KeyConfig.from_mapping(data, action_type)` reads a
mapping from action names to one key sequence or a list of them, and
`to_mapping()` writes it back in the same form. The player's actions are
`sonas.app_event.InputAction`, whose values are names such as `quit`,
`cursor-up` or `scroll-half-page-down`:

```python
from sonas.app_event import InputAction
from sonas.tui.key_config import KeyConfig

config = KeyConfig.from_mapping(
    {"quit": "q", "cursor-up": ["k", "<Up>"], "cursor-down": ["j", "<Down>"]},
    InputAction,
)
key_map = config.generate_key_map()
```

`generate_key_map()` returns a `KeyMap` sorted by key sequence. A key map
is matched one chord at a time with `match_key`, which narrows a
`KeyMapMatch` to the mappings whose sequence starts with the keys pressed
so far; `matches`, `full_matches` and `partial_matches` read the result.

`sonas.tui.key_handler.KeyHandler` drives this from `Key` and `Tick`
events (`sonas.tui.event`) and pushes the bound application events onto
an `EventQueue`. When a sequence is both complete and the start of a
longer one, its events fire only after no key has been pressed for
`timeoutlen` seconds (one second by default).

## Interface state

`sonas.components` holds the state and behaviour of the interface's
parts, independent of any drawing:

- `Scrollable` keeps a `Viewport` (`sonas.geometry`) and handles the
  `ScrollBy`, `ScrollByRelative` and `ScrollTo` events.
- `Library` lays album cards out in a grid with `layout`, and moves its
  selection with `move_cursor`, focusing the chosen card and queuing a
  `ScrollTo` for it.
- `NavbarButtonType` gives each navigation button's icon and label.
- `ControlPanel` toggles between playing and paused on a left click.

## What this package does not do

- It plays no audio and has no music library: the `album` commands are
  parsed and echoed back by the daemon, but nothing acts on them.
- It has no full-screen terminal program. There is no event loop that
  reads the terminal, and no component draws anything; the components
  only compute state and layout.
- It reads no configuration file. Key bindings come from whatever mapping
  is passed to `KeyConfig.from_mapping`, and there are no colour themes.