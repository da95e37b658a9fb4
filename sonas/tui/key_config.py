"""User key bindings: actions mapped to one or more key sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar, Union

from .key_map import KeyMap, KeyMapping
from .key_sequence import KeySequence

A = TypeVar("A", bound="Action")


class Action(Protocol):
    """Something a key binding can name, which turns into an application event."""

    def app_event(self) -> Any:
        """Return the application event this action stands for."""
        ...


Inputs = Union[KeySequence, tuple[KeySequence, ...]]


@dataclass
class InputMapping(Generic[A]):
    """One action and the key sequence, or sequences, bound to it.

    A single ``KeySequence`` and a tuple of them are kept apart so that a
    binding written as one sequence is written back the same way.
    """

    action: A
    inputs: Inputs

    @property
    def sequences(self) -> tuple[KeySequence, ...]:
        """The bound sequences, whichever way they were given."""
        if isinstance(self.inputs, KeySequence):
            return (self.inputs,)
        return tuple(self.inputs)

    def __len__(self) -> int:
        return len(self.sequences)


def _action_name(action: Any) -> Any:
    return action.value if isinstance(action, Enum) else str(action)


def _parse_inputs(value: Any) -> Inputs:
    if isinstance(value, str):
        return KeySequence.parse(value)
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            raise TypeError("key sequences must be strings")
        return tuple(KeySequence.parse(item) for item in value)
    raise TypeError(f"expected a key sequence or a list of them, got {type(value).__name__}")


@dataclass
class KeyConfig(Generic[A]):
    """The configured bindings, in the order they were read."""

    mappings: list[InputMapping[A]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.mappings)

    def __iter__(self) -> Iterator[InputMapping[A]]:
        return iter(self.mappings)

    def generate_key_map(self) -> KeyMap[Any]:
        """Build the key map binding every sequence to its action's event."""
        return KeyMap(
            KeyMapping(sequence, mapping.action.app_event())
            for mapping in self.mappings
            for sequence in mapping.sequences
        )

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any], action_type: Callable[[str], A]
    ) -> KeyConfig[A]:
        """Read bindings from a mapping of action names to sequence text.

        Each value is one sequence string or a list of them; ``action_type``
        turns an action name into an action.
        """
        if not isinstance(data, Mapping):
            raise TypeError("key configuration must be a mapping of actions to key sequences")
        return cls(
            [InputMapping(action_type(name), _parse_inputs(value)) for name, value in data.items()]
        )

    def to_mapping(self) -> dict[Any, Union[str, list[str]]]:
        """Write the bindings back in the form ``from_mapping`` reads."""
        result: dict[Any, Union[str, list[str]]] = {}
        for mapping in self.mappings:
            if isinstance(mapping.inputs, KeySequence):
                value: Union[str, list[str]] = str(mapping.inputs)
            else:
                value = [str(sequence) for sequence in mapping.inputs]
            result[_action_name(mapping.action)] = value
        return result