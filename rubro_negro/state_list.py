"""An ordered collection of states, unique by name."""

from __future__ import annotations

from bisect import bisect_left
from operator import attrgetter
from typing import Iterator

from rubro_negro.models import State, print_state

_by_name = attrgetter("name")


class StateList:
    """States kept in ascending order of name, with no two sharing a name."""

    def __init__(self) -> None:
        self._states: list[State] = []

    def _position(self, name: str) -> int:
        return bisect_left(self._states, name, key=_by_name)

    def _index_of(self, name: str) -> int | None:
        index = self._position(name)
        if index < len(self._states) and self._states[index].name == name:
            return index
        return None

    def insert(self, state: State | None) -> bool:
        """Insert a state in name order; return False if missing or already present."""
        if state is None:
            return False
        index = self._position(state.name)
        if index < len(self._states) and self._states[index].name == state.name:
            return False
        self._states.insert(index, state)
        return True

    def find(self, name: str) -> State | None:
        """Return the state with this name, or None."""
        index = self._index_of(name)
        return None if index is None else self._states[index]

    def remove(self, name: str) -> bool:
        """Remove the state with this name; return whether one was removed."""
        index = self._index_of(name)
        if index is None:
            return False
        del self._states[index]
        return True

    def display(self) -> None:
        """Print every state in order."""
        for state in self._states:
            print_state(state)

    def clear(self) -> None:
        """Remove every state."""
        self._states.clear()

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)