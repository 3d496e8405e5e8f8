from typing import Optional


class State:
    """
    A node of a DFA carrying an activity counter.

    Equality and hashing are by identity, so two states with the same label
    are still distinct members of a set or keys of a mapping. The label is
    for display only.
    """

    def __init__(self, label: Optional[str] = None):
        self.label = label
        self._activity = 0

    def increment(self) -> None:
        self._activity += 1

    def reset(self) -> None:
        self._activity = 0

    def activity_count(self) -> int:
        return self._activity

    def __str__(self):
        if self.label is not None:
            return str(self.label)
        return f'state@{id(self):x}'

    def __repr__(self):
        return f'<State {self} activity={self._activity}>'
