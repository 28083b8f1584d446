"""In-Memory History — HistoryPort for hosts without a browser history API.

Invariants:
    - entries[-1] is always the current entry
    - push_state appends; back() never removes the initial entry
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HistoryEntry:
    path: str
    title: str = ""
    state: dict = field(default_factory=dict)


class InMemoryHistory:
    """Session history stack."""

    def __init__(self, initial_path: str = "/"):
        self._entries: list[HistoryEntry] = [HistoryEntry(initial_path)]

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def current_path(self) -> str:
        return self._entries[-1].path

    def push_state(self, state: dict, title: str, path: str) -> None:
        self._entries.append(HistoryEntry(path, title, dict(state)))

    def back(self) -> str:
        """Pop the current entry and return the path now current."""
        if len(self._entries) > 1:
            self._entries.pop()
        return self.current_path()
