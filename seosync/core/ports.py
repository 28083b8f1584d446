"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Every document, history and analytics side effect goes through a Protocol
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: every operation runs to completion within one caller turn
    - History is optional at the call site (None = feature absent), replacing
      runtime feature detection scattered through the logic
"""

from typing import Protocol

from seosync.core.head_model import HeadSnapshot, HeadTag


class DocumentHeadPort(Protocol):
    """Contract for the document whose head this engine owns."""
    def set_title(self, title: str) -> None: ...
    def remove_managed_tags(self) -> int: ...
    def append_tags(self, tags: list[HeadTag]) -> int: ...
    def replace_schema_scripts(self, payloads: list[str]) -> int: ...
    def snapshot(self) -> HeadSnapshot: ...


class HistoryPort(Protocol):
    """Contract for the browser history collaborator."""
    def current_path(self) -> str: ...
    def push_state(self, state: dict, title: str, path: str) -> None: ...


class Notifier(Protocol):
    """Best-effort analytics sink. Implementations may raise; callers swallow."""
    def emit(self, event_name: str, params: dict) -> None: ...
