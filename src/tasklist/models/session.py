"""Edit-session state: the draft and the compose/edit mode."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Composing:
    """No edit target; submitting the draft creates a new task."""


@dataclass(frozen=True)
class Editing:
    """Editing an existing task; submitting the draft updates it."""

    task_id: str


EditMode = Composing | Editing


@dataclass
class Draft:
    """In-progress input values, not yet committed to the collection."""

    text: str = ""
    due_date: date | None = None

    def clear(self) -> None:
        self.text = ""
        self.due_date = None

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()
