"""Due date parsing and formatting."""

from __future__ import annotations

from datetime import date, datetime, timedelta

_RELATIVE_DAYS = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}


def parse_due_date(value: str, today: date | None = None) -> date:
    """Parse a due date given on the command line.

    Accepts ``YYYY-MM-DD``, a full ISO datetime (only the date is kept),
    ``today``, ``tomorrow`` and ``yesterday``.

    Raises:
        ValueError: If the value cannot be parsed
    """
    text = value.strip().lower()
    if not text:
        raise ValueError("Due date cannot be empty")

    if text in _RELATIVE_DAYS:
        base = today or date.today()
        return base + timedelta(days=_RELATIVE_DAYS[text])

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
    except ValueError:
        raise ValueError(
            f"Invalid due date '{value}'. Use YYYY-MM-DD, today or tomorrow."
        ) from None


def format_due_date(value: date | None, style: str = "long") -> str:
    """Render a due date for display.

    ``long`` gives ``January 1, 2024``; ``iso`` gives ``2024-01-01``.
    """
    if value is None:
        return ""
    if style == "iso":
        return value.isoformat()
    return f"{value:%B} {value.day}, {value.year}"
