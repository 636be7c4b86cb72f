"""Week index for the week picker.

Sessions are grouped by the Monday of the week they start in; the picker
then sends one of those dates back as the `week` filter.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Camp
from .schedule import monday_of, parse_date


def available_weeks(camps: Iterable[Camp]) -> list[str]:
    """Sorted ISO dates of the Mondays on which at least one session's week begins."""
    mondays = set()
    for camp in camps:
        for session in camp.sessions:
            start = parse_date(session.start_date)
            if start is not None:
                mondays.add(monday_of(start))
    return [monday.isoformat() for monday in sorted(mondays)]
