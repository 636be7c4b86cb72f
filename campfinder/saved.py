"""Saved (bookmarked) camps and sessions.

The saved set belongs to the client; the server only ever sees an immutable
snapshot of it. Each id is either saved or not, and only an explicit toggle
moves it between the two.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


def toggle(ids: Iterable[str], item_id: str) -> frozenset[str]:
    """Add item_id if absent, remove it if present."""
    current = frozenset(ids)
    if item_id in current:
        return current - {item_id}
    return current | {item_id}


@dataclass(frozen=True)
class SavedSet:
    camp_ids: frozenset[str] = field(default_factory=frozenset)
    session_ids: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_ids(cls, camp_ids: Iterable[str] = (), session_ids: Iterable[str] = ()) -> SavedSet:
        return cls(camp_ids=frozenset(camp_ids), session_ids=frozenset(session_ids))

    def is_camp_saved(self, camp_id: str) -> bool:
        return camp_id in self.camp_ids

    def is_session_saved(self, session_id: str) -> bool:
        return session_id in self.session_ids

    def toggle_camp(self, camp_id: str) -> SavedSet:
        return SavedSet(camp_ids=toggle(self.camp_ids, camp_id), session_ids=self.session_ids)

    def toggle_session(self, session_id: str) -> SavedSet:
        return SavedSet(camp_ids=self.camp_ids, session_ids=toggle(self.session_ids, session_id))
