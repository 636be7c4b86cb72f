"""Tests for schedule conflict detection and the hide-conflicts filter."""

from __future__ import annotations

import pytest

from campfinder.conflicts import (
    camp_conflicts,
    dates_overlap,
    sessions_conflict,
    times_overlap,
    weekdays_intersect,
)
from campfinder.filters import filter_camps
from campfinder.models import FilterCriteria, SavedSessionRef
from campfinder.schedule import session_in_date_range
from tests.fixtures.catalog import make_camp, make_session


@pytest.fixture
def camp_a():
    """Mon/Wed, 2025-06-10 to 2025-06-14, 09:00-12:00."""
    return make_camp(
        "camp-a",
        "Camp A",
        sessions=[
            make_session(
                id="a-1",
                start_date="2025-06-10",
                end_date="2025-06-14",
                start_time="09:00",
                end_time="12:00",
                days_of_week=("Monday", "Wednesday"),
            )
        ],
    )


@pytest.fixture
def saved_mon_tue() -> SavedSessionRef:
    """Mon/Tue, 2025-06-12 to 2025-06-16, 09:00-12:00."""
    return SavedSessionRef(
        id="saved-1",
        start_date="2025-06-12",
        end_date="2025-06-16",
        start_time="09:00",
        end_time="12:00",
        days_of_week=("Monday", "Tuesday"),
    )


class TestConflictScenarios:
    def test_overlapping_dates_times_and_days_exclude_camp(self, camp_a, saved_mon_tue) -> None:
        criteria = FilterCriteria(hide_conflicts=True)

        assert camp_conflicts(camp_a, [saved_mon_tue]) is True
        assert filter_camps([camp_a], criteria, [saved_mon_tue]) == []

    def test_disjoint_weekdays_do_not_conflict(self, saved_mon_tue) -> None:
        camp = make_camp(
            "camp-a",
            "Camp A",
            sessions=[make_session(start_date="2025-06-10", end_date="2025-06-14", days_of_week=("Wednesday",))],
        )
        saved = SavedSessionRef(
            id="saved-1",
            start_date="2025-06-12",
            end_date="2025-06-16",
            start_time="09:00",
            end_time="12:00",
            days_of_week=("Tuesday",),
        )

        assert filter_camps([camp], FilterCriteria(hide_conflicts=True), [saved]) == [camp]

    def test_flag_off_keeps_conflicting_camp(self, camp_a, saved_mon_tue) -> None:
        assert filter_camps([camp_a], FilterCriteria(), [saved_mon_tue]) == [camp_a]

    def test_no_saved_sessions_is_a_no_op(self, camp_a) -> None:
        assert filter_camps([camp_a], FilterCriteria(hide_conflicts=True), []) == [camp_a]

    def test_only_conflicting_camps_are_dropped(self, camp_a, saved_mon_tue) -> None:
        other = make_camp(
            "camp-b",
            "Camp B",
            sessions=[make_session(id="b-1", start_date="2025-07-01", end_date="2025-07-05")],
        )

        result = filter_camps([camp_a, other], FilterCriteria(hide_conflicts=True), [saved_mon_tue])

        assert result == [other]


class TestSessionsConflict:
    def test_disjoint_times_do_not_conflict(self, saved_mon_tue) -> None:
        session = make_session(start_time="13:00", end_time="15:00", days_of_week=("Monday",))
        assert sessions_conflict(session, saved_mon_tue) is False

    def test_back_to_back_times_do_not_conflict(self, saved_mon_tue) -> None:
        session = make_session(start_time="12:00", end_time="15:00", days_of_week=("Monday",))
        assert sessions_conflict(session, saved_mon_tue) is False

    def test_missing_time_skips_time_check(self, saved_mon_tue) -> None:
        """Without times on one side, dates and weekdays alone decide."""
        session = make_session(start_time=None, end_time=None, days_of_week=("Monday",))

        assert times_overlap(session, saved_mon_tue) is None
        assert sessions_conflict(session, saved_mon_tue) is True

    def test_disjoint_dates_do_not_conflict(self, saved_mon_tue) -> None:
        session = make_session(start_date="2025-06-01", end_date="2025-06-05", days_of_week=("Monday",))
        assert sessions_conflict(session, saved_mon_tue) is False

    def test_missing_dates_never_conflict(self, saved_mon_tue) -> None:
        session = make_session(start_date=None, days_of_week=("Monday",))
        assert sessions_conflict(session, saved_mon_tue) is False

    def test_empty_weekdays_never_conflict(self, saved_mon_tue) -> None:
        session = make_session(days_of_week=())
        assert weekdays_intersect(session, saved_mon_tue) is False
        assert sessions_conflict(session, saved_mon_tue) is False

    def test_weekday_spelling_is_normalized(self, saved_mon_tue) -> None:
        session = make_session(days_of_week=("mon",))
        assert weekdays_intersect(session, saved_mon_tue) is True


class TestDateOverlapSymmetry:
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (("2025-06-10", "2025-06-14"), ("2025-06-12", "2025-06-16")),
            (("2025-06-10", "2025-06-14"), ("2025-06-14", "2025-06-20")),
            (("2025-06-10", "2025-06-14"), ("2025-06-15", "2025-06-20")),
            (("2025-06-01", "2025-06-30"), ("2025-06-10", "2025-06-12")),
            (("2025-06-10", "2025-06-10"), ("2025-06-10", "2025-06-10")),
        ],
    )
    def test_overlap_is_symmetric(self, a: tuple[str, str], b: tuple[str, str]) -> None:
        first = make_session(start_date=a[0], end_date=a[1])
        second = make_session(start_date=b[0], end_date=b[1])

        assert dates_overlap(first, second) == dates_overlap(second, first)

    def test_range_filter_agrees_with_session_overlap(self) -> None:
        session = make_session(start_date="2025-06-10", end_date="2025-06-14")
        as_range = make_session(start_date="2025-06-14", end_date="2025-06-20")

        assert session_in_date_range("2025-06-10", "2025-06-14", "2025-06-14", "2025-06-20") is True
        assert session_in_date_range("2025-06-14", "2025-06-20", "2025-06-10", "2025-06-14") is True
        assert dates_overlap(session, as_range) is True
