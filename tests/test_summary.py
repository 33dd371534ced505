"""Tests for headline metrics and their fallbacks."""

import pytest

from analytics.summary import (
    FALLBACK_IDENTIFIED,
    FALLBACK_MATCHES,
    FALLBACK_MEETINGS,
    FALLBACK_PARTICIPANTS,
    FALLBACK_SATISFACTION,
    PEAK,
    compute_summary,
    mean_satisfaction,
    round_half_up,
)
from core.records import Match, Meeting, Participant
from core.state import Collections


def _participants(*pairs):
    return tuple(
        Participant(id=f"p{i}", is_identified=flag, satisfaction=score)
        for i, (flag, score) in enumerate(pairs)
    )


class TestFallbacks:
    def test_empty_collections_use_literals(self):
        s = compute_summary(Collections())
        assert s.total_participants == FALLBACK_PARTICIPANTS == 150
        assert s.total_identified == FALLBACK_IDENTIFIED == 29
        assert s.total_matches == FALLBACK_MATCHES == 160
        assert s.avg_satisfaction == FALLBACK_SATISFACTION == 78
        assert s.total_meetings == FALLBACK_MEETINGS == 18
        assert s.peak == PEAK == 4.3

    def test_identified_share_under_fallbacks(self):
        assert compute_summary(Collections()).identified_pct == 19

    def test_each_metric_falls_back_independently(self):
        s = compute_summary(Collections(matches=(Match(id="m1"),)))
        assert s.total_matches == 1
        assert s.total_participants == 150
        assert s.total_meetings == 18


class TestParticipantMetrics:
    def test_average_of_80_and_90_is_85(self):
        s = compute_summary(Collections(participants=_participants((True, 80), (False, 90))))
        assert s.avg_satisfaction == 85

    def test_all_zero_satisfaction_is_not_replaced(self):
        s = compute_summary(Collections(participants=_participants((True, 0), (True, 0))))
        assert s.avg_satisfaction == 0

    def test_identified_counts_only_flagged(self):
        s = compute_summary(Collections(participants=_participants((True, 50), (False, 50), (True, 50))))
        assert s.total_participants == 3
        assert s.total_identified == 2
        assert s.identified_pct == 67

    def test_no_identified_participants_falls_back(self):
        s = compute_summary(Collections(participants=_participants((False, 70))))
        assert s.total_participants == 1
        assert s.total_identified == FALLBACK_IDENTIFIED == 29
        assert s.avg_satisfaction == 70

    def test_identified_share_capped_at_100(self):
        s = compute_summary(Collections(participants=_participants((False, 70), (False, 60))))
        assert s.identified_pct == 100

    def test_missing_satisfaction_counts_as_zero(self):
        s = compute_summary(Collections(participants=(Participant(id="a"), Participant(id="b", satisfaction=50))))
        assert s.avg_satisfaction == 25


class TestRounding:
    @pytest.mark.parametrize("value,expected", [(84.5, 85), (2.5, 3), (2.49, 2), (0.0, 0)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_mean_rounds_half_up(self):
        assert mean_satisfaction([80, 81]) == 81

    def test_mean_of_nothing_raises(self):
        with pytest.raises(ValueError):
            mean_satisfaction([])


def test_as_dict_is_json_ready():
    d = compute_summary(Collections(meetings=(Meeting(id="x"),))).as_dict()
    assert d["total_meetings"] == 1
    assert set(d) == {
        "total_participants",
        "total_identified",
        "identified_pct",
        "total_matches",
        "avg_satisfaction",
        "total_meetings",
        "peak",
    }
