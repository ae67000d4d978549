"""Tests for the leaderboard."""

import pytest

from caravan.utils.leaderboard import Leaderboard, LeaderboardEntry


def entry(name, score, survivors=0):
    return LeaderboardEntry(
        name=name,
        score=score,
        survived=survivors > 0,
        party_survivors=survivors,
        distance_traveled=1000,
        date="1848-09-01",
    )


@pytest.fixture
def leaderboard(tmp_path):
    return Leaderboard(tmp_path / "leaderboard.json")


def test_missing_file_is_empty(leaderboard):
    assert leaderboard.get_entries() == []
    assert leaderboard.would_rank(0) == 1


def test_entries_sorted_and_persisted(leaderboard, tmp_path):
    leaderboard.add_entry(entry("Ann", 1500))
    leaderboard.add_entry(entry("Ben", 3000))
    leaderboard.add_entry(entry("Cal", 2000))

    reopened = Leaderboard(tmp_path / "leaderboard.json")
    assert [e.name for e in reopened.get_entries()] == ["Ben", "Cal", "Ann"]


def test_survivors_break_ties(leaderboard):
    leaderboard.add_entry(entry("Ann", 2000, survivors=1))
    leaderboard.add_entry(entry("Ben", 2000, survivors=3))

    assert [e.name for e in leaderboard.get_entries()] == ["Ben", "Ann"]


def test_capped_at_ten(leaderboard):
    for score in range(100, 1300, 100):
        leaderboard.add_entry(entry(f"P{score}", score))

    entries = leaderboard.get_entries()
    assert len(entries) == 10
    assert entries[0].score == 1200
    assert entries[-1].score == 300
    assert [e.score for e in leaderboard.get_top(3)] == [1200, 1100, 1000]


def test_would_rank(leaderboard):
    for score in range(100, 1100, 100):
        leaderboard.add_entry(entry(f"P{score}", score))

    assert leaderboard.would_rank(5000) == 1
    assert leaderboard.would_rank(550) == 6
    assert leaderboard.would_rank(100) is None
    assert leaderboard.would_rank(50) is None


def test_equal_score_ranks_below(leaderboard):
    leaderboard.add_entry(entry("Ann", 500))

    assert leaderboard.would_rank(500) == 2


def test_get_rank(leaderboard):
    leaderboard.add_entry(entry("Ann", 500))
    leaderboard.add_entry(entry("Ben", 700))

    assert leaderboard.get_rank(500) == 2
    assert leaderboard.get_rank(999) is None


def test_malformed_file_is_empty(tmp_path):
    path = tmp_path / "leaderboard.json"
    path.write_text("{not json")

    assert Leaderboard(path).get_entries() == []

    path.write_text('[{"name": "Ann"}]')
    assert Leaderboard(path).get_entries() == []


def test_clear(leaderboard):
    leaderboard.add_entry(entry("Ann", 500))

    leaderboard.clear()

    assert leaderboard.get_entries() == []
    assert not leaderboard.path.exists()
