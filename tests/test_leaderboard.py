from dataclasses import replace
from datetime import datetime, timezone

from americanformat.models.tournament import Match, PlayerStats, Round
from americanformat.tournament import (
    calculate_player_stats,
    calculate_tournament_progress,
    generate_tournament_leaderboard,
    rank_player_stats,
    record_match_score,
    validate_leaderboard_integrity,
)

NOW = datetime(2025, 6, 1, 18, 30, tzinfo=timezone.utc)


def _two_round_schedule():
    return (
        Round(
            1,
            [
                Match(1, ("A", "B"), ("C", "D"), 1, 1),
                Match(2, ("E", "F"), ("G", "H"), 1, 2),
            ],
        ),
        Round(
            2,
            [
                Match(1, ("A", "C"), ("B", "D"), 2, 3),
                Match(2, ("E", "G"), ("F", "H"), 2, 4),
            ],
        ),
    )


def _scored(rounds, *scores):
    for game, team1, team2 in scores:
        rounds, score = record_match_score(rounds, game, team1, team2)
        assert score.is_valid
    return rounds


def _stats(player, total, played):
    return PlayerStats(player=player, matches_played=played, total_points=total)


def test_unscored_schedule_lists_every_player_at_zero():
    stats = calculate_player_stats(_two_round_schedule())

    assert len(stats) == 8
    assert all(s.matches_played == 0 and s.total_points == 0 for s in stats)
    assert all(s.win_percentage == 0.0 and s.average_score == 0.0 for s in stats)
    assert [s.player for s in stats] == list("ABCDEFGH")
    assert {s.rank for s in stats} == {1}


def test_points_wins_and_averages():
    rounds = _scored(_two_round_schedule(), (1, 10, 6), (3, 12, 4))
    stats = {s.player: s for s in calculate_player_stats(rounds)}

    assert stats["A"].total_points == 22
    assert stats["A"].points_against == 10
    assert stats["A"].wins == 2
    assert stats["A"].win_percentage == 100.0
    assert stats["A"].average_score == 11.0

    assert stats["B"].total_points == 14
    assert stats["B"].wins == 1
    assert stats["B"].win_percentage == 50.0

    assert stats["D"].total_points == 10
    assert stats["D"].wins == 0

    assert stats["E"].matches_played == 0


def test_tied_match_is_a_win_for_nobody():
    rounds = _scored(_two_round_schedule(), (1, 8, 8))
    stats = {s.player: s for s in calculate_player_stats(rounds)}

    for player in "ABCD":
        assert stats[player].matches_played == 1
        assert stats[player].total_points == 8
        assert stats[player].wins == 0


def test_ranking_order_and_shared_ranks():
    ranked = rank_player_stats(
        [
            _stats("Cleo", 20, 2),
            _stats("Ana", 30, 2),
            _stats("Ben", 30, 2),
        ]
    )

    assert [s.player for s in ranked] == ["Ana", "Ben", "Cleo"]
    assert [s.rank for s in ranked] == [1, 1, 3]


def test_matches_played_breaks_points_tie():
    ranked = rank_player_stats([_stats("Ana", 30, 2), _stats("Ben", 30, 3)])

    assert [s.player for s in ranked] == ["Ben", "Ana"]
    assert [s.rank for s in ranked] == [1, 2]


def test_leaderboard_metadata():
    rounds = _scored(_two_round_schedule(), (1, 10, 6), (2, 9, 7))
    leaderboard = generate_tournament_leaderboard(rounds, now=NOW)

    assert leaderboard.last_updated == NOW
    assert leaderboard.total_matches == 4
    assert leaderboard.completed_matches == 2
    assert not leaderboard.is_complete
    assert leaderboard.players[0].total_points == 10
    assert leaderboard.get_player("H").total_points == 7
    assert leaderboard.get_player("Zoe") is None


def test_leaderboard_complete_when_every_match_scored():
    rounds = _scored(
        _two_round_schedule(), (1, 10, 6), (2, 9, 7), (3, 8, 8), (4, 16, 0)
    )
    leaderboard = generate_tournament_leaderboard(rounds, now=NOW)

    assert leaderboard.is_complete
    assert validate_leaderboard_integrity(leaderboard, rounds)


def test_default_timestamp_is_utc():
    leaderboard = generate_tournament_leaderboard(_two_round_schedule())

    assert leaderboard.last_updated.tzinfo is not None


def test_integrity_rejects_reordered_leaderboard():
    rounds = _scored(_two_round_schedule(), (1, 10, 6), (3, 12, 4))
    leaderboard = generate_tournament_leaderboard(rounds, now=NOW)
    reversed_board = replace(leaderboard, players=tuple(reversed(leaderboard.players)))

    assert validate_leaderboard_integrity(leaderboard, rounds)
    assert not validate_leaderboard_integrity(reversed_board, rounds)


def test_integrity_rejects_missing_player():
    rounds = _two_round_schedule()
    leaderboard = generate_tournament_leaderboard(rounds, now=NOW)
    partial = replace(leaderboard, players=leaderboard.players[:-1])

    assert not validate_leaderboard_integrity(partial, rounds)


def test_leaderboard_serialization():
    rounds = _scored(_two_round_schedule(), (1, 10, 6))
    data = generate_tournament_leaderboard(rounds, now=NOW).to_dict()

    assert data["lastUpdated"] == "2025-06-01T18:30:00+00:00"
    assert data["completedMatches"] == 1
    assert data["players"][0]["totalPoints"] == 10
    assert data["players"][0]["matchesPlayed"] == 1


def test_progress_half_played():
    rounds = (
        Round(
            1,
            [
                Match(1, ("A", "B"), ("C", "D"), 1, 1),
                Match(2, ("E", "F"), ("G", "H"), 1, 2),
            ],
        ),
    )
    rounds = _scored(rounds, (1, 10, 6))
    progress = calculate_tournament_progress(rounds)

    assert progress.total_matches == 2
    assert progress.completed_matches == 1
    assert progress.progress_percentage == 50.0
    assert progress.estimated_time_remaining == 13


def test_progress_of_empty_schedule():
    progress = calculate_tournament_progress(())

    assert progress.progress_percentage == 0.0
    assert progress.estimated_time_remaining == 0
