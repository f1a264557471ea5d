"""Tests for the self-play tournament."""

import csv
import dataclasses

import pytest

from kinarow.scripts.tournament import default_roster, print_results, run_tournament, write_csv
from kinarow.scripts.tournament_play import play_headless, play_record
from kinarow.scripts.tournament_records import COLUMNS, GameRecord, Team
from kinarow.scripts.tournament_standings import first_mover_score, ranked, standings

RANDOM = Team("Random", "random")
GREEDY = Team("Greedy", "greedy")


def record(game, x, o, outcome, **kw):
    return GameRecord(game=game, seed=game, size=3, win_length=3, x_team=x.name, o_team=o.name,
                      x_tier=x.tier, o_tier=o.tier, outcome=outcome, plies=9, opening=4, **kw)


class TestPlayHeadless:

    def test_minimax_mirror_draws(self):
        outcome, stats, history = play_headless("minimax", "minimax", size=3, win_length=3, seed=4)
        assert outcome == "D"
        assert len(history) == 9
        assert stats["X"]["moves"] + stats["O"]["moves"] + 1 == 9

    def test_outcome_values(self):
        for seed in range(5):
            outcome, _, history = play_headless("random", "greedy", size=3, win_length=3, seed=seed)
            assert outcome in ("X", "O", "D")
            assert history[0].player == "X"

    def test_record_fields(self):
        r = play_record(7, GREEDY, RANDOM, size=4, win_length=3, seed=2)
        assert (r.game, r.seed, r.size, r.win_length) == (7, 2, 4, 3)
        assert (r.x_team, r.o_team, r.x_tier, r.o_tier) == ("Greedy", "Random", "greedy", "random")
        assert 0 <= r.opening < 16
        assert r.plies == r.x_moves + r.o_moves + 1
        assert r.o_nodes == 0

    def test_no_opening(self):
        r = play_record(0, RANDOM, RANDOM, size=3, win_length=3, seed=1, opening_plies=0)
        assert r.opening == -1
        assert r.plies == r.x_moves + r.o_moves


class TestRecords:

    def test_score_for(self):
        assert record(0, RANDOM, GREEDY, "X").score_for("X") == 1.0
        assert record(0, RANDOM, GREEDY, "X").score_for("O") == 0.0
        assert record(0, RANDOM, GREEDY, "D").score_for("O") == 0.5

    def test_seat_of(self):
        r = record(0, RANDOM, GREEDY, "O")
        assert r.seat_of("Random") == "X"
        assert r.seat_of("Greedy") == "O"
        with pytest.raises(KeyError):
            r.seat_of("Minimax")

    def test_row_matches_columns(self):
        assert list(record(0, RANDOM, GREEDY, "D").as_row()) == COLUMNS


class TestStandings:

    def test_split_by_seat(self):
        records = [
            record(0, RANDOM, GREEDY, "X", x_moves=5, x_nodes=0, o_moves=4, o_nodes=40),
            record(1, GREEDY, RANDOM, "X", x_moves=4, x_nodes=20, o_moves=4),
            record(2, RANDOM, GREEDY, "D"),
        ]
        table = standings(records)
        r, g = table["Random"], table["Greedy"]

        assert (r.as_x.wins, r.as_x.draws, r.as_x.losses) == (1, 1, 0)
        assert (r.as_o.wins, r.as_o.draws, r.as_o.losses) == (0, 0, 1)
        assert (g.as_x.wins, g.as_o.losses, g.as_o.draws) == (1, 1, 1)
        assert r.points == g.points == 1.5
        assert r.games == g.games == 3
        assert g.nodes_per_move() == pytest.approx(60 / 8)
        assert r.nodes_per_move() == 0.0

    def test_ranked_by_points(self):
        records = [
            record(0, RANDOM, GREEDY, "X"),
            record(1, GREEDY, RANDOM, "O"),
        ]
        assert [s.name for s in ranked(standings(records))] == ["Random", "Greedy"]

    def test_ranked_tie_goes_to_o_seat_points(self):
        # one point each; Random scored it as O, Greedy as X
        records = [
            record(0, GREEDY, RANDOM, "O"),
            record(1, GREEDY, RANDOM, "X"),
        ]
        table = standings(records)
        assert table["Random"].points == table["Greedy"].points == 1.0
        assert [s.name for s in ranked(table)] == ["Random", "Greedy"]

    def test_first_mover_score(self):
        records = [record(0, RANDOM, GREEDY, "X"), record(1, GREEDY, RANDOM, "D")]
        assert first_mover_score(records) == pytest.approx(0.75)
        assert first_mover_score([]) == 0.0


class TestTournament:

    def test_round_robin_alternates_seats(self):
        records = run_tournament([RANDOM, GREEDY], size=3, games_per_pair=4, seed=9)
        assert [r.game for r in records] == [0, 1, 2, 3]
        assert [r.x_team for r in records] == ["Random", "Greedy", "Random", "Greedy"]

        table = standings(records)
        assert table["Random"].as_x.games == table["Random"].as_o.games == 2
        assert table["Random"].wins == table["Greedy"].losses

    def test_minimax_unbeaten(self):
        records = run_tournament(default_roster(), size=3, games_per_pair=2, seed=1)
        assert len(records) == 6
        assert len({r.game for r in records}) == 6
        minimax = standings(records)["Minimax"]
        assert minimax.losses == 0
        assert minimax.games == 4

    def test_board_carried_on_records(self):
        records = run_tournament([RANDOM, GREEDY], size=4, games_per_pair=2, seed=3)
        assert {(r.size, r.win_length) for r in records} == {(4, 4)}

    def test_csv_export(self, tmp_path, capsys):
        records = run_tournament([RANDOM, GREEDY], size=3, games_per_pair=2, seed=3)
        path = write_csv(records, tmp_path / "out" / "tournament_games_x.csv")

        with open(path, newline="") as f:
            reader = csv.DictReader(f)
            rows = list(reader)
        assert reader.fieldnames == COLUMNS
        assert len(rows) == 2
        assert {row["x_team"] for row in rows} == {"Random", "Greedy"}
        assert {row["outcome"] for row in rows} <= {"X", "O", "D"}

        print_results(records, "Standings")
        out = capsys.readouterr().out
        assert "Greedy" in out
        assert "first mover" in out


def test_parallel_matches_sequential():
    teams = [RANDOM, GREEDY, Team("Random2", "random")]
    seq = run_tournament(teams, size=3, games_per_pair=2, seed=5)
    par = run_tournament(teams, size=3, games_per_pair=2, seed=5, max_workers=2)

    def strip_timing(r):
        return dataclasses.replace(r, x_ms=0, o_ms=0)

    assert [strip_timing(r) for r in seq] == [strip_timing(r) for r in par]
