import io
import sys

import pytest

from bowlscore.errors import GameError
from bowlscore.frame import Frame
from bowlscore.game import BowlingGame, main
from bowlscore.player import Player


def _reader(lines):
    items = iter(lines)
    return lambda: next(items)


def _collect():
    out = []
    return out, out.append


def test_self_test_all_frames_pass():
    game = BowlingGame()
    _, write = _collect()
    results = game.run_self_test(write)
    assert set(results) == {"Test Player1", "Test Player2"}
    assert all(results["Test Player1"]) and len(results["Test Player1"]) == 10
    assert all(results["Test Player2"]) and len(results["Test Player2"]) == 10


def test_self_test_scores_match_source_values():
    game = BowlingGame()
    _, write = _collect()
    game.run_self_test(write)
    assert [p.name for p in game.players] == ["Test Player1", "Test Player2"]
    assert [f.score for f in game.players[0].frames] == [5, 14, 29, 49, 60, 61, 77, 97, 117, 133]
    assert [f.score for f in game.players[1].frames] == [5, 14, 29, 39, 49, 50, 66, 76, 88, 104]


def test_self_test_reports_rule_errors():
    game = BowlingGame()
    out, write = _collect()
    results = game.run_self_test(write)
    assert sorted(results) == ["Test Player1", "Test Player2"]
    assert sum(len(checks) for checks in results.values()) == 20
    text = "".join(out)
    assert "Caught Game Rule Exception : First Try Input Pin Score More then 10...!" in text
    assert "Caught Game Rule Exception : Second Try Input Pin Score More then 10...!" in text
    assert "Caught Game Rule Exception : More then 10 Frames are Not Allowed...!" in text
    assert "Test Case Failed" not in text
    assert text.count("Test Case Passed For Frame") == 20


def test_calculate_scores_with_empty_player_raises():
    game = BowlingGame()
    game.add_player(Player("Empty"))
    with pytest.raises(GameError):
        game.calculate_scores()


def test_report_lists_frames():
    game = BowlingGame()
    player = Player("Alice")
    for index in range(10):
        player.add_frame(Frame(index, 3, 4))
    game.add_player(player)
    game.calculate_scores()
    text = game.report()
    assert " Player Name : Alice" in text
    assert text.count(" Frame Number : ") == 10
    assert text.count(" Third Try Pin Score : ") == 1
    assert f" Total Score : {player.frames[-1].score}" in text


def test_play_open_frames_sum_pins():
    game = BowlingGame()
    _, write = _collect()
    lines = ["Alice\n"] + ["3\n", "4\n"] * 10
    player = game.play(_reader(lines), write)
    assert player.name == "Alice"
    assert game.players == [player]
    scores = [f.score for f in player.frames]
    assert scores == sorted(scores)
    assert scores[-1] == sum(f.first + f.second for f in player.frames)


def test_play_retries_bad_name_and_pin():
    game = BowlingGame()
    out, write = _collect()
    lines = ["Al1ce\n", "Bob\n", "11\n", "2\n", "3\n"] + ["0\n", "0\n"] * 9
    player = game.play(_reader(lines), write)
    text = "".join(out)
    assert player.name == "Bob"
    assert player.frames[0].first == 2
    assert "Invalid input. Please enter a Valid String : " in text
    assert "Caught Game Rule Exception : First Try Input Pin Score More then 10...!" in text


def test_play_last_frame_spare_reads_third():
    game = BowlingGame()
    _, write = _collect()
    lines = ["Carol\n"] + ["0\n", "0\n"] * 9 + ["5\n", "5\n", "7\n"]
    player = game.play(_reader(lines), write)
    last = player.frames[-1]
    assert last.is_spare
    assert last.third == 7
    assert last.spare_bonus == 7
    assert last.score == 5 + 5 + 7


def test_main_runs_session(monkeypatch, capsys):
    entry = "Bob\n" + "0\n" * 20 + "\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(entry))
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "WELCOME TO BOWLING GAME CONSOLE APPLICATION" in text
    assert " Player Name : Bob" in text
    assert "Test Case Passed For Frame 10" in text


def test_main_stops_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Enter Player Name: " in capsys.readouterr().out