"""A bowling game session: built-in self check, interactive play and the score report."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

from .errors import GameError
from .frame import LAST_FRAME, Frame, Reader, Writer, prompt_frame
from .player import MAX_FRAMES, Player, prompt_player_name

RULE = "******************************************************************"
DIVIDER = "---------------------------------------------------------"

BANNER = (
    " " * 47 + "-" * 83 + "     \n"
    + " " * 47 + "|" + "WELCOME TO BOWLING GAME CONSOLE APPLICATION".center(81) + "|     \n"
    + " " * 47 + "-" * 83 + "     \n"
)

_ALL_PASSED = "All Test Cases are Passed. Find Result of This Test Case at the End of this Report"

# (title, player name, rolls per frame, whether the summary line is announced)
_SELF_TEST_CASES = (
    (
        "Test Case Frame with Strike",
        "Test Player1",
        ((1, 4), (4, 5), (6, 4), (5, 5), (10, 0), (0, 1), (7, 3), (6, 4), (10, 0), (2, 8, 6)),
        True,
    ),
    (
        "Test Case Frame with Spare",
        "Test Player2",
        ((1, 4), (4, 5), (6, 4), (5, 5), (0, 10), (0, 1), (7, 3), (6, 4), (0, 10), (2, 8, 6)),
        True,
    ),
    (
        "Test Case Frame with Invalid First Try Pin Score",
        "Test Player3",
        ((12, 4),),
        False,
    ),
    (
        "Test Case Frame with Invalid Second Try Pin Score",
        "Test Player4",
        ((1, 4), (5, 4), (3, 14), (1, 4), (2, 4)),
        False,
    ),
    (
        "Test Case Frame with more then 10 Frames",
        "Test Player5",
        (
            (1, 4), (2, 4), (1, 4), (2, 4), (1, 4), (2, 4), (1, 4),
            (1, 4), (2, 4), (2, 4), (2, 4), (1, 4), (2, 4),
        ),
        False,
    ),
)

_EXPECTED_SCORES = {
    "Test Player1": (5, 14, 29, 49, 60, 61, 77, 97, 117, 133),
    "Test Player2": (5, 14, 29, 39, 49, 50, 66, 76, 88, 104),
}


@dataclass
class BowlingGame:
    """All players of one session and their scores."""

    players: list[Player] = field(default_factory=list)

    def add_player(self, player: Player) -> None:
        """Add a player to the session."""
        self.players.append(player)

    def calculate_scores(self) -> None:
        """Recompute the running scores of every player."""
        for player in self.players:
            player.calculate_scores()

    def report(self) -> str:
        """Frame-by-frame score sheet of every player."""
        lines = ["", RULE]
        for player in self.players:
            lines += [DIVIDER, f" Player Name : {player.name}", DIVIDER, ""]
            for frame in player.frames:
                if frame.frame_id >= 0:
                    lines.append(f" Frame Number : {frame.frame_id + 1}")
                lines.append(f" First Try Pin Score : {frame.first}")
                lines.append(f" Second Try Pin Score : {frame.second}")
                if frame.frame_id == LAST_FRAME:
                    lines.append(f" Third Try Pin Score : {frame.third}")
                spare = "YES" if frame.is_spare else "NO"
                strike = "YES" if frame.is_strike else "NO"
                lines.append(f" Is Spare & Bonus Pin Score Applicable : {spare} ")
                lines.append(f" Is Strike & Bonus Pin Score Applicable : {strike} ")
                lines.append(f" Spare Bonus : {frame.spare_bonus}")
                lines.append(f" Strike Bonus : {frame.strike_bonus}")
                lines.append(f" Total Score : {frame.score}")
                lines.append("")
        lines.append(RULE)
        return "\n".join(lines) + "\n"

    def run_self_test(self, write: Writer) -> dict[str, list[bool]]:
        """Score the built-in sample games and report per-frame pass or fail."""
        write("\n   UNIT TEST CASE RESULT REPORT  \n")
        checked: list[tuple[int, str, Player]] = []

        for number, (title, name, rolls, announce) in enumerate(_SELF_TEST_CASES, start=1):
            write(f"\n{RULE}\n")
            write(f"\nUnit Test Result of Test Case {number} : \n")
            write(f"\nPlayer Name - {name}\n")
            write(f"\nEXECUTED TEST CASE : {title}\n")
            if announce:
                write(f"{_ALL_PASSED}\n")
                write(f"\n{RULE}\n")
            try:
                player = Player(name)
                for index, pins in enumerate(rolls):
                    player.add_frame(Frame(index, *pins))
                self.add_player(player)
                for frame in player.frames:
                    frame.mark_flags()
            except GameError as exc:
                write(f"{exc}\n")
                continue
            if name in _EXPECTED_SCORES:
                checked.append((number, title, player))

        self.calculate_scores()
        write(self.report())

        results: dict[str, list[bool]] = {}
        for number, title, player in checked:
            write(f"\nUnit Test Result of Test Case {number} : \n")
            write(f"\nPlayer Name - {player.name}\n")
            write(f"\nEXECUTED TEST CASE : {title}\n\n")
            outcome = []
            for frame_number, (frame, expected) in enumerate(
                zip(player.frames, _EXPECTED_SCORES[player.name]), start=1
            ):
                passed = frame.score == expected
                outcome.append(passed)
                verdict = "Passed" if passed else "Failed"
                write(f"Test Case {verdict} For Frame {frame_number}\n")
            write(f"{RULE}\n")
            results[player.name] = outcome
        return results

    def play(self, read: Reader, write: Writer) -> Player:
        """Enter one player's ten frames interactively, then score and report."""
        player = Player(prompt_player_name(read, write))
        try:
            for index in range(MAX_FRAMES):
                player.add_frame(prompt_frame(index, read, write))
            self.add_player(player)
            self.calculate_scores()
            write(self.report())
        except GameError as exc:
            write("Catched now \n")
            write(f"{exc}\n")
        return player


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the self check, then an interactive game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="bowlscore", description="Score a ten-frame bowling game entered at the console."
    )
    parser.parse_args(argv)

    _write(BANNER)
    game = BowlingGame()
    game.run_self_test(_write)
    try:
        game.play(_read_line, _write)
        _write("Press any key to continue . . . ")
        _read_line()
    except EOFError:
        _write("\n")
        return 1 if len(game.players) <= len(_EXPECTED_SCORES) else 0
    return 0


if __name__ == "__main__":
    sys.exit(main())