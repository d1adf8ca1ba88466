"""A player's frames and the running score across them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .errors import GameError
from .frame import LAST_FRAME, MAX_PINS, Frame, Reader, Writer

MAX_FRAMES = 10

TOO_MANY_FRAMES = "Caught Game Rule Exception : More then 10 Frames are Not Allowed...!"


def prompt_player_name(read: Reader, write: Writer) -> str:
    """Ask for a name made of ASCII letters only, repeating until one is given."""
    write("Enter Player Name: ")
    name = read().rstrip("\r\n")
    while not all(char.isascii() and char.isalpha() for char in name):
        write("Invalid input. Please enter a Valid String : ")
        name = read().rstrip("\r\n")
    return name


@dataclass
class Player:
    """A named player with up to ten frames."""

    name: str = ""
    frames: list[Frame] = field(default_factory=list)

    def add_frame(self, frame: Frame) -> None:
        """Append a copy of ``frame``; raise GameError once more than ten are held."""
        self.frames.append(copy.copy(frame))
        if len(self.frames) > MAX_FRAMES:
            raise GameError(TOO_MANY_FRAMES)

    def previous_frame_score(self, frame_id: int) -> int:
        """Running score stored for the frame at ``frame_id``."""
        return self.frames[frame_id].score

    def _spare_bonus(self, index: int) -> int:
        if index >= len(self.frames) or not self.frames[index].is_spare:
            return 0
        frame = self.frames[index]
        if index < LAST_FRAME:
            if index + 1 < len(self.frames):
                bonus = self.frames[index + 1].first
                frame.spare_bonus = bonus
                return MAX_PINS + bonus
            return MAX_PINS
        if index == LAST_FRAME:
            frame.spare_bonus = frame.third
            return frame.first + frame.second + frame.third
        return 0

    def _strike_bonus(self, index: int) -> int:
        if index >= len(self.frames) or not self.frames[index].is_strike:
            return 0
        frame = self.frames[index]
        if index < LAST_FRAME:
            if index + 1 < len(self.frames):
                following = self.frames[index + 1]
                bonus = following.first + following.second
                frame.strike_bonus = bonus
                return MAX_PINS + bonus
            return MAX_PINS
        if index == LAST_FRAME:
            frame.strike_bonus = frame.third
            return frame.first + frame.second + frame.third
        return 0

    def calculate_scores(self) -> None:
        """Fill in each frame's running score and bonuses."""
        if not self.frames:
            raise GameError(f"Run Time Exception - Frame Data for the Player {self.name} is Empty")
        for frame in self.frames:
            if frame.is_spare:
                gained = self._spare_bonus(frame.frame_id)
            elif frame.is_strike:
                gained = self._strike_bonus(frame.frame_id)
            else:
                gained = frame.first + frame.second
            previous = 0 if frame.frame_id == 0 else self.previous_frame_score(frame.frame_id - 1)
            frame.score = previous + gained