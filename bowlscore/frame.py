"""A single bowling frame, its rule checks and interactive entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .errors import GameError

MAX_PINS = 10
LAST_FRAME = 9

FIRST_TOO_HIGH = "Caught Game Rule Exception : First Try Input Pin Score More then 10...!"
SECOND_TOO_HIGH = "Caught Game Rule Exception : Second Try Input Pin Score More then 10...!"
SUM_TOO_HIGH = (
    "Caught Game Rule Exception : First & Second(First Score + Second Score) "
    "Try Input Pin Score More then 10...!"
)

FIRST_PROMPT = "Enter a Pin Score For First Try Between 0 to 10: "
THIRD_PROMPT = "Enter a Pin Score For Third Try Between 0 to 10: "
INVALID_INTEGER = "Invalid input. Please enter an integer: "

Reader = Callable[[], str]
Writer = Callable[[str], object]


@dataclass
class Frame:
    """Pins knocked down in one frame, plus its flags, bonuses and running score."""

    frame_id: int = 0
    first: int = 0
    second: int = 0
    third: int = 0
    is_spare: bool = False
    is_strike: bool = False
    score: int = 0
    spare_bonus: int = 0
    strike_bonus: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise GameError if the first two tries break the pin limits."""
        if not 0 <= self.first <= MAX_PINS:
            raise GameError(FIRST_TOO_HIGH)
        if not 0 <= self.second <= MAX_PINS:
            raise GameError(SECOND_TOO_HIGH)
        if self.first + self.second > MAX_PINS:
            raise GameError(SUM_TOO_HIGH)

    def mark_flags(self) -> None:
        """Set the strike or spare flag from the pin counts."""
        if self.first == MAX_PINS:
            self.is_strike = True
            self.second = 0
        elif self.first < MAX_PINS and self.second <= MAX_PINS:
            if self.first + self.second == MAX_PINS:
                self.is_spare = True


def read_pin_score(prompt: str, read: Reader, write: Writer) -> int:
    """Prompt once, then read lines until one holds a non-negative integer."""
    write(prompt)
    while True:
        text = read().strip()
        if text.isascii() and text.isdigit():
            return int(text)
        write(INVALID_INTEGER)


def prompt_frame(index: int, read: Reader, write: Writer) -> Frame:
    """Ask for the tries of frame ``index`` until they obey the rules."""
    write(f"Frame Number : {index + 1}\n")
    frame = Frame(frame_id=index)

    while True:
        frame.first = read_pin_score(FIRST_PROMPT, read, write)
        try:
            frame.validate()
        except GameError as exc:
            write(f"{exc}\n")
            frame.first = 0
        else:
            break

    if frame.first == MAX_PINS:
        frame.is_strike = True
        frame.second = 0
    else:
        while True:
            prompt = f"Enter a Pin Score For Second Try Between 0 to {MAX_PINS - frame.first}: "
            frame.second = read_pin_score(prompt, read, write)
            try:
                frame.validate()
            except GameError as exc:
                write(f"{exc}\n")
                frame.second = 0
            else:
                if frame.first + frame.second == MAX_PINS:
                    frame.is_spare = True
                break

    if index == LAST_FRAME and (frame.is_spare or frame.is_strike):
        frame.third = read_pin_score(THIRD_PROMPT, read, write)

    return frame