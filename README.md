# bowlscore

A ten-pin bowling score keeper. It records the pins knocked down in each
frame, marks strikes and spares, adds their bonuses and keeps a running
score for every frame.

## Installing

```
pip install .
```

## Playing from the console

```
bowlscore
```

The command prints a banner and first runs a built-in self-test. It scores
two sample games and reports, frame by frame, whether each running score
came out as expected. It also tries three invalid sample games (a first try
above ten, a second try above ten, more than ten frames) and prints the rule
message each one raises.

It then asks for a player name, made of letters only, and for the pins
knocked down in each of the ten frames:

- the first try takes 0 to 10 pins; ten is a strike and ends the frame;
- the second try takes at most the pins still standing; clearing them all
  is a spare;
- in the tenth frame a strike or a spare earns a third try.

Entries that are not whole numbers are asked for again; entries that break
a pin limit are rejected with a rule message and asked for again. When all
ten frames are in, the score sheet of every player, including the self-test
players, is printed, and the program waits for one more line before it
exits. If standard input ends early the command stops and exits with a
non-zero status.

## Using it as a library

```python
from bowlscore.frame import Frame
from bowlscore.player import Player
from bowlscore.game import BowlingGame

player = Player("Alice")
for index, pins in enumerate([(10, 0), (4, 5)]):
    frame = Frame(index, *pins)
    frame.mark_flags()
    player.add_frame(frame)

game = BowlingGame()
game.add_player(player)
game.calculate_scores()
print([frame.score for frame in player.frames])  # [19, 28]
print(game.report())
```

- `bowlscore.frame.Frame` holds the pins of one frame (`first`, `second`,
  `third`), its `is_strike` / `is_spare` flags, its `spare_bonus`,
  `strike_bonus` and running `score`. It checks its pins when built and
  `Frame.validate()` raises `bowlscore.errors.GameError` when a try is out of
  range or the first two tries together exceed ten pins.
  `Frame.mark_flags()` sets the strike or spare flag from the pins; flags are
  not set automatically.
- `bowlscore.frame.read_pin_score()` and `bowlscore.frame.prompt_frame()`
  read a try or a whole frame through the `read` and `write` callables you
  pass in.
- `bowlscore.player.Player` keeps a name and up to ten frames.
  `Player.add_frame()` stores a copy of the frame and raises `GameError` once
  more than ten are held. `Player.calculate_scores()` fills in the running
  scores and bonuses, and raises `GameError` if the player has no frames.
  `Player.previous_frame_score()` returns the stored score of a frame.
  `bowlscore.player.prompt_player_name()` asks for a letters-only name.
- `bowlscore.game.BowlingGame` collects players. `calculate_scores()`
  scores them all, `report()` returns the score sheet as text,
  `run_self_test(write)` runs the sample games and returns, per sample
  player, a list of pass/fail results for each frame, and
  `play(read, write)` runs one interactive game and returns the player.

## Scoring details

A strike earns ten plus both tries of the following frame; a spare earns ten
plus the first try of the following frame. When the following frame has not
been added yet, only the ten is counted. In the tenth frame a strike or
spare scores the sum of its three tries.

## What it does not do

Scores are kept in memory only: nothing is saved between runs, and the
console game takes a single player per run.

## Running the tests

```
pip install .[test]
pytest
```